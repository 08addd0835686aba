from __future__ import annotations

import typer

from errkit import __version__
from errkit.cli.commands.catalog import catalog
from errkit.cli.commands.demo import demo
from errkit.reporting import configure_logging


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode=None,
)


# Commands
app.command()(demo)
app.command()(catalog)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug records to stderr."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    configure_logging("DEBUG" if verbose else "WARNING")


def main() -> None:
    app()
