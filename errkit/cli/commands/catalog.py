"""Catalog command - validate a message catalog file."""

from __future__ import annotations

from pathlib import Path

import typer

from errkit.core.errors import ErrorCode
from errkit.core.result import Err
from errkit.messages.catalog import DEFAULT_CATALOG, MessageCatalog, load_catalog
from errkit.output.console import RichConsole, Style
from errkit.output.errors import load_error_exit_code, print_load_error


def catalog(
    path: Path = typer.Argument(..., help="TOML file with a [messages] table."),
    key: str | None = typer.Option(None, "--key", help="Print the message for one key."),
    only_file: bool = typer.Option(False, "--only-file", help="Do not layer over the built-in catalog."),
) -> None:
    """Check a message catalog and show what it resolves to."""
    console = RichConsole()
    base = MessageCatalog() if only_file else DEFAULT_CATALOG
    result = load_catalog(path, base=base)
    if isinstance(result, Err):
        print_load_error(result.error, console)
        raise typer.Exit(code=load_error_exit_code(result.error))

    loaded = result.value
    if key is None:
        added = sum(1 for k in loaded if k not in base)
        console.success(f"{path}: {len(loaded)} entries ({added} new)")
        return

    message = loaded.get(key)
    if message is None:
        console.error(f"no message for key: {key}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    console.print(message)
    if key in base and base[key] != message:
        console.print(f"overrides: {base[key]}", Style.DIM)
