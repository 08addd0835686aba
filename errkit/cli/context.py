from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import typer

from errkit.core.config import Config, load_config
from errkit.core.result import Err
from errkit.messages.catalog import DEFAULT_CATALOG, MessageCatalog, load_catalog
from errkit.output.console import ConsoleProtocol, RichConsole
from errkit.output.errors import load_error_exit_code, print_load_error
from errkit.services.diagnostics import ErrorDiagnostics

DEFAULT_CONFIG_NAME = "errkit.toml"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    catalog: MessageCatalog
    console: ConsoleProtocol
    diagnostics: ErrorDiagnostics = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "diagnostics", ErrorDiagnostics(config=self.config, catalog=self.catalog))


def build_context(
    config_path: Path | None = None,
    catalog_path: Path | None = None,
    console: ConsoleProtocol | None = None,
) -> CLIContext:
    """Load config and catalog, exiting with a mapped code on failure.

    Without an explicit path, `errkit.toml` in the working directory is used
    when present.
    """
    out = console or RichConsole()

    config = Config()
    path = config_path
    if path is None and Path(DEFAULT_CONFIG_NAME).is_file():
        path = Path(DEFAULT_CONFIG_NAME)
    if path is not None:
        config_result = load_config(path)
        if isinstance(config_result, Err):
            print_load_error(config_result.error, out)
            raise typer.Exit(code=load_error_exit_code(config_result.error))
        config = config_result.value

    catalog = DEFAULT_CATALOG
    if catalog_path is not None:
        catalog_result = load_catalog(catalog_path)
        if isinstance(catalog_result, Err):
            print_load_error(catalog_result.error, out)
            raise typer.Exit(code=load_error_exit_code(catalog_result.error))
        catalog = catalog_result.value

    return CLIContext(config=config, catalog=catalog, console=out)
