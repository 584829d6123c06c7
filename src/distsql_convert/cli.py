"""DistSQL Convert CLI"""

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax

from .compiler import CompilerConfig
from .converter import YamlConfigurationConverter
from .exceptions import DistSQLConvertError

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="DistSQL Convert CLI - Turn proxy YAML configuration into DistSQL statements."
)


def env_default(name: str, default: str | None = None) -> str | None:
    """Get environment variable with DISTSQL_ prefix."""
    return os.environ.get(f"DISTSQL_{name}", default)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else env_default("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def convert(
    file: Path = typer.Argument(..., help="Proxy configuration YAML file"),
    output: Optional[Path] = typer.Option(
        env_default("OUTPUT"), "--output", "-o", help="Write the script to a file; env DISTSQL_OUTPUT"
    ),
    crlf: bool = typer.Option(
        False, help="Use CRLF line breaks between statements"),
    highlight: bool = typer.Option(
        True, help="Syntax-highlight the script on the terminal"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Convert a YAML configuration file into DistSQL."""
    _configure_logging(verbose)

    try:
        config = CompilerConfig(line_separator="\r\n" if crlf else "\n")
        result = YamlConfigurationConverter(file, config).convert()
    except DistSQLConvertError as e:
        err_console.print(f"❌ Error [{e.error_code}]: {e.reason}", style="red", markup=False)
        raise typer.Exit(1)

    if not result.distsql:
        err_console.print(
            f"⚠️  No DistSQL generated for '{result.database_name}' (unsupported configuration category)",
            style="yellow", markup=False)

    if output:
        output.write_text(result.distsql, encoding="utf-8")
        console.print(f"✅ DistSQL written to {output}")
    elif highlight and console.is_terminal:
        console.print(Syntax(result.distsql, "sql"))
    else:
        typer.echo(result.distsql, nl=False)


@app.command()
def version():
    """Show version information."""
    from . import __version__
    console.print(f"DistSQL Convert v{__version__}")


if __name__ == "__main__":
    app()
