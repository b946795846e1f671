"""
calclex CLI - Entry point.

Tokenize expressions from the command line, mostly useful for checking an
operator vocabulary against sample input.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calclex._version import __version__
from calclex.core.errors import CalcLexError
from calclex.core.expression_lang import TokenizerConfig
from calclex.core.manifest import find_manifest, load_manifest

app = typer.Typer(
    help="Lexical analyzer for calculator expressions",
    no_args_is_help=True,
)

console = Console()


def _build_config(config_path: Path | None, operators: list[str]) -> TokenizerConfig:
    """Merge manifest operators (explicit or ./calclex.toml) with --operator flags."""
    manifest_path = config_path or find_manifest(Path.cwd())
    if manifest_path is not None:
        config = load_manifest(manifest_path).build_config()
    else:
        config = TokenizerConfig()
    config.add_operators(operators)
    return config


@app.command(name="tokenize")
def tokenize_command(
    expression: Annotated[str, typer.Argument(help="Expression to tokenize")],
    operators: Annotated[
        list[str] | None,
        typer.Option("--operator", "-o", help="Register an operator (repeatable)"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Operator manifest (default: ./calclex.toml)"),
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Print the tokens of EXPRESSION."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = _build_config(config_path, operators or [])
        tokens = list(config.tokenize(expression))
    except CalcLexError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from e

    if output_json:
        typer.echo(json.dumps([token.model_dump(mode="json") for token in tokens]))
        return

    table = Table(title=f"{len(tokens)} token(s)")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    for index, token in enumerate(tokens):
        table.add_row(str(index), token.kind.value, repr(token.text))
    console.print(table)


@app.command()
def version() -> None:
    """Show the calclex version."""
    typer.echo(f"calclex {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
