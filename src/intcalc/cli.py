"""
intcalc CLI.

Commands:
- repl: Interactive read-evaluate-print loop (the default command)
- eval: Evaluate a single expression
- tree: Show the syntax tree of a single expression
"""

from __future__ import annotations

import logging
import platform
import sys
from collections.abc import Callable
from pathlib import Path

import typer
from rich.console import Console

from intcalc import __version__
from intcalc.config import ReplConfig, find_config_file, load_repl_config
from intcalc.core.errors import ConfigError
from intcalc.core.lang import LineResult, format_tree, interpret, parse

SHOW_TREE_COMMAND = "#showTree"

app = typer.Typer(
    help="Evaluate integer arithmetic expressions with precise diagnostics",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Get intcalc version, resolved once from package metadata at import."""
    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"intcalc version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(config_path: Path | None) -> ReplConfig:
    try:
        return load_repl_config(config_path or find_config_file())
    except ConfigError as e:
        err_console.print(e.message, style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=2)


def _print_styled(text: str, style: str, config: ReplConfig) -> None:
    console.print(
        text,
        style=style if config.color else None,
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def _report(result: LineResult, config: ReplConfig) -> None:
    """Print the result of one line: value, diagnostics, or evaluation error."""
    if result.diagnostics:
        for diagnostic in result.diagnostics:
            _print_styled(diagnostic, config.error_style, config)
    elif result.error is not None:
        _print_styled(result.error, config.error_style, config)
    else:
        console.print(str(result.value), markup=False, highlight=False)


def run_repl(config: ReplConfig, read_line: Callable[[str], str] | None = None) -> None:
    """
    Read lines until end of input, evaluating each one.

    ``#showTree`` toggles printing of the syntax tree before each result.
    """
    reader = read_line or console.input
    show_tree = config.show_tree

    while True:
        try:
            line = reader(config.prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        if line.strip() == SHOW_TREE_COMMAND:
            show_tree = not show_tree
            console.print("Showing tree" if show_tree else "Not showing tree")
            continue

        result = interpret(line)
        if show_tree:
            _print_styled(format_tree(result.tree.root), config.tree_style, config)
        _report(result, config)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
) -> None:
    """intcalc CLI main callback for global options."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        run_repl(_load_config(None))


@app.command(name="repl")
def repl_command(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to intcalc.toml (default: search upwards from the working directory)",
    ),
    show_tree: bool | None = typer.Option(
        None,
        "--show-tree/--no-show-tree",
        help="Print the syntax tree of every line",
    ),
) -> None:
    """Start the interactive calculator."""
    config = _load_config(config_path)
    if show_tree is not None:
        config = config.model_copy(update={"show_tree": show_tree})
    run_repl(config)


@app.command(name="eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
    tree: bool = typer.Option(False, "--tree", "-t", help="Print the syntax tree first"),
) -> None:
    """Evaluate a single expression."""
    config = _load_config(None)
    result = interpret(expression)
    if tree:
        _print_styled(format_tree(result.tree.root), config.tree_style, config)
    _report(result, config)
    if not result.ok:
        raise typer.Exit(code=1)


@app.command(name="tree")
def tree_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Show the syntax tree of an expression, malformed or not."""
    config = _load_config(None)
    syntax_tree = parse(expression)
    _print_styled(format_tree(syntax_tree.root), config.tree_style, config)
    for diagnostic in syntax_tree.diagnostics:
        _print_styled(diagnostic, config.error_style, config)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
