"""
calcline CLI - Entry point.

Commands:
- repl: interactive line-by-line calculator (reads stdin until EOF)
- eval: evaluate expressions given as arguments
- tree: print the parsed tree of one expression
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from calcline._version import get_version
from calcline.config import CalclineConfig, load_config
from calcline.core.errors import ConfigError
from calcline.core.expression_lang import format_tree, parse
from calcline.repl import EXIT_INPUT_ERROR, EXIT_OK, Session

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Module-level log level set by the callback
_log_level_override: str | None = None


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcline version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


app = typer.Typer(
    help="""calcline - single-line arithmetic calculator

Integers, + - * /, usual precedence, left to right.

  • repl   read expressions from stdin, one per line
  • eval   evaluate expressions given on the command line
  • tree   show how an expression is parsed
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            envvar="CALCLINE_LOG_LEVEL",
            help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides the config file.",
        ),
    ] = None,
) -> None:
    """calcline CLI main callback for global options."""
    global _log_level_override
    _log_level_override = log_level


def _load(config_path: Path | None, **overrides: object) -> CalclineConfig:
    """Load configuration and set up logging, exiting on bad config."""
    try:
        config = load_config(config_path, log_level=_log_level_override, **overrides)
    except ConfigError as e:
        err_console.print(f"error: {e.message}", markup=False, soft_wrap=True)
        raise typer.Exit(code=2) from e

    logging.basicConfig(
        level=config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("loaded config: %s", config.model_dump())
    return config


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML config file (default: ./calcline.toml if present)"),
]
FormatOption = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Number format spec, e.g. g, .3f, e"),
]


@app.command(name="repl")
def repl_command(
    config_path: ConfigOption = None,
    tree: Annotated[
        bool | None, typer.Option("--tree/--no-tree", help="Print the parsed tree before each result")
    ] = None,
    prompt: Annotated[str | None, typer.Option("--prompt", help="Prompt text")] = None,
    number_format: FormatOption = None,
) -> None:
    """Read expressions from stdin, one per line, until end of input."""
    config = _load(config_path, show_tree=tree, prompt=prompt, number_format=number_format)
    session = Session(config, console=console, err_console=err_console)
    code = session.run(sys.stdin)
    raise typer.Exit(code=code)


@app.command(name="eval")
def eval_command(
    expressions: Annotated[list[str], typer.Argument(help="Expressions to evaluate")],
    config_path: ConfigOption = None,
    tree: Annotated[
        bool | None, typer.Option("--tree/--no-tree", help="Print the parsed tree before each result")
    ] = None,
    number_format: FormatOption = None,
) -> None:
    """Evaluate each expression and print one result per line."""
    config = _load(config_path, show_tree=tree, number_format=number_format)
    session = Session(config, console=console, err_console=err_console)

    failed = False
    for expression in expressions:
        outcome = session.evaluate_line(expression, skip_blank=False)
        if outcome is None:
            raise AssertionError("evaluate_line returned nothing with skip_blank=False")
        session.report(outcome)
        failed = failed or not outcome.ok

    raise typer.Exit(code=EXIT_INPUT_ERROR if failed else EXIT_OK)


@app.command(name="tree")
def tree_command(
    expression: Annotated[str, typer.Argument(help="Expression to parse")],
    config_path: ConfigOption = None,
    number_format: FormatOption = None,
) -> None:
    """Print the parsed tree: operator, then left and right operands indented."""
    config = _load(config_path, number_format=number_format)

    result = parse(expression)
    if result.error is not None:
        err_console.print(f"error: {result.error.message}", markup=False, soft_wrap=True)
        if result.error.context:
            err_console.print(result.error.context.format(), markup=False, soft_wrap=True)
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    console.print(format_tree(result.unwrap(), config.number_format), markup=False, soft_wrap=True)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
