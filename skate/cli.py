"""
Skate command line.

    skate repl      interactive read-eval-print loop
    skate eval CODE evaluate one expression and print it
    skate run FILE  evaluate every expression in a file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from skate import __version__
from skate.config import get_load_paths, get_log_level, get_strict
from skate.debug_utils.pprint import format_error, format_expr
from skate.errors import ExitRequested, SkateError
from skate.interpreter import Interpreter
from skate.reader.parser import read_all
from skate.evaluation.evaluator import evaluate
from skate.repl import Repl

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

app = typer.Typer(
    name="skate",
    help="A tiny Lisp: floats, literals and a handful of builtins.",
    no_args_is_help=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"skate {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (default from SKATE_LOG_LEVEL, else WARNING).",
    ),
) -> None:
    level = (log_level or get_log_level()).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(
            f"unknown level {level!r}, expected one of {', '.join(LOG_LEVELS)}",
            param_hint="--log-level / SKATE_LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def repl(
    prompt: str | None = typer.Option(None, "--prompt", help="Input prompt."),
    strict: bool | None = typer.Option(
        None, "--strict/--lenient", help="Reject trailing tokens after an expression."
    ),
    load: list[Path] | None = typer.Option(  # noqa: B008
        None, "--load", "-l", help="Source file to evaluate before the loop starts."
    ),
    color: bool = typer.Option(False, "--color", help="Colorize output."),
) -> None:
    """Start the interactive loop."""
    interp = Interpreter(strict=get_strict() if strict is None else strict)
    for path in [*get_load_paths(), *(load or [])]:
        try:
            interp.load(path)
        except ExitRequested as ex:
            raise typer.Exit(code=ex.status)
        except (OSError, UnicodeDecodeError, SkateError) as ex:
            typer.echo(f"Failed to load {path}: {ex}", err=True)
            raise typer.Exit(code=1)
    status = Repl(interp, prompt=prompt, color=color).run()
    raise typer.Exit(code=status)


@app.command("eval")
def eval_command(
    code: str = typer.Argument(..., help="Expression to evaluate."),
    strict: bool | None = typer.Option(
        None, "--strict/--lenient", help="Reject trailing tokens after the expression."
    ),
) -> None:
    """Evaluate one expression and print the result."""
    interp = Interpreter(strict=get_strict() if strict is None else strict)
    try:
        result = interp.eval(code)
    except ExitRequested as ex:
        raise typer.Exit(code=ex.status)
    except SkateError as ex:
        typer.echo(format_error(ex), err=True)
        raise typer.Exit(code=1)
    typer.echo(format_expr(result))


@app.command()
def run(path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Source file.")) -> None:
    """Evaluate every expression in a file, printing each result."""
    interp = Interpreter()
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        typer.echo(f"Failed to read {path}: {ex}", err=True)
        raise typer.Exit(code=1)
    try:
        for expr in read_all(source):
            typer.echo(format_expr(evaluate(expr, interp.env)))
    except ExitRequested as ex:
        raise typer.Exit(code=ex.status)
    except SkateError as ex:
        typer.echo(format_error(ex), err=True)
        raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> None:
    app(args=argv)


if __name__ == "__main__":
    main(sys.argv[1:])
