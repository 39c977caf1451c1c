"""Command-line interface for siconvert."""

from __future__ import annotations

import logging
from typing import Tuple

import click

from ..calculator import calculate
from ..errors import ConvertError
from ..formatting import format_quantity
from ..settings import log_level
from ..units.registry import DEFAULT_REGISTRY

PROMPT = ">> "
_EXIT_WORDS = {"quit", "exit"}

precision_option = click.option(
    "--precision",
    type=click.IntRange(min=1),
    default=None,
    help="Significant digits for magnitudes (overrides SICONVERT_PRECISION).",
)


def _report(exc: ConvertError) -> None:
    click.echo(f"error ({exc.stage}): {exc}", err=True)


@click.group()
def cli() -> None:
    """Evaluate arithmetic over SI unit-suffixed quantities."""

    logging.basicConfig(level=log_level(), format="[%(levelname)s] %(message)s")


@cli.command("eval")
@click.argument("expression", nargs=-1, required=True)
@precision_option
def eval_command(expression: Tuple[str, ...], precision: int | None) -> None:
    """Evaluate EXPRESSION and print the result."""

    text = " ".join(expression)
    try:
        result = calculate(text)
    except ConvertError as exc:
        _report(exc)
        raise SystemExit(1)
    click.echo(format_quantity(result, precision=precision))


@cli.command()
@precision_option
def repl(precision: int | None) -> None:
    """Read expressions line by line until EOF or 'quit'."""

    stream = click.get_text_stream("stdin")
    while True:
        click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            click.echo()
            return
        text = line.strip()
        if not text:
            continue
        if text in _EXIT_WORDS:
            return
        try:
            result = calculate(text)
        except ConvertError as exc:
            _report(exc)
            continue
        click.echo(format_quantity(result, precision=precision))


@cli.command()
def units() -> None:
    """List every known unit symbol with its SI value."""

    for symbol, quantity in DEFAULT_REGISTRY.items():
        description = DEFAULT_REGISTRY.describe(symbol)
        click.echo(f"{symbol:<6} {description:<24} {format_quantity(quantity)}")


if __name__ == "__main__":  # pragma: no cover
    cli()
