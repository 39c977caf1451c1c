"""Text-to-quantity pipeline: lex, parse, then evaluate."""

from __future__ import annotations

from .errors import ConvertError
from .evaluator import evaluate
from .formatting import format_quantity
from .lexer import lex
from .observability import log_event
from .parser import parse
from .units.algebra import Quantity
from .units.registry import UnitRegistry


def calculate(text: str, *, registry: UnitRegistry | None = None) -> Quantity:
    """Evaluate the expression ``text``.

    Any :class:`~siconvert.errors.ConvertError` raised by a stage is logged
    and re-raised unchanged; no partial result is returned.
    """

    try:
        tokens = lex(text)
        expression = parse(tokens)
        result = evaluate(expression, registry=registry)
    except ConvertError as exc:
        log_event("expression failed", expression=text, ok=False, stage=exc.stage)
        raise
    log_event("expression evaluated", expression=text, ok=True)
    return result


def calculate_formatted(text: str, *, precision: int | None = None) -> str:
    return format_quantity(calculate(text), precision=precision)


__all__ = ["calculate", "calculate_formatted"]
