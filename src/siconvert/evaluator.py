"""Tree-walking evaluator producing dimension-checked quantities."""

from __future__ import annotations

import logging

from .errors import EvaluateError, UnitError
from .parser import ast as nodes
from .units.algebra import Quantity, dimensionless
from .units.registry import UnitRegistry, resolve

logger = logging.getLogger(__name__)


def evaluate(expression: nodes.Expression, *, registry: UnitRegistry | None = None) -> Quantity:
    """Evaluate ``expression`` into a :class:`Quantity`.

    Unknown unit names surface as :class:`EvaluateError` chained to the
    underlying :class:`UnitError`. Adding quantities with different
    dimensions raises :class:`~siconvert.errors.DimensionMismatchError`.
    """

    if isinstance(expression, (nodes.PrimaryInt, nodes.PrimaryFloat)):
        try:
            return dimensionless(expression.value)
        except OverflowError as exc:
            raise EvaluateError("numeric literal is out of range") from exc

    if isinstance(expression, nodes.Unit):
        return _lookup(expression.name, registry)

    if isinstance(expression, nodes.UnitPow):
        return _lookup(expression.name, registry).pow(expression.power)

    if isinstance(expression, nodes.Quantity):
        return evaluate(expression.value, registry=registry) * evaluate(expression.unit, registry=registry)

    if isinstance(expression, nodes.Binary):
        return _evaluate_binary(expression, registry)

    raise EvaluateError(f"cannot evaluate node {expression!r}")


def _evaluate_binary(expression: nodes.Binary, registry: UnitRegistry | None) -> Quantity:
    op = expression.op
    if op not in ("+", "-", "*", "/"):
        raise EvaluateError(f"bad operator {op!r}")

    left = evaluate(expression.left, registry=registry)
    right = evaluate(expression.right, registry=registry)

    if op == "-":
        right, op = -right, "+"
    elif op == "/":
        right, op = right.inverse(), "*"

    if op == "+":
        return left + right
    return left * right


def _lookup(name: str, registry: UnitRegistry | None) -> Quantity:
    try:
        return resolve(name, registry=registry)
    except UnitError as exc:
        logger.debug("unit lookup failed for %r", name)
        raise EvaluateError(exc.message) from exc


__all__ = ["evaluate"]
