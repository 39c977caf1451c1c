"""Parser for unit-suffixed arithmetic expressions."""

from .ast import Binary, Expression, PrimaryFloat, PrimaryInt, Quantity, Unit, UnitPow
from .grammar import parse

__all__ = [
    "Binary",
    "Expression",
    "PrimaryFloat",
    "PrimaryInt",
    "Quantity",
    "Unit",
    "UnitPow",
    "parse",
]
