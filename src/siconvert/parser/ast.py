"""Expression tree produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PrimaryInt:
    value: int


@dataclass(frozen=True)
class PrimaryFloat:
    value: float


@dataclass(frozen=True)
class Unit:
    name: str


@dataclass(frozen=True)
class UnitPow:
    name: str
    power: int


@dataclass(frozen=True)
class Quantity:
    """A value followed by a unit suffix, i.e. an implicit multiplication."""

    value: "Expression"
    unit: "Expression"


@dataclass(frozen=True)
class Binary:
    left: "Expression"
    op: str
    right: "Expression"


Expression = Union[PrimaryInt, PrimaryFloat, Unit, UnitPow, Quantity, Binary]


__all__ = [
    "Binary",
    "Expression",
    "PrimaryFloat",
    "PrimaryInt",
    "Quantity",
    "Unit",
    "UnitPow",
]
