"""Dimension vectors and dimension-checked quantity arithmetic.

Dimensions are integer exponent vectors over the seven SI base units, kept in
the fixed order ``(m, s, mol, A, K, cd, kg)``. :class:`Dimension` is closed
under multiplication, division and integer exponentiation. :class:`Quantity`
pairs a real magnitude with a dimension and only allows addition between
quantities whose dimensions match exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from ..errors import DimensionMismatchError, EvaluateError


BASE_FIELDS: Tuple[str, ...] = (
    "meter",
    "second",
    "mole",
    "ampere",
    "kelvin",
    "candela",
    "kilogram",
)
BASE_SYMBOLS: Tuple[str, ...] = ("m", "s", "mol", "A", "K", "cd", "kg")


@dataclass(frozen=True)
class Dimension:
    """Integer exponents of the seven SI base units."""

    meter: int = 0
    second: int = 0
    mole: int = 0
    ampere: int = 0
    kelvin: int = 0
    candela: int = 0
    kilogram: int = 0

    def __post_init__(self) -> None:
        for name in BASE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Dimension exponent {name} must be an integer, got {type(value)}")

    # -- Core algebra -----------------------------------------------------
    def __mul__(self, other: Dimension) -> Dimension:
        """Multiply two dimensions by adding their exponent vectors."""
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*[a + b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __truediv__(self, other: Dimension) -> Dimension:
        """Divide two dimensions by subtracting exponent vectors."""
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(*[a - b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __pow__(self, exponent: int) -> Dimension:
        """Scale every exponent by ``exponent``."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Dimension exponent must be integer, got {type(exponent)}")
        return Dimension(*[value * exponent for value in self.as_tuple()])

    # -- Helpers ----------------------------------------------------------
    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(getattr(self, name) for name in BASE_FIELDS)

    def as_dict(self) -> Dict[str, int]:
        """Return the non-zero exponents keyed by base-unit name."""
        return {name: value for name, value in zip(BASE_FIELDS, self.as_tuple()) if value}

    def is_dimensionless(self) -> bool:
        return all(value == 0 for value in self.as_tuple())

    @classmethod
    def dimensionless(cls) -> Dimension:
        return cls()

    def __str__(self) -> str:
        if self.is_dimensionless():
            return "dimensionless"
        return " ".join(
            f"{symbol}{power}"
            for symbol, power in zip(BASE_SYMBOLS, self.as_tuple())
            if power
        )


DIMENSIONLESS = Dimension.dimensionless()


def _finite(magnitude: float, op: str) -> float:
    if math.isinf(magnitude):
        raise EvaluateError(f"overflow evaluating '{op}': magnitude out of range")
    return magnitude


@dataclass(frozen=True)
class Quantity:
    """A real magnitude paired with a dimension vector."""

    magnitude: float
    dims: Dimension = DIMENSIONLESS

    def __post_init__(self) -> None:
        object.__setattr__(self, "magnitude", float(self.magnitude))

    def __add__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dims != other.dims:
            raise DimensionMismatchError(self, other)
        return Quantity(_finite(self.magnitude + other.magnitude, "+"), self.dims)

    def __sub__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> Quantity:
        return self * -1.0

    def __mul__(self, other: Quantity | float | int) -> Quantity:
        if isinstance(other, Quantity):
            return Quantity(_finite(self.magnitude * other.magnitude, "*"), self.dims * other.dims)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Quantity(_finite(self.magnitude * other, "*"), self.dims)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self * other.pow(-1)

    def pow(self, exponent: int) -> Quantity:
        """Raise the magnitude to ``exponent`` and scale the dimension by it."""
        try:
            magnitude = self.magnitude ** exponent
        except ZeroDivisionError as exc:
            raise EvaluateError(f"cannot raise zero quantity {self} to power {exponent}") from exc
        except OverflowError as exc:
            raise EvaluateError(f"overflow raising {self} to power {exponent}") from exc
        return Quantity(magnitude, self.dims ** exponent)

    __pow__ = pow

    def inverse(self) -> Quantity:
        return self.pow(-1)

    def is_dimensionless(self) -> bool:
        return self.dims.is_dimensionless()

    def __str__(self) -> str:
        if self.dims.is_dimensionless():
            return repr(self.magnitude)
        return f"{self.magnitude!r} {self.dims}"


def dimensionless(value: float) -> Quantity:
    return Quantity(value, DIMENSIONLESS)


def base_quantity(field_name: str) -> Quantity:
    """Return magnitude 1 with a single exponent of 1 on ``field_name``."""
    if field_name not in BASE_FIELDS:
        raise KeyError(field_name)
    return Quantity(1.0, Dimension(**{field_name: 1}))


__all__ = [
    "BASE_FIELDS",
    "BASE_SYMBOLS",
    "DIMENSIONLESS",
    "Dimension",
    "Quantity",
    "base_quantity",
    "dimensionless",
]
