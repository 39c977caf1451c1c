"""Rendering of evaluated quantities as ``<magnitude>[ <unit><exponent>]*``."""

from __future__ import annotations

import math
from typing import Dict, List

from .settings import magnitude_precision
from .units.algebra import BASE_SYMBOLS, Quantity


def format_magnitude(value: float, precision: int | None = None) -> str:
    """Format ``value``; integral values lose their trailing ``.0``."""

    if precision is not None:
        return f"{value:.{precision}g}"
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_quantity(quantity: Quantity, precision: int | None = None) -> str:
    """Return ``quantity`` as its magnitude followed by non-zero base exponents.

    Symbols appear in the fixed order ``m s mol A K cd kg``, e.g.
    ``"2 m1 s-2 kg1"``. ``precision`` falls back to ``SICONVERT_PRECISION``.
    """

    if precision is None:
        precision = magnitude_precision()
    parts: List[str] = [format_magnitude(quantity.magnitude, precision)]
    for symbol, exponent in zip(BASE_SYMBOLS, quantity.dims.as_tuple()):
        if exponent:
            parts.append(f"{symbol}{exponent}")
    return " ".join(parts)


def dimension_map(quantity: Quantity) -> Dict[str, int]:
    return quantity.dims.as_dict()


__all__ = ["dimension_map", "format_magnitude", "format_quantity"]
