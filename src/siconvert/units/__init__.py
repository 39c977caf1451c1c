"""Unit algebra and the fixed unit table."""

from .algebra import (
    BASE_FIELDS,
    BASE_SYMBOLS,
    DIMENSIONLESS,
    Dimension,
    Quantity,
    dimensionless,
)
from .registry import DEFAULT_REGISTRY, UnitDefinition, UnitRegistry, resolve

__all__ = [
    "BASE_FIELDS",
    "BASE_SYMBOLS",
    "DIMENSIONLESS",
    "DEFAULT_REGISTRY",
    "Dimension",
    "Quantity",
    "UnitDefinition",
    "UnitRegistry",
    "dimensionless",
    "resolve",
]
