"""Read-only table of known unit symbols."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Tuple

from ..errors import UnitError
from .algebra import DIMENSIONLESS, Quantity, base_quantity


@dataclass(frozen=True)
class UnitDefinition:
    """One row of the unit table.

    ``terms`` lists ``(symbol, power)`` pairs referring to rows defined
    earlier in the table; the unit's value is ``scale`` times their product.
    """

    symbol: str
    description: str
    scale: float = 1.0
    terms: Tuple[Tuple[str, int], ...] = ()


BASE_UNITS: Tuple[Tuple[str, str, str], ...] = (
    ("m", "meter", "meter"),
    ("s", "second", "second"),
    ("mol", "mole", "mole"),
    ("A", "ampere", "ampere"),
    ("K", "kelvin", "kelvin"),
    ("cd", "candela", "candela"),
    ("kg", "kilogram", "kilogram"),
)

DERIVED_UNITS: Tuple[UnitDefinition, ...] = (
    UnitDefinition("N", "newton", terms=(("kg", 1), ("m", 1), ("s", -2))),
    UnitDefinition("Pa", "pascal", terms=(("N", 1), ("m", -2))),
    UnitDefinition("J", "joule", terms=(("N", 1), ("m", 1))),
    UnitDefinition("W", "watt", terms=(("J", 1), ("s", -1))),
    UnitDefinition("kW", "kilowatt", 1e3, (("W", 1),)),
    UnitDefinition("MW", "megawatt", 1e3, (("kW", 1),)),
    UnitDefinition("km", "kilometer", 1e3, (("m", 1),)),
    UnitDefinition("cm", "centimeter", 1e-2, (("m", 1),)),
    UnitDefinition("mm", "millimeter", 1e-3, (("m", 1),)),
    UnitDefinition("mL", "milliliter", terms=(("cm", 3),)),
    UnitDefinition("L", "liter", 1e3, (("mL", 1),)),
    UnitDefinition("ms", "millisecond", 1e-3, (("s", 1),)),
    UnitDefinition("us", "microsecond", 1e-6, (("s", 1),)),
    UnitDefinition("hr", "hour", 3600.0, (("s", 1),)),
    UnitDefinition("day", "day", 24.0, (("hr", 1),)),
    UnitDefinition("yr", "Julian year", 365.25, (("day", 1),)),
    UnitDefinition("ft", "foot", 0.3048, (("m", 1),)),
    UnitDefinition("lbf", "pound-force", 0.45359237 * 9.80665, (("kg", 1), ("m", 1), ("s", -2))),
    UnitDefinition("in", "inch", 1.0 / 12.0, (("ft", 1),)),
    UnitDefinition("thou", "thousandth of an inch", 1e-3, (("in", 1),)),
    UnitDefinition("mile", "statute mile", 5280.0, (("ft", 1),)),
    UnitDefinition("mph", "miles per hour", terms=(("mile", 1), ("hr", -1))),
)


class UnitRegistry:
    """Immutable mapping from unit symbol to its SI quantity.

    The table is evaluated once, in order. A definition may only refer to
    symbols that appear before it, so composition can never cycle.
    """

    def __init__(self, derived: Sequence[UnitDefinition] = DERIVED_UNITS) -> None:
        units: Dict[str, Quantity] = {}
        descriptions: Dict[str, str] = {}

        for symbol, description, field_name in BASE_UNITS:
            units[symbol] = base_quantity(field_name)
            descriptions[symbol] = description

        for definition in derived:
            if definition.symbol in units:
                raise UnitError(f"Unit symbol '{definition.symbol}' defined twice", definition.symbol)
            units[definition.symbol] = self._compose(definition, units)
            descriptions[definition.symbol] = definition.description

        self._units: Mapping[str, Quantity] = MappingProxyType(units)
        self._descriptions: Mapping[str, str] = MappingProxyType(descriptions)

    @staticmethod
    def _compose(definition: UnitDefinition, known: Mapping[str, Quantity]) -> Quantity:
        value = Quantity(definition.scale, DIMENSIONLESS)
        for reference, power in definition.terms:
            if reference not in known:
                raise UnitError(
                    f"Unit '{definition.symbol}' refers to '{reference}' before it is defined",
                    reference,
                )
            value = value * known[reference].pow(power)
        return value

    # ------------------------------------------------------------------
    def get(self, symbol: str) -> Quantity:
        try:
            return self._units[symbol]
        except KeyError:
            raise UnitError(f"Unknown unit symbol '{symbol}'", symbol) from None

    resolve = get

    def describe(self, symbol: str) -> str:
        self.get(symbol)
        return self._descriptions[symbol]

    def symbols(self) -> Tuple[str, ...]:
        """Return every known symbol in table order."""
        return tuple(self._units)

    def items(self) -> Iterable[Tuple[str, Quantity]]:
        return self._units.items()

    @property
    def units(self) -> Mapping[str, Quantity]:
        return self._units

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._units

    def __len__(self) -> int:
        return len(self._units)


DEFAULT_REGISTRY = UnitRegistry()


def resolve(symbol: str, *, registry: UnitRegistry | None = None) -> Quantity:
    """Look ``symbol`` up in ``registry`` (the default table when omitted)."""

    if registry is None:
        registry = DEFAULT_REGISTRY
    return registry.get(symbol)


__all__ = [
    "BASE_UNITS",
    "DEFAULT_REGISTRY",
    "DERIVED_UNITS",
    "UnitDefinition",
    "UnitRegistry",
    "resolve",
]
