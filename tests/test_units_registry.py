import math

import pytest

from siconvert.errors import UnitError
from siconvert.units.algebra import Dimension
from siconvert.units.registry import (
    DEFAULT_REGISTRY,
    DERIVED_UNITS,
    UnitDefinition,
    UnitRegistry,
    resolve,
)

TABLE = [
    "m", "s", "mol", "A", "K", "cd", "kg",
    "Pa", "N", "J", "W", "kW", "MW", "km", "cm", "mm", "mL", "L", "ms", "us",
    "hr", "day", "yr", "ft", "lbf", "in", "thou", "mile", "mph",
]


def test_registry_knows_every_table_symbol():
    for symbol in TABLE:
        assert symbol in DEFAULT_REGISTRY
    assert len(DEFAULT_REGISTRY) == len(TABLE)


@pytest.mark.parametrize(
    "symbol, field",
    [("m", "meter"), ("s", "second"), ("mol", "mole"), ("A", "ampere"),
     ("K", "kelvin"), ("cd", "candela"), ("kg", "kilogram")],
)
def test_base_units_have_unit_magnitude(symbol, field):
    quantity = resolve(symbol)
    assert quantity.magnitude == 1.0
    assert quantity.dims == Dimension(**{field: 1})


def test_conversion_constants_match_table():
    assert resolve("ft").magnitude == 0.3048
    assert resolve("ft").dims == Dimension(meter=1)
    assert resolve("km").magnitude == 1000.0
    assert math.isclose(resolve("in").magnitude, 0.0254)
    assert math.isclose(resolve("thou").magnitude, 2.54e-5)
    assert math.isclose(resolve("mile").magnitude, 1609.344)
    assert math.isclose(resolve("lbf").magnitude, 4.4482216152605)
    assert math.isclose(resolve("day").magnitude, 86400.0)
    assert math.isclose(resolve("yr").magnitude, 31557600.0)
    assert math.isclose(resolve("mph").magnitude, 0.44704)


def test_derived_units_compose_dimensions():
    force = Dimension(meter=1, second=-2, kilogram=1)
    assert resolve("N").dims == force
    assert resolve("lbf").dims == force
    assert resolve("Pa").dims == Dimension(meter=-1, second=-2, kilogram=1)
    assert resolve("J").dims == Dimension(meter=2, second=-2, kilogram=1)
    assert resolve("W").dims == Dimension(meter=2, second=-3, kilogram=1)
    assert resolve("MW").dims == resolve("W").dims
    assert math.isclose(resolve("MW").magnitude, 1e6)
    assert resolve("mph").dims == Dimension(meter=1, second=-1)


def test_volume_units_come_from_cubed_length():
    assert resolve("mL").dims == Dimension(meter=3)
    assert math.isclose(resolve("mL").magnitude, resolve("cm").magnitude ** 3)
    assert math.isclose(resolve("L").magnitude, 1e-3)


def test_unknown_symbol_raises():
    with pytest.raises(UnitError) as excinfo:
        resolve("furlong")
    assert excinfo.value.symbol == "furlong"
    assert excinfo.value.stage == "unit"


def test_lookup_is_case_sensitive():
    with pytest.raises(UnitError):
        resolve("KM")


def test_registry_mapping_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY.units["furlong"] = resolve("m")  # type: ignore[index]
    assert not hasattr(DEFAULT_REGISTRY, "register")


def test_forward_reference_is_rejected():
    bad = (UnitDefinition("pace", "pace", 2.5, (("ft", 1),)), *DERIVED_UNITS)
    with pytest.raises(UnitError):
        UnitRegistry(bad)


def test_duplicate_symbol_is_rejected():
    with pytest.raises(UnitError):
        UnitRegistry((*DERIVED_UNITS, UnitDefinition("N", "newton again")))


def test_symbols_follow_table_order_and_have_descriptions():
    symbols = DEFAULT_REGISTRY.symbols()
    assert symbols[:7] == ("m", "s", "mol", "A", "K", "cd", "kg")
    assert symbols.index("cm") < symbols.index("mL")
    assert DEFAULT_REGISTRY.describe("lbf") == "pound-force"
