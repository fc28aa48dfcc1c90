"""Test unit-to-category resolution and registry introspection."""

import pytest

from unitconv.classify import (
    base_unit,
    get_unit_category,
    is_unit_in_category,
    list_categories,
    units_in_category,
)
from unitconv.errors import ConversionError, UnknownCategoryError, UnknownUnitError
from unitconv.units import UNITS


def test_category_lookup():
    assert get_unit_category("meter") == "length"
    assert get_unit_category("fahrenheit") == "temperature"
    assert get_unit_category("ounce") == "weight"
    assert get_unit_category("cubic-foot") == "volume"
    assert get_unit_category("week") == "time"
    assert get_unit_category("hexadecimal") == "number"
    assert get_unit_category("pound-force") == "force"
    assert get_unit_category("psi") == "pressure"
    assert get_unit_category("kilowatt-hour") == "energy"
    assert get_unit_category("degree") == "angle"


def test_every_registered_unit_resolves_to_its_category():
    for category, units in UNITS.items():
        for unit in units:
            assert get_unit_category(unit) == category


def test_unknown_unit():
    with pytest.raises(UnknownUnitError, match="Unknown unit: furlong"):
        get_unit_category("furlong")


def test_unknown_unit_is_a_value_error():
    with pytest.raises(ValueError):
        get_unit_category("parsec")
    with pytest.raises(ConversionError):
        get_unit_category("parsec")


def test_lookup_is_case_sensitive():
    with pytest.raises(UnknownUnitError):
        get_unit_category("Meter")


def test_probe_order():
    assert list_categories() == (
        "temperature",
        "length",
        "weight",
        "volume",
        "time",
        "number",
        "force",
        "pressure",
        "energy",
        "angle",
    )


def test_units_in_category():
    assert units_in_category("number") == ("decimal", "binary", "base8", "hexadecimal")
    with pytest.raises(UnknownCategoryError, match="bogus"):
        units_in_category("bogus")


def test_is_unit_in_category():
    assert is_unit_in_category("meter", "length")
    assert not is_unit_in_category("meter", "weight")
    assert not is_unit_in_category("meter", "bogus")


def test_base_units():
    expected = {
        "temperature": "kelvin",
        "length": "meter",
        "weight": "gram",
        "volume": "liter",
        "time": "second",
        "number": "decimal",
        "force": "newton",
        "pressure": "pascal",
        "energy": "joule",
        "angle": "radian",
    }
    assert {c: base_unit(c) for c in list_categories()} == expected
