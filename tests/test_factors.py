"""Test conversion-rule tables: coverage, identity and round-trip properties."""

import math

import pytest

from unitconv import convert
from unitconv.classify import base_unit
from unitconv.factors import CONVERSION_FACTORS, ConversionFactor, affine, linear
from unitconv.units import UNITS

LINEAR_CATEGORIES = [
    "length",
    "weight",
    "volume",
    "time",
    "force",
    "pressure",
    "energy",
    "angle",
]

SAMPLE_VALUES = [0.0, 1.0, 2.5, -40.0, 1234.5678]


def test_every_registered_unit_has_a_rule():
    assert set(CONVERSION_FACTORS) == set(UNITS)
    for category, units in UNITS.items():
        assert set(CONVERSION_FACTORS[category]) == set(units), category


def test_categories_are_disjoint():
    seen = set()
    for units in UNITS.values():
        assert seen.isdisjoint(units)
        seen.update(units)


def test_one_identity_base_unit_per_category():
    for category, rules in CONVERSION_FACTORS.items():
        flagged = [u for u, rule in rules.items() if rule.is_base_unit]
        assert flagged == [base_unit(category)]
        rule = rules[flagged[0]]
        assert rule.to_base(42.5) == 42.5
        assert rule.from_base(42.5) == 42.5


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        UNITS["length"] = ("meter",)
    with pytest.raises(TypeError):
        CONVERSION_FACTORS["length"]["furlong"] = linear(201.168)


def test_rules_are_frozen():
    rule = CONVERSION_FACTORS["length"]["foot"]
    with pytest.raises(AttributeError):
        rule.radix = 2


@pytest.mark.parametrize("category", sorted(UNITS))
def test_rule_round_trip(category):
    """from_base(to_base(x)) recovers x for every rule."""
    for unit, rule in CONVERSION_FACTORS[category].items():
        if rule.radix:
            for n in range(0, 500, 23):
                digits = rule.from_base(n)
                assert rule.to_base(digits) == n, unit
            continue
        for x in SAMPLE_VALUES:
            back = rule.from_base(rule.to_base(x))
            assert math.isclose(back, x, rel_tol=1e-9, abs_tol=1e-9), unit


@pytest.mark.parametrize("category", LINEAR_CATEGORIES)
def test_chained_through_base_equals_direct_ratio(category):
    rules = CONVERSION_FACTORS[category]
    for a, rule_a in rules.items():
        for b, rule_b in rules.items():
            chained = rule_b.from_base(rule_a.to_base(3.7))
            direct = 3.7 * rule_a.to_base(1.0) / rule_b.to_base(1.0)
            assert math.isclose(chained, direct, rel_tol=1e-12), (a, b)


@pytest.mark.parametrize(
    "unit", [u for c in UNITS if c != "number" for u in UNITS[c]]
)
def test_identity_conversion(unit):
    assert math.isclose(convert(12.34, unit, unit).value, 12.34)


@pytest.mark.parametrize("unit", UNITS["number"])
def test_identity_conversion_for_number_systems(unit):
    value = "FF" if unit == "hexadecimal" else 1010
    expected = "FF" if unit == "hexadecimal" else 1010
    assert convert(value, unit, unit).value == expected


@pytest.mark.parametrize(
    "category", [c for c in UNITS if c != "number"]
)
def test_engine_round_trip_through_base(category):
    base = base_unit(category)
    for unit in UNITS[category]:
        for x in SAMPLE_VALUES:
            there = convert(x, unit, base, decimals=None).value
            back = convert(there, base, unit, decimals=None).value
            assert math.isclose(back, x, rel_tol=1e-9, abs_tol=1e-9), unit


def test_builders():
    kilo = linear(1000)
    assert kilo.to_base(2) == 2000
    assert kilo.from_base(2000) == 2
    assert kilo.is_elementwise

    fahrenheit = affine(5 / 9, 273.15, zero=32)
    assert math.isclose(fahrenheit.to_base(32), 273.15)
    assert math.isclose(fahrenheit.from_base(373.15), 212)

    assert isinstance(CONVERSION_FACTORS["number"]["binary"], ConversionFactor)
    assert CONVERSION_FACTORS["number"]["binary"].radix == 2
    assert not CONVERSION_FACTORS["number"]["hexadecimal"].is_elementwise
