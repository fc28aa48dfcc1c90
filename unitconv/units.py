"""Category registry: which units exist and how they are grouped.

Units are plain string identifiers. Each category lists its units in a fixed
order; the first entry is the category's base unit. Categories are disjoint,
so a unit resolves to at most one category.

The registry is read-only. ``UNITS`` is a :class:`types.MappingProxyType`
over tuples and is never mutated after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Tuple

_UNITS: Dict[str, Tuple[str, ...]] = {
    # base: kelvin
    "temperature": (
        "kelvin",
        "celsius",
        "fahrenheit",
        "rankine",
        "delisle",
        "newton-degree",
        "réaumur",
        "rømer",
    ),
    # base: meter
    "length": (
        "meter",
        "kilometer",
        "centimeter",
        "millimeter",
        "micrometer",
        "nanometer",
        "inch",
        "foot",
        "yard",
        "mile",
        "nautical-mile",
    ),
    # base: gram
    "weight": (
        "gram",
        "milligram",
        "kilogram",
        "pound",
        "ounce",
        "stone",
        "carat",
        "ton",
    ),
    # base: liter
    "volume": (
        "liter",
        "milliliter",
        "us-legal-cup",
        "imperial-cup",
        "us-liquid-pint",
        "imperial-pint",
        "us-legal-fluid-ounce",
        "imperial-fluid-ounce",
        "us-gallon",
        "imperial-gallon",
        "cubic-meter",
        "cubic-centimeter",
        "cubic-foot",
        "cubic-inch",
    ),
    # base: second
    "time": (
        "second",
        "millisecond",
        "minute",
        "hour",
        "day",
        "week",
        "month",
        "year",
    ),
    # base: decimal
    "number": ("decimal", "binary", "base8", "hexadecimal"),
    # base: newton
    "force": ("newton", "dyne", "pound-force", "kilogram-force", "poundal"),
    # base: pascal
    "pressure": ("pascal", "kilopascal", "bar", "psi", "atmosphere", "torr"),
    # base: joule
    "energy": (
        "joule",
        "kilojoule",
        "calorie",
        "calorie-international-table",
        "calorie-thermochemical",
        "watt-hour",
        "kilowatt-hour",
        "electron-volt",
    ),
    # base: radian
    "angle": ("radian", "degree", "gradian", "arcminute", "arcsecond", "turn"),
}

#: Category name -> ordered tuple of unit identifiers (probe order preserved).
UNITS = MappingProxyType(_UNITS)

#: Categories whose results are bare values, never suffixed with a label.
NO_UNIT_CATEGORIES: frozenset[str] = frozenset({"number"})
