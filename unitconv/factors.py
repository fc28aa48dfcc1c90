"""Conversion rules for every registered unit.

Each unit owns a :class:`ConversionFactor`: a pair of callables mapping a value
in that unit to the category's base unit (``to_base``) and back
(``from_base``). A conversion between any two units of a category composes
the two rules through the base:

    result = to_factor.from_base(from_factor.to_base(value))

Rule shapes:
    linear:
        ``base = value * numerator / denominator``. Most units.

    affine:
        ``base = (value - zero) * scale + offset``. Temperature scales whose
        zero point differs from the base unit's.

    radix:
        Digit-sequence conversions for the non-decimal number systems, see
        :mod:`unitconv.radix`.

Constants are exact where an exact definition exists (international yard and
pound, US customary and imperial volumes, standard gravity, the 2019 SI
elementary charge). ``calorie`` is the nutritional calorie (kilocalorie,
4186.8 J); the small calories are ``calorie-international-table`` and
``calorie-thermochemical``. ``month`` and ``year`` are Gregorian averages.

The table is read-only and built once at import time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from .radix import decimal_to_radix, radix_to_decimal


@dataclass(frozen=True)
class ConversionFactor:
    """Rule converting one unit to and from its category's base unit.

    Attributes:
        to_base: Maps a value in this unit to the base unit.
        from_base: Maps a base-unit value to this unit.
        is_base_unit: True for the category's reference unit. Informational;
            the base unit's rules are the identity.
        radix: Radix of a non-decimal number unit (2, 8 or 16), else ``None``.
            Units with a radix take digit strings as input and only accept
            non-negative integers.
    """

    to_base: Callable[[Any], Any]
    from_base: Callable[[Any], Any]
    is_base_unit: bool = False
    radix: Optional[int] = None

    @property
    def is_elementwise(self) -> bool:
        """True if the rule works on numpy arrays through plain arithmetic."""
        return self.radix is None


def _identity(v):
    return v


def base() -> ConversionFactor:
    """Rule for a category's base unit."""
    return ConversionFactor(to_base=_identity, from_base=_identity, is_base_unit=True)


def linear(numerator: float, denominator: float = 1) -> ConversionFactor:
    """Rule for a unit worth ``numerator / denominator`` base units.

    Keeping the ratio split avoids pre-rounding factors such as 1/1000.
    """

    def to_base(v):
        return v * numerator / denominator

    def from_base(v):
        return v * denominator / numerator

    return ConversionFactor(to_base=to_base, from_base=from_base)


def affine(scale: float, offset: float, zero: float = 0.0) -> ConversionFactor:
    """Rule for ``base = (value - zero) * scale + offset``."""

    def to_base(v):
        return (v - zero) * scale + offset

    def from_base(v):
        return (v - offset) / scale + zero

    return ConversionFactor(to_base=to_base, from_base=from_base)


def radix_unit(radix: int, as_text: bool = False) -> ConversionFactor:
    """Rule for a non-decimal number system relative to decimal.

    Args:
        radix: 2, 8 or 16.
        as_text: Return results as digit strings. Required for hexadecimal,
            whose digits include letters; binary and octal results are ints
            whose printed digits are the radix digits.
    """

    def to_base(v):
        return radix_to_decimal(v, radix)

    def from_base(v):
        digits = decimal_to_radix(v, radix)
        return digits if as_text else int(digits)

    return ConversionFactor(to_base=to_base, from_base=from_base, radix=radix)


_FACTORS = {
    # base: kelvin
    "temperature": {
        "kelvin": base(),
        "celsius": affine(1, 273.15),
        "fahrenheit": affine(5 / 9, 273.15, zero=32),
        "rankine": linear(5, 9),
        "delisle": affine(-2 / 3, 373.15),
        "newton-degree": affine(100 / 33, 273.15),
        "réaumur": affine(5 / 4, 273.15),
        "rømer": affine(40 / 21, 273.15, zero=7.5),
    },
    # base: meter
    "length": {
        "meter": base(),
        "kilometer": linear(1000),
        "centimeter": linear(1, 100),
        "millimeter": linear(1, 1000),
        "micrometer": linear(1, 1_000_000),
        "nanometer": linear(1, 1_000_000_000),
        "inch": linear(0.0254),
        "foot": linear(0.3048),
        "yard": linear(0.9144),
        "mile": linear(1609.344),
        "nautical-mile": linear(1852),
    },
    # base: gram
    "weight": {
        "gram": base(),
        "milligram": linear(1, 1000),
        "kilogram": linear(1000),
        "pound": linear(453.59237),
        "ounce": linear(28.349523125),
        "stone": linear(6350.29318),
        "carat": linear(1, 5),
        "ton": linear(1_000_000),
    },
    # base: liter
    "volume": {
        "liter": base(),
        "milliliter": linear(1, 1000),
        "us-legal-cup": linear(0.2365882365),
        "imperial-cup": linear(0.284130625),
        "us-liquid-pint": linear(0.473176473),
        "imperial-pint": linear(0.56826125),
        "us-legal-fluid-ounce": linear(0.0295735295625),
        "imperial-fluid-ounce": linear(0.0284130625),
        "us-gallon": linear(3.785411784),
        "imperial-gallon": linear(4.54609),
        "cubic-meter": linear(1000),
        "cubic-centimeter": linear(1, 1000),
        "cubic-foot": linear(28.316846592),
        "cubic-inch": linear(0.016387064),
    },
    # base: second
    "time": {
        "second": base(),
        "millisecond": linear(1, 1000),
        "minute": linear(60),
        "hour": linear(3600),
        "day": linear(86_400),
        "week": linear(604_800),
        "month": linear(2_629_746),
        "year": linear(31_556_952),
    },
    # base: decimal
    "number": {
        "decimal": base(),
        "binary": radix_unit(2),
        "base8": radix_unit(8),
        "hexadecimal": radix_unit(16, as_text=True),
    },
    # base: newton
    "force": {
        "newton": base(),
        "dyne": linear(1, 100_000),
        "pound-force": linear(4.4482216152605),
        "kilogram-force": linear(9.80665),
        "poundal": linear(0.138254954376),
    },
    # base: pascal
    "pressure": {
        "pascal": base(),
        "kilopascal": linear(1000),
        "bar": linear(100_000),
        "psi": linear(6894.757293168),
        "atmosphere": linear(101_325),
        "torr": linear(101_325, 760),
    },
    # base: joule
    "energy": {
        "joule": base(),
        "kilojoule": linear(1000),
        "calorie": linear(4186.8),
        "calorie-international-table": linear(4.1868),
        "calorie-thermochemical": linear(4.184),
        "watt-hour": linear(3600),
        "kilowatt-hour": linear(3_600_000),
        "electron-volt": linear(1.602176634e-19),
    },
    # base: radian
    "angle": {
        "radian": base(),
        "degree": linear(math.pi, 180),
        "gradian": linear(math.pi, 200),
        "arcminute": linear(math.pi, 10_800),
        "arcsecond": linear(math.pi, 648_000),
        "turn": linear(2 * math.pi),
    },
}

#: Category name -> unit identifier -> rule. Read-only.
CONVERSION_FACTORS: Mapping[str, Mapping[str, ConversionFactor]] = MappingProxyType(
    {category: MappingProxyType(rules) for category, rules in _FACTORS.items()}
)
