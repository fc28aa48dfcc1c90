"""Display abbreviations for units.

Units without an entry fall back to their identifier when a label is
rendered (``ton`` is shown as ``ton``).
"""

from __future__ import annotations

from types import MappingProxyType

_LABELS = {
    # time
    "year": "y",
    "month": "mo",
    "week": "wk",
    "day": "d",
    "hour": "h",
    "minute": "min",
    "second": "s",
    "millisecond": "ms",
    # length
    "meter": "m",
    "kilometer": "km",
    "centimeter": "cm",
    "millimeter": "mm",
    "micrometer": "µm",
    "nanometer": "nm",
    "inch": "in",
    "foot": "ft",
    "yard": "yd",
    "mile": "mi",
    "nautical-mile": "nmi",
    # mass
    "kilogram": "kg",
    "gram": "g",
    "milligram": "mg",
    "pound": "lb",
    "ounce": "oz",
    "stone": "st",
    "carat": "ct",
    # volume
    "liter": "l",
    "milliliter": "ml",
    "us-gallon": "gallon (US)",
    "imperial-gallon": "gallon (UK)",
    "us-legal-cup": "cup (US)",
    "imperial-cup": "cup (UK)",
    "us-liquid-pint": "pt (US)",
    "imperial-pint": "pt (UK)",
    "us-legal-fluid-ounce": "fl oz (US)",
    "imperial-fluid-ounce": "fl oz (UK)",
    "cubic-centimeter": "cm^3",
    "cubic-meter": "m^3",
    "cubic-foot": "ft^3",
    "cubic-inch": "in^3",
    # temperature
    "kelvin": "K",
    "celsius": "°C",
    "fahrenheit": "°F",
    "rankine": "°R",
    "delisle": "°De",
    "newton-degree": "°N",
    "réaumur": "°Ré",
    "rømer": "°Rø",
    # force
    "newton": "N",
    "dyne": "dyn",
    "poundal": "pdl",
    "pound-force": "lbf",
    "kilogram-force": "kgf",
    # pressure
    "pascal": "Pa",
    "kilopascal": "kPa",
    "bar": "bar",
    "psi": "psi",
    "atmosphere": "atm",
    "torr": "Torr",
    # energy
    "joule": "J",
    "kilojoule": "kJ",
    "calorie": "cal",
    "calorie-international-table": "cal (IT)",
    "calorie-thermochemical": "cal (th)",
    "watt-hour": "Wh",
    "kilowatt-hour": "kWh",
    "electron-volt": "eV",
    # angle
    "radian": "rad",
    "degree": "°",
    "gradian": "grad",
    "arcminute": "′",
    "arcsecond": "″",
    "turn": "tr",
}

#: Unit identifier -> display abbreviation.
LABELS = MappingProxyType(_LABELS)


def label_for(unit: str) -> str:
    """Return the display label for ``unit``, or ``unit`` itself."""
    return LABELS.get(unit, unit)
