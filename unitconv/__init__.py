"""
A Python package for converting values between units of measurement.

Converts numbers between units of the same category (temperature, length,
weight, volume, time, number systems, force, pressure, energy, angle) through
each category's base unit, with decimal rounding and locale-aware formatting.

Modules:
    - units / labels: Category registry and unit display labels.
    - factors: Per-unit conversion rules relative to each base unit.
    - radix: Binary, octal and hexadecimal digit algorithms.
    - classify: Resolves a unit to its category.
    - conversion: The conversion engine and the fluent builder.
    - frame: Vectorized conversion of numpy arrays and pandas Series.
"""

__version__ = "1.0.0"

from .classify import (
    base_unit,
    get_unit_category,
    is_unit_in_category,
    list_categories,
    units_in_category,
)
from .config import DEFAULT_CONFIG, ConversionConfig
from .conversion import Conversion, ConversionResult, convert
from .errors import (
    ConversionError,
    IncompatibleUnitsError,
    InvalidDigitError,
    InvalidNumericValueError,
    UnknownCategoryError,
    UnknownUnitError,
    UnsupportedLocaleError,
    UnsupportedValueError,
)
from .factors import CONVERSION_FACTORS, ConversionFactor
from .frame import conversion_table, convert_array, convert_series
from .labels import LABELS
from .units import NO_UNIT_CATEGORIES, UNITS

__all__ = [
    # Conversion
    "convert",
    "Conversion",
    "ConversionResult",
    "ConversionConfig",
    "DEFAULT_CONFIG",
    # Registry
    "UNITS",
    "LABELS",
    "NO_UNIT_CATEGORIES",
    "CONVERSION_FACTORS",
    "ConversionFactor",
    "get_unit_category",
    "is_unit_in_category",
    "list_categories",
    "units_in_category",
    "base_unit",
    # Arrays and DataFrames
    "convert_array",
    "convert_series",
    "conversion_table",
    # Errors
    "ConversionError",
    "UnknownUnitError",
    "UnknownCategoryError",
    "IncompatibleUnitsError",
    "InvalidNumericValueError",
    "InvalidDigitError",
    "UnsupportedValueError",
    "UnsupportedLocaleError",
]
