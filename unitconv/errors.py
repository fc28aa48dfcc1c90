"""Exception types raised by the conversion engine.

Every error derives from :class:`ConversionError`, itself a ``ValueError``, so
callers validating user input can catch a single class. Errors are raised at
the point of detection and are never retried: the same inputs always fail the
same way.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for all conversion failures."""


class UnknownUnitError(ConversionError):
    """The unit is not registered in any category."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unknown unit: {unit}")


class UnknownCategoryError(ConversionError):
    """The category name is not registered."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unknown category: {category}")


class IncompatibleUnitsError(ConversionError):
    """Source and target units do not share a factor table."""

    def __init__(self, from_unit: str, to_unit: str):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(f"Cannot convert from {from_unit} to {to_unit}")


class InvalidNumericValueError(ConversionError):
    """The input value is not a finite number."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid numeric value: {value!r}")


class InvalidDigitError(ConversionError):
    """A digit string contains characters outside its radix."""


class UnsupportedValueError(ConversionError):
    """Negative or fractional value where only non-negative integers apply."""


class UnsupportedLocaleError(ConversionError):
    """The locale identifier cannot be loaded by the number formatter."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale}")
