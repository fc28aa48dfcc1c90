"""Two-stage unit conversion through a category's base unit.

Algorithm:
    1. Resolve the category of the source unit.
    2. Look up the source and target rules in that category's factor table.
       A target outside the table (another category, or unknown) is an
       :class:`~unitconv.errors.IncompatibleUnitsError`.
    3. Coerce the input to a number. Digit strings for binary, octal and
       hexadecimal sources are handed to the radix parser instead.
    4. ``base = source.to_base(value)``; ``result = target.from_base(base)``.
    5. Apply the precision policy, then locale formatting if configured.
       Binary, octal and hexadecimal digits are never locale-formatted.

The fluent :class:`Conversion` builder is sugar over :func:`convert`:

    >>> Conversion()(1).from_("meter").to("foot").value
    3.28
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .classify import get_unit_category
from .config import ConversionConfig, resolve_config
from .errors import IncompatibleUnitsError, InvalidNumericValueError
from .factors import CONVERSION_FACTORS, ConversionFactor
from .formatting import apply_precision, format_plain, render_value, with_label
from .labels import label_for
from .units import NO_UNIT_CATEGORIES

logger = logging.getLogger(__name__)

InputValue = Union[int, float, str]
OutputValue = Union[int, float, str]


@dataclass(frozen=True)
class ConversionResult:
    """Converted value and the display label of its unit.

    Attributes:
        value: Rounded number, hexadecimal digit string, or locale-formatted
            string when a locale was configured.
        unit: Display label of the target unit (``"ft"``, ``"°C"``).
        category: Category both units belong to.
    """

    value: OutputValue
    unit: str
    category: str = ""

    @property
    def has_label(self) -> bool:
        return self.category not in NO_UNIT_CATEGORIES

    def __str__(self) -> str:
        if not self.has_label:
            return format_plain(self.value)
        return with_label(self.value, self.unit)


def resolve_factors(
    from_unit: str, to_unit: str
) -> Tuple[str, ConversionFactor, ConversionFactor]:
    """Return ``(category, source_rule, target_rule)`` for a unit pair.

    Raises:
        UnknownUnitError: If ``from_unit`` is not registered.
        IncompatibleUnitsError: If ``to_unit`` is not in the same category.
    """
    category = get_unit_category(from_unit)
    rules = CONVERSION_FACTORS[category]
    source = rules.get(from_unit)
    target = rules.get(to_unit)
    if source is None or target is None:
        raise IncompatibleUnitsError(from_unit, to_unit)
    return category, source, target


def coerce_value(value: object, factor: ConversionFactor):
    """Return ``value`` in a form ``factor.to_base`` accepts.

    Numbers pass through. Strings are parsed as decimal numbers and must be
    finite, unless ``factor`` is a radix unit, which reads digit strings
    itself.

    Raises:
        InvalidNumericValueError: If ``value`` is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidNumericValueError(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(float(value)):
            raise InvalidNumericValueError(value)
        return value
    if isinstance(value, str):
        if factor.radix is not None:
            return value
        try:
            parsed = float(value.strip())
        except ValueError:
            raise InvalidNumericValueError(value) from None
        if not math.isfinite(parsed):
            raise InvalidNumericValueError(value)
        return parsed
    raise InvalidNumericValueError(value)


def convert(
    value: InputValue,
    from_unit: str,
    to_unit: str,
    config: Optional[ConversionConfig] = None,
    **overrides,
) -> ConversionResult:
    """Convert ``value`` from ``from_unit`` to ``to_unit``.

    Args:
        value: Number, numeric string, or digit string for binary/octal/hex
            sources.
        from_unit: Source unit identifier.
        to_unit: Target unit identifier, in the same category.
        config: Rounding and formatting options. Defaults to
            :data:`~unitconv.config.DEFAULT_CONFIG`.
        **overrides: Individual :class:`ConversionConfig` fields, applied on
            top of ``config``.

    Returns:
        ConversionResult: Rounded value and the target unit's label.

    Raises:
        UnknownUnitError: ``from_unit`` is not registered.
        IncompatibleUnitsError: ``to_unit`` is not in the source's category.
        InvalidNumericValueError: ``value`` is not a finite number.
        InvalidDigitError: A digit string has characters outside its radix.
        UnsupportedValueError: A negative or fractional value met a
            non-decimal number system.

    Examples:
        >>> convert(12, "celsius", "kelvin").value
        285.15
        >>> convert(10, "decimal", "hexadecimal").value
        'A'
    """
    cfg = resolve_config(config, **overrides)
    category, source, target = resolve_factors(from_unit, to_unit)

    numeric = coerce_value(value, source)
    base_value = source.to_base(numeric)
    raw = target.from_base(base_value)
    rounded = apply_precision(raw, cfg)

    logger.debug(
        "Converted %r %s -> %r %s (%s, raw=%r)",
        value,
        from_unit,
        rounded,
        to_unit,
        category,
        raw,
    )
    # Radix results are digit sequences; grouping would change their digits.
    if target.radix is None:
        rounded = render_value(rounded, cfg)
    return ConversionResult(
        value=rounded,
        unit=label_for(to_unit),
        category=category,
    )


class PendingValue:
    """A value waiting for its source unit."""

    def __init__(self, value: InputValue, config: ConversionConfig):
        self._value = value
        self._config = config

    def from_(self, unit: str) -> "PendingConversion":
        return PendingConversion(self._value, unit, self._config)


class PendingConversion:
    """A value with a source unit, waiting for its target unit."""

    def __init__(self, value: InputValue, from_unit: str, config: ConversionConfig):
        self._value = value
        self._from_unit = from_unit
        self._config = config

    def to(self, unit: str) -> Union[ConversionResult, OutputValue]:
        """Finish the conversion.

        Returns a :class:`ConversionResult`, or ``"{value}{label}"`` when the
        builder was configured with ``include_unit=True``. Label-less
        categories then return the bare value.
        """
        result = convert(self._value, self._from_unit, unit, self._config)
        if not self._config.include_unit:
            return result
        if not result.has_label:
            return result.value
        return str(result)


class Conversion:
    """Fluent converter bound to a configuration.

    Caller options are merged over the defaults
    (``is_float=True``, ``decimals=2``).

    Examples:
        >>> conversion = Conversion(decimals=4)
        >>> conversion.value(1).from_("liter").to("cubic-foot").value
        0.0353
        >>> Conversion(include_unit=True)(1).from_("newton").to("pound-force")
        '0.22lbf'
    """

    def __init__(self, config: Optional[ConversionConfig] = None, **overrides):
        self.config = resolve_config(config, **overrides)

    def value(self, value: InputValue) -> PendingValue:
        return PendingValue(value, self.config)

    __call__ = value

    def __repr__(self) -> str:
        return f"Conversion({self.config!r})"
