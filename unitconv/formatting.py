"""Rounding and rendering of converted values.

Precision policy (numeric results only):
    - ``str`` results (hexadecimal digits, locale-formatted numbers) pass
      through untouched.
    - ``int`` results are exact and pass through untouched.
    - ``is_float=False`` rounds to the nearest integer, half away from zero.
    - Otherwise the value is rounded to ``decimals`` places in fixed-point
      (never scientific) notation, half away from zero, and read back as a
      float so trailing zeros disappear (``1.10`` -> ``1.1``).

Rounding goes through :class:`decimal.Decimal` built from the shortest repr
of the float, so ``2.675`` rounds to ``2.68`` as printed rather than to the
binary neighbour below it.

Locale formatting is delegated to Babel's CLDR number formatter.
"""

from __future__ import annotations

import logging
import math
import numbers
from decimal import ROUND_HALF_UP, Decimal, localcontext
from functools import lru_cache
from typing import Union

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from .config import ConversionConfig
from .errors import UnsupportedLocaleError

logger = logging.getLogger(__name__)

Value = Union[int, float, str]


def _quantize(value: float, decimals: int) -> Decimal:
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Large magnitudes need more working digits than the default 28.
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def apply_precision(value: Value, config: ConversionConfig) -> Value:
    """Apply the precision policy of ``config`` to a converted value."""
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)

    f = float(value)
    if not math.isfinite(f):
        return f
    if config.is_float is False:
        return int(_quantize(f, 0))
    if config.decimals is None:
        return f
    return float(_quantize(f, config.decimals))


def format_plain(value: Value) -> str:
    """Render a value without locale rules, never in scientific notation.

    Integral floats drop their ``.0`` so ``1000.0`` renders as ``1000``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))

    f = float(value)
    if not math.isfinite(f):
        return repr(f)
    if f == 0:
        return "0"
    return format(Decimal(repr(f)).normalize(), "f")


@lru_cache(maxsize=64)
def _load_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise UnsupportedLocaleError(identifier) from exc


def format_locale(value: Value, locale: str) -> str:
    """Render ``value`` with the grouping and decimal symbols of ``locale``.

    All fraction digits of the (already rounded) value are kept.

    Args:
        value: Converted value. Strings pass through unchanged.
        locale: BCP 47 (``"de-DE"``) or POSIX (``"de_DE"``) identifier.

    Returns:
        str: Formatted number, e.g. ``"1.234.567,89"`` for ``de-DE``.

    Raises:
        UnsupportedLocaleError: If Babel has no data for ``locale``.
    """
    parsed = _load_locale(locale)
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        number = int(value)
    else:
        f = float(value)
        if not math.isfinite(f):
            return format_plain(f)
        number = Decimal(repr(f))
    formatted = format_decimal(number, locale=parsed, decimal_quantization=False)
    logger.debug("Formatted %r for locale %s as %r", value, parsed, formatted)
    return formatted


def render_value(value: Value, config: ConversionConfig) -> Value:
    """Return ``value`` formatted for ``config.locale``, or unchanged."""
    if config.locale is None:
        return value
    return format_locale(value, config.locale)


def with_label(value: Value, label: str) -> str:
    """Join a value and its unit label, e.g. ``"3.28ft"``."""
    return f"{format_plain(value)}{label}"
