"""Integer conversions between decimal and the binary, octal and hex systems.

These routines work on the *printed digit sequence* of a number, not on its
bit pattern. A binary value such as ``1010`` may arrive as the string
``"1010"`` or as the decimal integer ``1010`` whose digits happen to be ones
and zeros; both read as ten.

Algorithms:
    decimal -> radix:
        Repeated division by the radix, collecting remainders least-significant
        first until the quotient reaches zero. Zero maps to ``"0"``.

    radix -> decimal:
        Positional accumulation, least-significant digit first:
            value = Σ digit_i * radix^i

Only non-negative integers are representable. Negative or fractional inputs
raise :class:`~unitconv.errors.UnsupportedValueError`; characters outside the
radix's digit set raise :class:`~unitconv.errors.InvalidDigitError`.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Dict, Union

from .errors import InvalidDigitError, UnsupportedValueError

DigitInput = Union[int, float, str]

_DIGITS = "0123456789ABCDEF"

_LEGAL_DIGITS: Dict[int, re.Pattern] = {
    2: re.compile(r"[01]+"),
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9A-Fa-f]+"),
}

_RADIX_NAMES: Dict[int, str] = {
    2: "binary",
    8: "octal",
    10: "decimal",
    16: "hexadecimal",
}


def _check_radix(radix: int) -> None:
    if radix not in _LEGAL_DIGITS:
        raise ValueError(f"radix must be one of {sorted(_LEGAL_DIGITS)}, got {radix}")


def as_whole_number(value: object) -> int:
    """Return ``value`` as a non-negative ``int``.

    Integral floats such as ``10.0`` are accepted. Strings are not; digit
    strings go through :func:`radix_to_decimal`.

    Raises:
        UnsupportedValueError: If ``value`` is negative, fractional, non-finite
            or not a real number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise UnsupportedValueError(f"Only integers are supported, got {value!r}")

    if isinstance(value, numbers.Integral):
        whole = int(value)
    else:
        f = float(value)
        if not math.isfinite(f):
            raise UnsupportedValueError(f"Only finite integers are supported, got {f}")
        if f < 0:
            raise UnsupportedValueError(f"Negative numbers are not supported, got {f}")
        if not f.is_integer():
            raise UnsupportedValueError(f"Only integers are supported, got {f}")
        whole = int(f)

    if whole < 0:
        raise UnsupportedValueError(f"Negative numbers are not supported, got {whole}")
    return whole


def decimal_to_radix(value: object, radix: int) -> str:
    """Render a non-negative integer in ``radix`` as an upper-case digit string.

    Args:
        value: Non-negative integer (or integral float).
        radix: Target radix, one of 2, 8, 10 or 16.

    Returns:
        str: Digit string, most-significant digit first. ``0`` gives ``"0"``.

    Raises:
        UnsupportedValueError: If ``value`` is negative or fractional.

    Examples:
        >>> decimal_to_radix(10, 2)
        '1010'
        >>> decimal_to_radix(255, 16)
        'FF'
    """
    _check_radix(radix)
    remaining = as_whole_number(value)
    if remaining == 0:
        return "0"

    digits = []
    while remaining > 0:
        remaining, remainder = divmod(remaining, radix)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def _digit_text(value: DigitInput, radix: int) -> str:
    """Normalize ``value`` to a validated digit string in ``radix``."""
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("-"):
            raise UnsupportedValueError(
                f"Negative numbers are not supported, got {value!r}"
            )
        if radix == 16 and text[:2] in ("0x", "0X"):
            text = text[2:]
        if "." in text:
            raise UnsupportedValueError(f"Only integers are supported, got {value!r}")
    else:
        text = str(as_whole_number(value))

    if not _LEGAL_DIGITS[radix].fullmatch(text):
        raise InvalidDigitError(
            f"Invalid {_RADIX_NAMES[radix]} number {value!r}: "
            f"digits must match {_LEGAL_DIGITS[radix].pattern}"
        )
    return text


def radix_to_decimal(value: DigitInput, radix: int) -> int:
    """Read a digit sequence written in ``radix`` and return its integer value.

    Args:
        value: Digit string (hex may carry a ``0x``/``0X`` prefix) or a
            non-negative integer whose printed digits are the radix digits.
        radix: Source radix, one of 2, 8, 10 or 16.

    Returns:
        int: The decimal value.

    Raises:
        InvalidDigitError: If a character is outside the radix's digit set.
        UnsupportedValueError: If ``value`` is negative or fractional.

    Examples:
        >>> radix_to_decimal("1010", 2)
        10
        >>> radix_to_decimal(10, 16)
        16
    """
    _check_radix(radix)
    text = _digit_text(value, radix)

    decimal = 0
    for position, char in enumerate(reversed(text.upper())):
        decimal += _DIGITS.index(char) * radix**position
    return decimal
