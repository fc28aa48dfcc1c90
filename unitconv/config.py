"""Conversion options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

MAX_DECIMALS = 100


@dataclass(frozen=True)
class ConversionConfig:
    """Options controlling how a converted value is rounded and rendered.

    Attributes:
        is_float: Keep fractional results. When False, results are rounded to
            the nearest integer (half away from zero).
        decimals: Decimal places kept when ``is_float`` is True. ``None``
            disables rounding.
        locale: Locale identifier (``"de-DE"``, ``"en_US"``) for number
            formatting. When set, numeric results are returned as formatted
            strings.
        include_unit: Have the fluent builder return ``"{value}{label}"``
            instead of a structured result. Label-less categories still
            return the bare value.
    """

    is_float: bool = True
    decimals: Optional[int] = 2
    locale: Optional[str] = None
    include_unit: bool = False

    def __post_init__(self):
        if self.decimals is not None:
            if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
                raise TypeError(
                    f"decimals must be an int or None, got {type(self.decimals)}"
                )
            if not 0 <= self.decimals <= MAX_DECIMALS:
                raise ValueError(
                    f"decimals must be between 0 and {MAX_DECIMALS}, got {self.decimals}"
                )
        if self.locale is not None and not str(self.locale).strip():
            raise ValueError("locale must be a non-empty string or None")

    def merged(self, **overrides) -> "ConversionConfig":
        """Return a copy with ``overrides`` applied; caller values win."""
        return replace(self, **overrides)


DEFAULT_CONFIG = ConversionConfig()


def resolve_config(
    config: Optional[ConversionConfig] = None, **overrides
) -> ConversionConfig:
    """Merge ``config`` and keyword ``overrides`` over :data:`DEFAULT_CONFIG`."""
    resolved = DEFAULT_CONFIG if config is None else config
    return resolved.merged(**overrides) if overrides else resolved
