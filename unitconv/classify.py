"""Resolve units to their measurement category.

The classifier probes categories in the fixed registry order (temperature,
length, weight, volume, time, number, force, pressure, energy, angle) and
returns the first whose unit list contains the unit. Categories are disjoint,
so the order only fixes which category is probed first.
"""

from __future__ import annotations

from typing import Tuple

from .errors import UnknownCategoryError, UnknownUnitError
from .factors import CONVERSION_FACTORS
from .units import UNITS


def is_unit_in_category(unit: str, category: str) -> bool:
    """Return True if ``unit`` is registered under ``category``."""
    return unit in UNITS.get(category, ())


def get_unit_category(unit: str) -> str:
    """Return the category that ``unit`` belongs to.

    Args:
        unit: Unit identifier such as ``"meter"`` or ``"hexadecimal"``.

    Returns:
        str: Category name, e.g. ``"length"``.

    Raises:
        UnknownUnitError: If no category lists ``unit``.

    Examples:
        >>> get_unit_category("celsius")
        'temperature'
    """
    for category in UNITS:
        if is_unit_in_category(unit, category):
            return category
    raise UnknownUnitError(unit)


def list_categories() -> Tuple[str, ...]:
    """Return category names in probe order."""
    return tuple(UNITS)


def units_in_category(category: str) -> Tuple[str, ...]:
    """Return the units registered under ``category``.

    Raises:
        UnknownCategoryError: If ``category`` is not registered.
    """
    try:
        return UNITS[category]
    except KeyError:
        raise UnknownCategoryError(category) from None


def base_unit(category: str) -> str:
    """Return the base unit of ``category``."""
    for unit in units_in_category(category):
        if CONVERSION_FACTORS[category][unit].is_base_unit:
            return unit
    # Every registered category has a base rule; reaching here is a table defect.
    raise LookupError(f"Category {category!r} has no base unit")
