"""Convert whole arrays and DataFrame columns.

Linear and affine rules are plain arithmetic, so they run on numpy arrays
directly. Radix rules work on digit sequences and are applied element by
element. Either way the scalar precision policy of :mod:`unitconv.formatting`
is applied to each element, so an array converts like its elements would one
at a time, with one exception: missing readings (``NaN``, or a ``"nan"``
string read as ``NaN``) stay ``NaN`` on the arithmetic path instead of
raising. Infinite values are rejected on both paths.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from .classify import units_in_category
from .config import ConversionConfig, resolve_config
from .conversion import convert, resolve_factors
from .errors import InvalidNumericValueError
from .formatting import apply_precision, render_value
from .labels import label_for

logger = logging.getLogger(__name__)

_UNIT_SUFFIX = re.compile(r"\s*\([^()]*\)\s*$")


def _as_float_array(values) -> np.ndarray:
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidNumericValueError(values) from exc
    if np.isinf(arr).any():
        raise InvalidNumericValueError(arr[np.isinf(arr)][0])
    return arr


def convert_array(
    values: Iterable,
    from_unit: str,
    to_unit: str,
    config: Optional[ConversionConfig] = None,
    **overrides,
) -> np.ndarray:
    """Convert every element of ``values`` from ``from_unit`` to ``to_unit``.

    Args:
        values: Array-like of numbers (or digit strings for radix sources).
        from_unit: Source unit identifier.
        to_unit: Target unit identifier, in the same category.
        config: Rounding and formatting options.
        **overrides: Individual config fields applied on top of ``config``.

    Returns:
        numpy.ndarray: Converted values with the input's shape. Numeric
        results give a float (or int, with ``is_float=False``) array;
        hexadecimal digits and locale-formatted values give an object array.

    Raises:
        UnknownUnitError: ``from_unit`` is not registered.
        IncompatibleUnitsError: ``to_unit`` is not in the source's category.
        InvalidNumericValueError: An element is not numeric or is infinite.
    """
    cfg = resolve_config(config, **overrides)
    category, source, target = resolve_factors(from_unit, to_unit)

    if source.is_elementwise and target.is_elementwise:
        arr = _as_float_array(values)
        converted = target.from_base(source.to_base(arr))
        flat = [render_value(apply_precision(v, cfg), cfg) for v in converted.ravel()]
    else:
        arr = np.asarray(values, dtype=object)
        flat = [convert(v, from_unit, to_unit, cfg).value for v in arr.ravel()]

    dtype = object if any(isinstance(v, str) for v in flat) else None
    result = np.array(flat, dtype=dtype).reshape(arr.shape)
    logger.debug(
        "Converted %d %s values %s -> %s", result.size, category, from_unit, to_unit
    )
    return result


def annotate_name(name: Optional[str], unit: str) -> str:
    """Return a column name carrying the label of ``unit``.

    An existing trailing ``(...)`` unit annotation is replaced.

    Examples:
        >>> annotate_name("Distance (m)", "foot")
        'Distance (ft)'
    """
    label = label_for(unit)
    if name is None:
        return label
    stem = _UNIT_SUFFIX.sub("", str(name))
    return f"{stem} ({label})"


def convert_series(
    series: pd.Series,
    from_unit: str,
    to_unit: str,
    config: Optional[ConversionConfig] = None,
    rename: bool = True,
    **overrides,
) -> pd.Series:
    """Convert a pandas Series, keeping its index.

    Args:
        series: Values expressed in ``from_unit``.
        from_unit: Source unit identifier.
        to_unit: Target unit identifier.
        config: Rounding and formatting options.
        rename: Annotate the series name with the target label
            (``"Distance (m)"`` becomes ``"Distance (ft)"``).
        **overrides: Individual config fields applied on top of ``config``.

    Returns:
        pandas.Series: Converted values.
    """
    converted = convert_array(series.to_numpy(), from_unit, to_unit, config, **overrides)
    name = annotate_name(series.name, to_unit) if rename else series.name
    return pd.Series(converted, index=series.index, name=name)


def conversion_table(
    value,
    from_unit: str,
    config: Optional[ConversionConfig] = None,
    **overrides,
) -> pd.DataFrame:
    """Convert ``value`` into every unit of its category.

    Returns:
        pandas.DataFrame: One row per unit in registry order, with columns
        ``unit``, ``label`` and ``value``.
    """
    cfg = resolve_config(config, **overrides)
    category, _, _ = resolve_factors(from_unit, from_unit)
    rows = []
    for unit in units_in_category(category):
        result = convert(value, from_unit, unit, cfg)
        rows.append({"unit": unit, "label": result.unit, "value": result.value})
    return pd.DataFrame(rows, columns=["unit", "label", "value"])
