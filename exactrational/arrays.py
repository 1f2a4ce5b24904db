"""NumPy object-array helpers for :class:`ExactRational` values."""
from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .kinds import NumberKind
from .rational import ZERO, ExactRational, coerce_array

logger = logging.getLogger(__name__)


def as_rational_array(
    values: Any,
    kind: Optional[NumberKind] = None,
    *,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`ExactRational` values.

    ``values`` can be any iterable or an existing NumPy array. The element
    kind is taken from *kind* when given, otherwise from the array dtype
    (integer, floating, unicode or object). When ``copy`` is ``False`` and
    ``values`` is already an object array holding only :class:`ExactRational`
    elements, it is returned as is.
    """

    if isinstance(values, np.ndarray):
        if (
            not copy
            and values.dtype == object
            and all(isinstance(item, ExactRational) for item in values.flat)
        ):
            return values
        logger.debug(
            "ingesting %s array of shape %s as %s",
            values.dtype,
            values.shape,
            kind.value if kind is not None else "dtype default",
        )
        return coerce_array(values, kind)

    if isinstance(values, (list, tuple)):
        if kind is None:
            array = np.empty(len(values), dtype=object)
            array[:] = list(values)
        else:
            array = np.array(values)
        return coerce_array(array, kind)

    return as_rational_array(list(values), kind, copy=copy)


def zeros(length: int) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    array = np.empty(length, dtype=object)
    array.fill(ZERO)
    return array


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    shape = np.shape(values)
    array = np.empty(shape, dtype=object)
    array.fill(ZERO)
    return array


def to_float_array(values: Any) -> np.ndarray:
    """Return a float64 array holding the nearest double of each element."""

    array = as_rational_array(values, copy=False)
    result = np.empty(array.shape, dtype=np.float64)
    for index, item in np.ndenumerate(array):
        result[index] = item.to_float64()
    return result


__all__ = ["as_rational_array", "zeros", "zeros_like", "to_float_array"]
