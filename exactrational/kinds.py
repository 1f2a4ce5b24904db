"""Tags naming how a raw value is turned into an exact rational."""
from __future__ import annotations

import enum
from typing import Any

import numpy as np

from .errors import InvalidOperandError


class NumberKind(enum.Enum):
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    TEXT = "text"
    RATIONAL = "rational"


_DTYPE_KINDS = {
    "i": NumberKind.INTEGER,
    "u": NumberKind.INTEGER,
    "f": NumberKind.FLOAT,
    "U": NumberKind.TEXT,
    "O": NumberKind.RATIONAL,
}


def kind_for_dtype(dtype: Any) -> NumberKind:
    """Return the ingestion kind for elements of a NumPy array of *dtype*.

    Object arrays are expected to hold :class:`ExactRational` values already.
    """
    dtype = np.dtype(dtype)
    try:
        return _DTYPE_KINDS[dtype.kind]
    except KeyError:
        raise InvalidOperandError(f"No exact rational form for dtype {dtype}") from None


__all__ = ["NumberKind", "kind_for_dtype"]
