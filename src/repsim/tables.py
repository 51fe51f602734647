"""Bind named columns into a pandas DataFrame."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from .errors import InvalidArgument


def _is_column(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def make_table(columns: Mapping[str, Any] | None = None, **named: Any) -> pd.DataFrame:
    """Build a table from equal-length named sequences.

    Columns keep their given order (``columns`` first, then keywords). Scalar
    values are repeated down the whole column.

    Raises:
        InvalidArgument: No columns, or sequences of different lengths.
    """
    data: dict[str, Any] = dict(columns or {})
    data.update(named)
    if not data:
        raise InvalidArgument("make_table needs at least one column")

    data = {k: list(v) if _is_column(v) else v for k, v in data.items()}
    lengths = {k: len(v) for k, v in data.items() if isinstance(v, list)}
    if len(set(lengths.values())) > 1:
        raise InvalidArgument(f"columns have different lengths: {lengths}")

    n_rows = next(iter(lengths.values()), 1)
    return pd.DataFrame(
        {k: v if isinstance(v, list) else [v] * n_rows for k, v in data.items()}
    )
