"""Labeled teaching datasets built from rep, normal draws and make_table."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from .errors import InvalidArgument
from .sequences import rep
from .simulation.stochastics import RandomStream, default_stream
from .tables import make_table


def _per_group(name: str, value: Any, n_groups: int) -> list[float]:
    values = np.atleast_1d(np.asarray(value, dtype=float)).tolist()
    if len(values) == 1:
        return values * n_groups
    if len(values) != n_groups:
        raise InvalidArgument(
            f"{name} needs 1 or {n_groups} values, got {len(values)}"
        )
    return values


def simulate_groups(
    groups: Any,
    n_per_group: int,
    means: Any,
    sd: Any = 1.0,
    stream: RandomStream | None = None,
    label_column: str = "group",
    value_column: str = "value",
) -> pd.DataFrame:
    """Simulate a normally distributed response for several labeled groups.

    Rows are ordered group by group, ``n_per_group`` rows each.

    Args:
        groups: Group labels.
        n_per_group: Rows per group.
        means: One mean, or one per group.
        sd: One standard deviation, or one per group.
        stream: Stream to draw from (shared stream by default).
        label_column: Name of the label column.
        value_column: Name of the response column.

    Returns:
        DataFrame with ``label_column`` and ``value_column``.
    """
    labels = rep(groups, each=n_per_group)
    n_groups = len(rep(groups))
    if n_groups == 0:
        raise InvalidArgument("groups must not be empty")
    group_means = rep(_per_group("means", means, n_groups), each=n_per_group)
    group_sds = rep(_per_group("sd", sd, n_groups), each=n_per_group)

    stream = default_stream() if stream is None else stream
    values = stream.normal(len(labels), mean=group_means, sd=group_sds)
    return make_table({label_column: labels, value_column: values})
