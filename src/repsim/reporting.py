"""Summaries and exports for replicated experiments."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import numpy as np
import pandas as pd

from .entities import Rectangular, ReplicationResult
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

Reducer = Callable[[Any], Any]


def trial_statistics(
    result: ReplicationResult, reducer: Reducer = np.mean
) -> np.ndarray:
    """Reduce every trial to one number.

    Scalar-trial Rectangular results are returned as they are; otherwise
    ``reducer`` is applied to each trial's values (a DataFrame trial is
    reduced over its numeric columns).
    """
    if isinstance(result, Rectangular):
        if result.values.ndim == 1:
            return result.values.astype(float)
        return np.array(
            [float(reducer(result.column(i))) for i in range(result.count)]
        )

    stats = []
    for i, item in enumerate(result.items):
        if isinstance(item, pd.DataFrame):
            item = item.select_dtypes("number").to_numpy()
        try:
            values = np.asarray(item, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(
                f"trial {i} has no numeric values to reduce"
            ) from exc
        if values.size == 0:
            raise InvalidArgument(f"trial {i} has no numeric values to reduce")
        stats.append(float(reducer(values)))
    return np.array(stats)


def summarize(values: Any) -> dict[str, float]:
    """Summary statistics of a set of per-trial values.

    Returns:
        Dictionary with n, mean, std, min, max, median, p5 and p95.
    """
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        raise InvalidArgument("cannot summarize an empty set of values")

    return {
        "n": int(arr.size),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "median": float(np.median(arr)),
        "p5": float(np.percentile(arr, 5)),
        "p95": float(np.percentile(arr, 95)),
    }


def to_frame(result: ReplicationResult) -> pd.DataFrame:
    """Long-format table of a replication result, one row per value."""
    if isinstance(result, Rectangular):
        # Trial axis first so each trial's values are contiguous
        per_trial = np.moveaxis(result.values, -1, 0).reshape(result.count, -1)
        width = per_trial.shape[1]
        return pd.DataFrame(
            {
                "replicate": np.repeat(np.arange(result.count), width),
                "index": np.tile(np.arange(width), result.count),
                "value": per_trial.ravel(),
            }
        )

    if result.items and all(isinstance(r, pd.DataFrame) for r in result.items):
        frames = [
            frame.assign(replicate=i) for i, frame in enumerate(result.items)
        ]
        combined = pd.concat(frames, ignore_index=True)
        columns = ["replicate"] + [c for c in combined.columns if c != "replicate"]
        return combined[columns]

    # One object cell per trial, whatever its shape
    values = np.empty(len(result.items), dtype=object)
    for i, item in enumerate(result.items):
        values[i] = item
    return pd.DataFrame({"replicate": np.arange(len(values)), "value": values})


def export_results(
    result: ReplicationResult,
    output_dir: str | Path,
    reducer: Reducer = np.mean,
) -> dict[str, Any]:
    """Write summary statistics and the long-format table to ``output_dir``.

    Writes:
      - replicate_statistics.json
      - replicates.csv

    Returns:
        The summary dictionary.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    stats = summarize(trial_statistics(result, reducer))
    stats["simplified"] = isinstance(result, Rectangular)

    stats_file = output_path / "replicate_statistics.json"
    with open(stats_file, "w") as f:
        json.dump(stats, f, indent=2)
    logger.info("Statistics saved to: %s", stats_file)

    table_file = output_path / "replicates.csv"
    to_frame(result).to_csv(table_file, index=False)
    logger.info("Replicates saved to: %s", table_file)

    return stats
