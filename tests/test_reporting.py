"""Tests for summaries and exports."""

from __future__ import annotations

import itertools
import json

import numpy as np
import pandas as pd
import pytest

from repsim import (
    LIST,
    InvalidArgument,
    RandomStream,
    export_results,
    replicate,
    simulate_groups,
    summarize,
    to_frame,
    trial_statistics,
)


def test_summarize_keys_and_values():
    stats = summarize([1, 2, 3, 4, 5])
    assert stats["n"] == 5
    assert stats["mean"] == pytest.approx(3.0)
    assert stats["median"] == pytest.approx(3.0)
    assert stats["min"] == 1.0 and stats["max"] == 5.0
    assert stats["p5"] == pytest.approx(1.2)
    assert stats["p95"] == pytest.approx(4.8)
    with pytest.raises(InvalidArgument):
        summarize([])


def test_trial_statistics_for_each_result_kind():
    counter = itertools.count()
    scalars = replicate(3, lambda: float(next(counter)))
    np.testing.assert_array_equal(trial_statistics(scalars), [0.0, 1.0, 2.0])

    vectors = replicate(2, lambda: [1.0, 3.0])
    np.testing.assert_array_equal(trial_statistics(vectors), [2.0, 2.0])

    ragged = iter([[1.0, 2.0, 3.0], [10.0]])
    listed = replicate(2, lambda: next(ragged))
    np.testing.assert_array_equal(trial_statistics(listed, np.max), [3.0, 10.0])


def test_trial_statistics_reduces_numeric_table_columns():
    tables = replicate(2, lambda: pd.DataFrame({"g": ["a", "b"], "v": [1.0, 5.0]}))
    np.testing.assert_array_equal(trial_statistics(tables), [3.0, 3.0])


def test_to_frame_rectangular_is_long_format():
    counter = itertools.count()
    result = replicate(2, lambda: [next(counter), next(counter), next(counter)])
    frame = to_frame(result)
    assert list(frame.columns) == ["replicate", "index", "value"]
    assert frame["replicate"].tolist() == [0, 0, 0, 1, 1, 1]
    assert frame["index"].tolist() == [0, 1, 2, 0, 1, 2]
    assert frame["value"].tolist() == [0, 1, 2, 3, 4, 5]


def test_to_frame_concatenates_tables():
    stream = RandomStream(seed=4)
    result = replicate(
        2, lambda: simulate_groups(["a", "b"], 2, means=0, stream=stream), LIST
    )
    frame = to_frame(result)
    assert list(frame.columns) == ["replicate", "group", "value"]
    assert frame["replicate"].tolist() == [0, 0, 0, 0, 1, 1, 1, 1]


def test_export_results(tmp_path):
    stream = RandomStream(seed=5)
    result = replicate(10, lambda: stream.normal(4, mean=2))
    stats = export_results(result, tmp_path / "out")

    saved = json.loads((tmp_path / "out" / "replicate_statistics.json").read_text())
    assert saved == stats
    assert saved["n"] == 10
    assert saved["simplified"] is True

    frame = pd.read_csv(tmp_path / "out" / "replicates.csv")
    assert len(frame) == 40
    np.testing.assert_allclose(frame["value"].to_numpy(), result.values.T.ravel())


def test_to_frame_keeps_listed_results_one_per_row():
    result = replicate(3, lambda: [1.0, 2.0], LIST)
    frame = to_frame(result)
    assert frame["replicate"].tolist() == [0, 1, 2]
    assert all(cell == [1.0, 2.0] for cell in frame["value"])


@pytest.mark.parametrize(
    "item",
    [
        {"x": 1},
        "abc",
        pd.DataFrame({"g": ["a", "b"]}),
    ],
)
def test_trial_statistics_rejects_non_numeric_trials(item):
    result = replicate(2, lambda: item, LIST)
    with pytest.raises(InvalidArgument, match="trial 0"):
        trial_statistics(result)
