"""Repeated-experiment engine: run a trial N times and collect the results."""

from __future__ import annotations

import logging
import numbers
from collections import abc
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from ..entities import (
    CollectionMode,
    Rectangular,
    ReplicationRequest,
    ReplicationResult,
    Sequence,
    Trial,
)
from ..errors import ShapeMismatch
from .stochastics import RandomStream, default_stream

if TYPE_CHECKING:
    from ..config.settings import ReplicationSettings

logger = logging.getLogger(__name__)

# numpy dtype kinds that can be stacked: bool, signed, unsigned, float, complex
_NUMERIC_KINDS = "biufc"


def _as_numeric(result: Any) -> np.ndarray:
    """Convert one trial result to a numeric array, or raise ShapeMismatch."""
    if isinstance(result, (numbers.Number, np.generic)) and not isinstance(
        result, (str, bytes)
    ):
        arr = np.asarray(result)
    elif isinstance(result, pd.DataFrame):
        raise ShapeMismatch("table results are not simplified")
    elif (
        isinstance(result, abc.Sequence) and not isinstance(result, (str, bytes))
    ) or hasattr(result, "__array__"):
        try:
            arr = np.asarray(result)
        except ValueError as exc:
            # ragged nested lists
            raise ShapeMismatch(str(exc)) from exc
        if arr.size == 0:
            raise ShapeMismatch("empty result")
    else:
        raise ShapeMismatch(f"{type(result).__name__} results are not simplified")

    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise ShapeMismatch(f"non-numeric dtype {arr.dtype}")
    return arr


def _simplify(results: list[Any]) -> np.ndarray:
    """Stack equal-shape numeric results along a new trailing trial axis."""
    arrays = [_as_numeric(r) for r in results]
    shape = arrays[0].shape
    for i, arr in enumerate(arrays[1:], start=1):
        if arr.shape != shape:
            raise ShapeMismatch(
                f"trial {i} has shape {arr.shape}, trial 0 has shape {shape}"
            )
    return np.stack(arrays, axis=-1)


class ExperimentRunner:
    """Runs a zero-argument trial a fixed number of times.

    Trials execute strictly in order with no memoization, so draws taken from
    a shared stream are reproducible once that stream is seeded. The runner
    itself never seeds anything.
    """

    def replicate(
        self,
        count: int,
        trial: Trial,
        collection_mode: CollectionMode | str | bool = CollectionMode.SIMPLIFY,
    ) -> ReplicationResult:
        """Invoke ``trial`` ``count`` times and collect the results.

        Args:
            count: Number of trials (>= 1).
            trial: Zero-argument callable producing one result.
            collection_mode: SIMPLIFY stacks equal-shape numeric results into a
                Rectangular array (trial axis last); LIST, or SIMPLIFY on
                non-uniform results, returns a Sequence.

        Returns:
            Rectangular or Sequence holding ``count`` trial results.

        Raises:
            InvalidArgument: count < 1, trial not callable, unknown mode.
            Any exception raised by ``trial``, unchanged.
        """
        request = ReplicationRequest(count, trial, collection_mode)
        results = self._run(request)

        if request.collection_mode is CollectionMode.LIST:
            return Sequence(results)

        try:
            values = _simplify(results)
        except ShapeMismatch as exc:
            logger.debug("Keeping %d results as a list: %s", request.count, exc)
            return Sequence(results)

        logger.debug("Simplified %d results to shape %s", request.count, values.shape)
        return Rectangular(values)

    def _run(self, request: ReplicationRequest) -> list[Any]:
        logger.debug(
            "Running %d trials (%s)", request.count, request.collection_mode.value
        )
        results = []
        for _ in range(request.count):
            results.append(request.trial())
        return results


_RUNNER = ExperimentRunner()


def replicate(
    count: int,
    trial: Trial,
    collection_mode: CollectionMode | str | bool = CollectionMode.SIMPLIFY,
) -> ReplicationResult:
    """Module-level shortcut for ``ExperimentRunner().replicate``."""
    return _RUNNER.replicate(count, trial, collection_mode)


def run_experiment(
    trial: Trial,
    settings: ReplicationSettings,
    stream: RandomStream | None = None,
) -> ReplicationResult:
    """Run ``trial`` as configured by ``settings``.

    When ``settings.seed`` is set, ``stream`` (the shared stream by default)
    is reset to it first, so two calls with the same settings give the same
    results as long as the trial draws only from that stream.
    """
    if settings.seed is not None:
        (default_stream() if stream is None else stream).reset(settings.seed)
        logger.info("Stream reset to seed %d", settings.seed)
    return _RUNNER.replicate(settings.count, trial, settings.collection_mode)
