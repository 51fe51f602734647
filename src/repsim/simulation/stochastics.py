"""Seedable random streams and broadcasting samplers."""

from __future__ import annotations

from typing import Any

import numpy as np

from ..errors import InvalidArgument


def _check_count(n: Any) -> int:
    """Draw counts are single non-negative integers, never sequences."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(
            f"n must be a single integer, got {type(n).__name__}"
        )
    if n < 0:
        raise InvalidArgument(f"n must be non-negative, got {n}")
    return int(n)


def _broadcast(name: str, value: Any, n: int) -> np.ndarray:
    """Cycle a parameter across n draws: draw j uses value[j % len(value)]."""
    params = np.atleast_1d(np.asarray(value, dtype=float))
    if params.ndim != 1:
        raise InvalidArgument(f"{name} must be a scalar or a flat sequence")
    if n == 0:
        return params[:0]
    if params.size == 0:
        raise InvalidArgument(f"{name} must not be empty")
    return params[np.arange(n) % params.size]


class RandomStream:
    """A pseudo-random stream that trials draw from in order.

    Wraps a numpy Generator; after ``reset(seed)`` every subsequent draw is a
    deterministic function of the seed and the sequence of requests.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def reset(self, seed: int | None) -> "RandomStream":
        """Re-initialise the stream from ``seed``."""
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        return self

    def normal(self, n: int, mean: Any = 0.0, sd: Any = 1.0) -> np.ndarray:
        """Draw n values from Normal(mean, sd).

        Args:
            n: Number of draws.
            mean: Scalar or sequence, cycled across the draws.
            sd: Scalar or sequence of non-negative values, cycled likewise.

        Returns:
            Array of length n.
        """
        n = _check_count(n)
        means = _broadcast("mean", mean, n)
        sds = _broadcast("sd", sd, n)
        if np.any(sds < 0):
            raise InvalidArgument("sd must be non-negative")
        return self.rng.normal(means, sds, size=n)

    def uniform(self, n: int, low: Any = 0.0, high: Any = 1.0) -> np.ndarray:
        """Draw n values from Uniform(low, high), bounds cycled across draws."""
        n = _check_count(n)
        lows = _broadcast("low", low, n)
        highs = _broadcast("high", high, n)
        if np.any(highs < lows):
            raise InvalidArgument("high must be >= low")
        return self.rng.uniform(lows, highs, size=n)

    def binomial(self, n: int, size: Any, prob: Any) -> np.ndarray:
        """Draw n success counts from Binomial(size, prob)."""
        n = _check_count(n)
        sizes = _broadcast("size", size, n)
        probs = _broadcast("prob", prob, n)
        if np.any(sizes < 0) or np.any(sizes != np.floor(sizes)):
            raise InvalidArgument("size must be a non-negative integer")
        if np.any((probs < 0) | (probs > 1)):
            raise InvalidArgument("prob must be in [0, 1]")
        return self.rng.binomial(sizes.astype(np.int64), probs, size=n)

    def choice(self, values: Any, n: int, replace: bool = True) -> np.ndarray:
        """Draw n elements from ``values``."""
        n = _check_count(n)
        population = np.asarray(values)
        if population.ndim == 0:
            population = population.reshape(1)
        if population.ndim > 1:
            raise InvalidArgument("values must be a flat sequence")
        if population.size == 0 and n > 0:
            raise InvalidArgument("cannot draw from an empty population")
        if not replace and n > population.size:
            raise InvalidArgument(
                f"cannot draw {n} values without replacement from {population.size}"
            )
        return self.rng.choice(population, size=n, replace=replace)


# =============================================================================
# Shared Stream
# =============================================================================

_SHARED = RandomStream()


def default_stream() -> RandomStream:
    """The process-wide stream used when no stream is passed."""
    return _SHARED


def set_seed(seed: int | None) -> RandomStream:
    """Reset the shared stream to a reproducible state."""
    return _SHARED.reset(seed)


def _resolve(stream: RandomStream | None) -> RandomStream:
    return _SHARED if stream is None else stream


def sample_normal(
    n: int, mean: Any = 0.0, sd: Any = 1.0, stream: RandomStream | None = None
) -> np.ndarray:
    return _resolve(stream).normal(n, mean, sd)


def sample_uniform(
    n: int, low: Any = 0.0, high: Any = 1.0, stream: RandomStream | None = None
) -> np.ndarray:
    return _resolve(stream).uniform(n, low, high)


def sample_binomial(
    n: int, size: Any, prob: Any, stream: RandomStream | None = None
) -> np.ndarray:
    return _resolve(stream).binomial(n, size, prob)


def sample_choice(
    values: Any, n: int, replace: bool = True, stream: RandomStream | None = None
) -> np.ndarray:
    return _resolve(stream).choice(values, n, replace=replace)
