"""Tests for random streams and samplers."""

from __future__ import annotations

import numpy as np
import pytest

from repsim import (
    InvalidArgument,
    RandomStream,
    default_stream,
    sample_binomial,
    sample_choice,
    sample_normal,
    sample_uniform,
    set_seed,
)


def test_same_seed_same_draws():
    a = RandomStream(seed=7)
    b = RandomStream(seed=7)
    np.testing.assert_array_equal(a.normal(10), b.normal(10))
    np.testing.assert_array_equal(a.uniform(4, 2, 3), b.uniform(4, 2, 3))


def test_reset_restarts_the_stream(stream):
    first = stream.normal(5)
    stream.reset(2024)
    np.testing.assert_array_equal(stream.normal(5), first)


def test_set_seed_resets_shared_stream():
    set_seed(99)
    first = sample_uniform(6)
    set_seed(99)
    assert default_stream().seed == 99
    np.testing.assert_array_equal(sample_uniform(6), first)


def test_explicit_stream_does_not_touch_shared_stream():
    set_seed(1)
    expected = sample_normal(3)
    set_seed(1)
    sample_normal(50, stream=RandomStream(seed=5))
    np.testing.assert_array_equal(sample_normal(3), expected)


def test_normal_broadcasts_means_cyclically(stream):
    draws = stream.normal(6, mean=[0, 100, 1000], sd=0)
    np.testing.assert_array_equal(draws, [0, 100, 1000, 0, 100, 1000])


def test_normal_broadcasts_sd_cyclically(stream):
    draws = stream.normal(4, mean=5, sd=[0, 1])
    assert draws[0] == 5 and draws[2] == 5
    assert draws[1] != 5 and draws[3] != 5


def test_parameter_longer_than_n_is_truncated(stream):
    draws = stream.normal(2, mean=[1, 2, 3], sd=0)
    np.testing.assert_array_equal(draws, [1, 2])


def test_uniform_bounds_respected_and_broadcast(stream):
    draws = stream.uniform(1000, low=[0, 10], high=[1, 20])
    assert len(draws) == 1000
    assert np.all((draws[0::2] >= 0) & (draws[0::2] < 1))
    assert np.all((draws[1::2] >= 10) & (draws[1::2] < 20))


def test_zero_draws(stream):
    assert stream.normal(0).shape == (0,)
    assert stream.uniform(0, low=[]).shape == (0,)


@pytest.mark.parametrize("n", [-1, 2.5, [5, 5], True])
def test_n_must_be_single_non_negative_integer(stream, n):
    with pytest.raises(InvalidArgument):
        stream.normal(n)


def test_invalid_parameters(stream):
    with pytest.raises(InvalidArgument):
        stream.normal(3, sd=-1)
    with pytest.raises(InvalidArgument):
        stream.normal(3, mean=[])
    with pytest.raises(InvalidArgument):
        stream.uniform(3, low=2, high=1)
    with pytest.raises(InvalidArgument):
        stream.binomial(3, size=10, prob=1.5)
    with pytest.raises(InvalidArgument):
        stream.binomial(3, size=2.5, prob=0.5)


def test_binomial_counts(stream):
    draws = sample_binomial(200, size=[0, 10], prob=0.5, stream=stream)
    assert np.all(draws[0::2] == 0)
    assert np.all((draws[1::2] >= 0) & (draws[1::2] <= 10))


def test_choice(stream):
    picks = sample_choice(["a", "b", "c"], 20, stream=stream)
    assert set(picks) <= {"a", "b", "c"}
    perm = stream.choice([1, 2, 3, 4], 4, replace=False)
    assert sorted(perm.tolist()) == [1, 2, 3, 4]
    with pytest.raises(InvalidArgument):
        stream.choice([1, 2], 3, replace=False)
    with pytest.raises(InvalidArgument):
        stream.choice([], 1)


def test_choice_rejects_nested_population(stream):
    with pytest.raises(InvalidArgument):
        stream.choice([[1, 2], [3, 4]], 3, replace=False)
    with pytest.raises(InvalidArgument):
        sample_choice([[1, 2], [3, 4]], 1, stream=stream)
