"""Sequence repetition in the style of R's ``rep``."""

from __future__ import annotations

import numbers
from collections.abc import Iterable
from typing import Any

from .errors import InvalidArgument


def _as_items(x: Any) -> list[Any]:
    if isinstance(x, (str, bytes)) or not isinstance(x, Iterable):
        return [x]
    return list(x)


def _check_non_negative(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
    return int(value)


def rep(
    x: Any,
    each: int = 1,
    times: int | Iterable[int] = 1,
    length_out: int | None = None,
) -> list[Any]:
    """Repeat the elements of ``x``.

    ``each`` is applied first. Then either ``length_out`` cycles the result
    to an exact length, or, when ``length_out`` is None, ``times`` repeats it:
    an int repeats the whole sequence, a sequence gives a per-element count
    and must match its length.

    >>> rep(["a", "b"], each=2, times=2)
    ['a', 'a', 'b', 'b', 'a', 'a', 'b', 'b']
    >>> rep(["a", "b"], times=[2, 1])
    ['a', 'a', 'b']
    >>> rep(["a", "b"], length_out=3, times=5)
    ['a', 'b', 'a']
    """
    items = _as_items(x)
    each = _check_non_negative("each", each)
    items = [v for v in items for _ in range(each)]

    if length_out is not None:
        length_out = _check_non_negative("length_out", length_out)
        if not items:
            if length_out:
                raise InvalidArgument("cannot extend an empty sequence")
            return []
        return [items[i % len(items)] for i in range(length_out)]

    if isinstance(times, numbers.Integral) or not isinstance(times, Iterable):
        return items * _check_non_negative("times", times)

    counts = [_check_non_negative("times", t) for t in times]
    if len(counts) != len(items):
        raise InvalidArgument(
            f"times has {len(counts)} entries for {len(items)} elements"
        )
    return [v for v, t in zip(items, counts) for _ in range(t)]
