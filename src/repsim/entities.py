from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

import numpy as np

from .errors import InvalidArgument

Trial = Callable[[], Any]


class CollectionMode(Enum):
    """How replicate() collects per-trial results."""

    SIMPLIFY = "simplify"  # stack equal-shape numeric results
    LIST = "list"  # keep every result as-is

    @classmethod
    def coerce(cls, value: Any) -> "CollectionMode":
        """Accept an enum member, its string value, or a bool (True = SIMPLIFY)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.SIMPLIFY if value else cls.LIST
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgument(
            f"collection_mode must be one of {[m.value for m in cls]}, got {value!r}"
        )


@dataclass
class ReplicationRequest:
    """One replicate() call: run ``trial`` ``count`` times."""

    count: int
    trial: Trial
    collection_mode: CollectionMode = CollectionMode.SIMPLIFY

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(
            self.count, (int, np.integer)
        ):
            raise InvalidArgument(
                f"count must be an integer, got {type(self.count).__name__}"
            )
        if self.count < 1:
            raise InvalidArgument(f"count must be >= 1, got {self.count}")
        self.count = int(self.count)
        if not callable(self.trial):
            raise InvalidArgument(
                f"trial must be callable, got {type(self.trial).__name__}"
            )
        self.collection_mode = CollectionMode.coerce(self.collection_mode)


# =============================================================================
# Replication Results
# =============================================================================


@dataclass(eq=False)
class Rectangular:
    """Equal-shape numeric trial results stacked on a trailing trial axis.

    ``values[..., i]`` is the result of the i-th trial. Scalar trials give
    shape ``(count,)``; length-k sequences give ``(k, count)``.
    """

    values: np.ndarray

    is_rectangular = True

    @property
    def count(self) -> int:
        return int(self.values.shape[-1])

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self.values.shape)

    def column(self, i: int) -> np.ndarray:
        """Result of trial ``i``."""
        return self.values[..., i]

    def __len__(self) -> int:
        return self.count


@dataclass
class Sequence:
    """Trial results in invocation order, each kept as returned."""

    items: list[Any] = field(default_factory=list)

    is_rectangular = False

    @property
    def count(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]


ReplicationResult = Rectangular | Sequence
