"""
Replication settings.

Runtime-configurable options for a replicated experiment: how many trials,
how to collect them, and which seed (if any) to reset the stream to first.

Defaults live in config/defaults.yaml under the ``replication`` section.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..entities import CollectionMode
from ..errors import InvalidArgument

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

# Sentinel for detecting missing required fields
_MISSING = object()


@dataclass
class ReplicationSettings:
    """
    Configuration for a single replicated experiment.

    ``count`` is REQUIRED. ``seed=None`` leaves the stream untouched.
    """

    count: int
    collection_mode: CollectionMode = CollectionMode.SIMPLIFY
    seed: int | None = None

    def __post_init__(self):
        _validate_required(self, "count", self.count, int)
        _validate_positive(self, "count", self.count)
        self.collection_mode = CollectionMode.coerce(self.collection_mode)
        if self.seed is not None:
            _validate_required(self, "seed", self.seed, int)
            _validate_non_negative(self, "seed", self.seed)

    @classmethod
    def from_config(cls, constants: dict[str, Any]) -> "ReplicationSettings":
        """Load from the ``replication`` section of a config mapping."""
        section = constants.get("replication")
        if section is None:
            raise KeyError("replication section is required")
        if not isinstance(section, dict):
            raise InvalidArgument(
                f"replication section must be a mapping, got {type(section).__name__}"
            )
        count = section.get("count", _MISSING)
        if count is _MISSING:
            raise KeyError("replication.count is required")
        return cls(
            count=count,
            collection_mode=section.get("collection_mode", "simplify"),
            seed=section.get("seed"),
        )


def load_settings(path: Path | str | None = None) -> ReplicationSettings:
    """Read settings from a YAML file (the packaged defaults if no path)."""
    path = DEFAULTS_PATH if path is None else Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with open(path) as f:
        constants = yaml.safe_load(f) or {}
    return ReplicationSettings.from_config(constants)


def _validate_required(
    obj: Any, field_name: str, value: Any, expected_type: type
) -> None:
    """Validate that a required field is provided and has correct type."""
    if value is _MISSING or value is None:
        raise InvalidArgument(
            f"{obj.__class__.__name__}.{field_name} is REQUIRED and was not provided"
        )
    if isinstance(value, bool) or not isinstance(value, expected_type):
        raise InvalidArgument(
            f"{obj.__class__.__name__}.{field_name} must be {expected_type.__name__}, "
            f"got {type(value).__name__}"
        )


def _validate_positive(obj: Any, field_name: str, value: float | int) -> None:
    """Validate that a numeric field is positive."""
    if value <= 0:
        raise InvalidArgument(
            f"{obj.__class__.__name__}.{field_name} must be positive, got {value}"
        )


def _validate_non_negative(obj: Any, field_name: str, value: float | int) -> None:
    """Validate that a numeric field is non-negative."""
    if value < 0:
        raise InvalidArgument(
            f"{obj.__class__.__name__}.{field_name} must be non-negative, got {value}"
        )
