"""Configuration package for replicated experiments."""

from .settings import DEFAULTS_PATH, ReplicationSettings, load_settings

__all__ = [
    "DEFAULTS_PATH",
    "ReplicationSettings",
    "load_settings",
]
