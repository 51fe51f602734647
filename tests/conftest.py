"""Pytest configuration: put src/ on sys.path and provide seeded streams."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_src = Path(__file__).resolve().parents[1] / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from repsim import RandomStream, set_seed  # noqa: E402


@pytest.fixture
def stream() -> RandomStream:
    return RandomStream(seed=2024)


@pytest.fixture(autouse=True)
def _reset_shared_stream():
    set_seed(None)
    yield
    set_seed(None)
