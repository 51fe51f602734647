"""Exception types raised by repsim."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """An argument is outside the domain an operation accepts."""


class ShapeMismatch(Exception):
    """Trial results cannot be stacked into one rectangular array.

    Raised and handled inside the simplifier; callers of ``replicate``
    never see it.
    """
