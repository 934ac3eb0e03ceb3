"""Exceptions raised by prismal."""

from __future__ import annotations


class PrismalError(RuntimeError):
    """Base class for prismal errors."""


class InvariantViolationError(PrismalError):
    """A caller broke a precondition that valid configuration guarantees.

    Never triggered by external input: vertex counts are clamped before they
    reach the geometry code, so seeing this means a construction bug.
    """
