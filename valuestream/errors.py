"""Errors raised while reading or checking a value stream graph."""

from __future__ import annotations


class PresentationError(RuntimeError):
    """Base class for value stream map presentation failures."""


class GraphParseError(PresentationError, ValueError):
    """Raised when a raw graph payload does not have the expected shape."""


class MalformedGraphError(PresentationError):
    """Raised when a raw graph is internally inconsistent."""
