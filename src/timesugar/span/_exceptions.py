from __future__ import annotations


class SpanError(Exception):
    """Base class for errors raised by timesugar.span."""


class InvalidArgument(SpanError, TypeError):
    """A unit setter was given a non-numeric magnitude or a non-Span base."""
