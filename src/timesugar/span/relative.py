from __future__ import annotations

from typing import Any, Callable

from . import engine
from .engine import InstantLike
from .span import Span

Clock = Callable[[], Any]


def before(span: Span, instant: InstantLike) -> Any:
    """
    Instant earlier than ``instant`` by ``span``.

        >>> from datetime import datetime, timezone
        >>> before(Span(years=5), datetime(2015, 6, 24, 14, 27, 52, tzinfo=timezone.utc))
        datetime.datetime(2010, 6, 24, 14, 27, 52, tzinfo=datetime.timezone.utc)
    """
    return engine.shift(instant, span.negate().to_offsets())


def from_(span: Span, instant: InstantLike) -> Any:
    """Instant later than ``instant`` by ``span``."""
    return engine.shift(instant, span.to_offsets())


after = from_


def ago(span: Span, clock: Clock = engine.now) -> Any:
    """``before(span, clock())``; the clock is read on every call."""
    return before(span, clock())


def from_now(span: Span, clock: Clock = engine.now) -> Any:
    """``from_(span, clock())``; the clock is read on every call."""
    return from_(span, clock())
