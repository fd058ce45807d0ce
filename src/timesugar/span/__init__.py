"""
timesugar.span
~~~~~~~~~~~~~~

Fluent calendar spans.  A Span holds six independent units (years, weeks,
days, hours, mins, secs); unit setters build or update one, and the shift
functions apply it to an instant through the calendar engine
(``dateutil.relativedelta``).

Basic usage::

    from datetime import datetime, timezone
    from timesugar.span import years, weeks, before, from_, ago

    span = years(5, weeks(2))                      # 5 years and 2 weeks
    t = datetime(2015, 6, 24, 14, 27, 52, tzinfo=timezone.utc)
    before(years(5), t)                            # → 2010-06-24 14:27:52+00:00
    from_(years(5), t)                             # → 2020-06-24 14:27:52+00:00
    ago(span)                                      # relative to now (UTC)

NumPy arrays of instants are accepted everywhere a scalar is::

    import numpy as np
    stamps = np.array(["2015-06-24", "2016-02-29"], dtype="datetime64[D]")
    before(years(1), stamps)                       # → datetime64[us] array

Public API
----------
Span             The span record.  ZERO is the all-zero span.
years … secs     Unit setters.
before, from_    Shift an instant backward / forward (``after`` = ``from_``).
ago, from_now    Shift the current instant; the clock is injectable.
SpanError        Base exception for all span-related errors.
InvalidArgument  Non-numeric magnitude passed to a unit setter.
"""

from __future__ import annotations

from timesugar.span._exceptions import InvalidArgument, SpanError
from timesugar.span.relative import after, ago, before, from_, from_now
from timesugar.span.span import (
    UNITS,
    ZERO,
    Span,
    days,
    hours,
    mins,
    secs,
    weeks,
    years,
)

__all__ = [
    "Span",
    "ZERO",
    "UNITS",
    "years",
    "weeks",
    "days",
    "hours",
    "mins",
    "secs",
    "before",
    "from_",
    "after",
    "ago",
    "from_now",
    "SpanError",
    "InvalidArgument",
]
