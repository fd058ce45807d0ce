from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Real
from typing import Optional

from ._exceptions import InvalidArgument

UNITS: tuple[str, ...] = ("years", "weeks", "days", "hours", "mins", "secs")

Offsets = list[tuple[str, Real]]


@dataclass(frozen=True, slots=True)
class Span:
    """
    Relative duration made of six independent calendar units.

    Fields are replaced, never summed: use the unit setters (or
    ``dataclasses.replace``) to derive a new span from an existing one.
    """

    years: Real = 0
    weeks: Real = 0
    days: Real = 0
    hours: Real = 0
    mins: Real = 0
    secs: Real = 0

    def negate(self) -> Span:
        return Span(*(-getattr(self, unit) for unit in UNITS))

    def __neg__(self) -> Span:
        return self.negate()

    def to_offsets(self) -> Offsets:
        """(unit, magnitude) pairs in field order, ready for engine.shift()."""
        return [(unit, getattr(self, unit)) for unit in UNITS]


ZERO = Span()


# ── unit setters ─────────────────────────────────────────────────────────────

def _set(unit: str, magnitude: Real, span: Optional[Span]) -> Span:
    # bool is an Integral, but True is not a magnitude.
    if isinstance(magnitude, bool) or not isinstance(magnitude, Real):
        raise InvalidArgument(
            f"{unit} must be a real number; got {magnitude!r}."
        )
    if span is None:
        span = ZERO
    elif not isinstance(span, Span):
        raise InvalidArgument(f"Expected a Span to update; got {span!r}.")
    return replace(span, **{unit: magnitude})


def years(num_years: Real, span: Optional[Span] = None) -> Span:
    """
    Span of ``num_years`` years, or ``span`` with its years replaced.

        >>> years(4)
        Span(years=4, weeks=0, days=0, hours=0, mins=0, secs=0)
        >>> years(4, Span(years=3, weeks=2))
        Span(years=4, weeks=2, days=0, hours=0, mins=0, secs=0)
    """
    return _set("years", num_years, span)


def weeks(num_weeks: Real, span: Optional[Span] = None) -> Span:
    """Span of ``num_weeks`` weeks, or ``span`` with its weeks replaced."""
    return _set("weeks", num_weeks, span)


def days(num_days: Real, span: Optional[Span] = None) -> Span:
    """Span of ``num_days`` days, or ``span`` with its days replaced."""
    return _set("days", num_days, span)


def hours(num_hours: Real, span: Optional[Span] = None) -> Span:
    """Span of ``num_hours`` hours, or ``span`` with its hours replaced."""
    return _set("hours", num_hours, span)


def mins(num_mins: Real, span: Optional[Span] = None) -> Span:
    """Span of ``num_mins`` minutes, or ``span`` with its minutes replaced."""
    return _set("mins", num_mins, span)


def secs(num_secs: Real, span: Optional[Span] = None) -> Span:
    """
    Span of ``num_secs`` seconds, or ``span`` with its seconds replaced.

        >>> secs(4, Span(hours=1, secs=3))
        Span(years=0, weeks=0, days=0, hours=1, mins=0, secs=4)
    """
    return _set("secs", num_secs, span)
