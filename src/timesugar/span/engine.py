"""
Calendar engine adapter.

All calendar arithmetic is done by ``dateutil.relativedelta`` on the standard
``datetime`` types; this module only translates span offsets into a
``relativedelta`` and applies it to scalars or NumPy arrays of instants.
"""

from __future__ import annotations

import logging
import numbers
from datetime import date, datetime, timezone
from typing import Any, Iterable, Union

import numpy as np
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

Instant = Union[date, datetime, np.datetime64]
InstantLike = Union[Instant, np.ndarray, list, tuple]

# span unit -> relativedelta keyword
_KEYWORDS: dict[str, str] = {
    "years": "years",
    "weeks": "weeks",
    "days": "days",
    "hours": "hours",
    "mins": "minutes",
    "secs": "seconds",
}

_DT64_UNIT = "datetime64[us]"

# datetime resolves microseconds at best
_SUB_MICROSECOND = ("ns", "ps", "fs", "as")


def now() -> datetime:
    return datetime.now(timezone.utc)


def to_relativedelta(offsets: Iterable[tuple[str, Any]]) -> relativedelta:
    kwargs = {}
    for unit, magnitude in offsets:
        # datetime.timedelta only takes int and float components.
        if isinstance(magnitude, np.generic):
            magnitude = magnitude.item()
        if isinstance(magnitude, numbers.Real) and not isinstance(magnitude, int):
            magnitude = float(magnitude)
        kwargs[_KEYWORDS[unit]] = magnitude
    return relativedelta(**kwargs)


def shift(instant: InstantLike, offsets: Iterable[tuple[str, Any]]) -> Any:
    """
    Move ``instant`` by ``offsets``.

    Scalars come back as the same type.  Array-likes are shifted element-wise
    and come back as a NumPy array of the same shape: ``datetime64`` input
    yields ``datetime64[us]``, anything else an object array.  ``datetime64``
    values finer than microseconds raise ``ValueError`` instead of being
    truncated.

    Errors raised by the date arithmetic (``ValueError``, ``OverflowError``,
    ``TypeError``) propagate unchanged.
    """
    offsets = list(offsets)
    delta = to_relativedelta(offsets)

    if isinstance(instant, np.datetime64):
        _check_resolution(instant.dtype)
        logger.debug("Shifting %s by %s", instant, offsets)
        moved = instant.astype(_DT64_UNIT).item() + delta
        return np.datetime64(moved, "us")

    if not isinstance(instant, np.ndarray) and np.ndim(instant) == 0:
        logger.debug("Shifting %s by %s", instant, offsets)
        return instant + delta

    arr = np.asarray(instant)
    logger.debug("Shifting array of shape %s by %s", arr.shape, offsets)
    if np.issubdtype(arr.dtype, np.datetime64):
        _check_resolution(arr.dtype)
        moved = _shift_objects(arr.astype(_DT64_UNIT).astype(object), delta)
        return moved.astype(_DT64_UNIT)
    return _shift_objects(arr.astype(object), delta)


def _check_resolution(dtype: np.dtype) -> None:
    unit = np.datetime_data(dtype)[0]
    if unit in _SUB_MICROSECOND:
        raise ValueError(
            f"datetime64 resolution must be microseconds or coarser; got {unit!r}."
        )


def _shift_objects(arr: np.ndarray, delta: relativedelta) -> np.ndarray:
    out = np.empty(arr.shape, dtype=object)
    for idx, value in np.ndenumerate(arr):
        out[idx] = value + delta
    return out
