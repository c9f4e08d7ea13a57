"""Millisecond to nanosecond conversion."""

from __future__ import annotations

import math

from benchledger.domain.models import Rounding
from benchledger.errors import InvalidTimingError

NS_PER_MS = 1_000_000


def ms_to_ns(value: float, rounding: Rounding = Rounding.NEAREST) -> int:
    """Convert a timing in milliseconds to whole nanoseconds.

    Raises InvalidTimingError for booleans, non-numbers, non-finite and
    negative values.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"timing must be a number, got {value!r}"
        raise InvalidTimingError(msg)
    try:
        timing = float(value)
    except OverflowError as exc:
        msg = f"timing {value!r} is too large"
        raise InvalidTimingError(msg) from exc
    if not math.isfinite(timing):
        msg = f"timing must be finite, got {value!r}"
        raise InvalidTimingError(msg)
    if timing < 0:
        msg = f"timing must not be negative, got {value!r}"
        raise InvalidTimingError(msg)

    scaled = timing * NS_PER_MS
    if not math.isfinite(scaled):
        msg = f"timing {value!r} ms overflows when converted to nanoseconds"
        raise InvalidTimingError(msg)
    if rounding is Rounding.TRUNCATE:
        return math.trunc(scaled)
    return round(scaled)
