"""Time units and HTTP timeout construction for the Gemini client.

The client accepts a timeout as an integer paired with a :class:`TimeUnit`
(defaulting to ``30`` seconds). ``httpx`` expects seconds as floats, so this
module owns the conversion and builds the ``httpx.Timeout`` applied to the
connect, read, write and pool phases of every request.

Key Components
--------------
TimeUnit
    Enumeration of the supported units with a ``to_seconds`` conversion.

build_http_timeout(value, unit)
    Return an ``httpx.Timeout`` with every phase set to the converted value.
"""
from __future__ import annotations

from enum import Enum

import httpx


class TimeUnit(str, Enum):
    """Unit attached to an integer timeout value."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"

    @property
    def factor(self) -> float:
        """Number of seconds represented by one unit."""
        return _FACTORS[self]

    def to_seconds(self, value: float) -> float:
        """Convert ``value`` expressed in this unit to seconds."""
        return float(value) * self.factor


_FACTORS = {
    TimeUnit.MILLISECONDS: 0.001,
    TimeUnit.SECONDS: 1.0,
    TimeUnit.MINUTES: 60.0,
    TimeUnit.HOURS: 3600.0,
}


def build_http_timeout(value: int, unit: TimeUnit) -> httpx.Timeout:
    """Return an ``httpx.Timeout`` applying ``value``/``unit`` to all phases.

    ``httpx`` has no whole-call deadline; the connect, read, write and pool
    phases each receive the same bound.
    """
    return httpx.Timeout(unit.to_seconds(value))


__all__ = ["TimeUnit", "build_http_timeout"]
