"""
Adapter: Clocks.

Implements the Clock port. SystemClock reads the wall clock;
FixedClock always returns the same instant and is used in tests.
"""

from datetime import datetime, timezone, tzinfo
from typing import Optional

from app.domain.users.ports import Clock


class SystemClock(Clock):
    """Wall clock expressed in a fixed zone (UTC by default)."""

    def __init__(self, zone: Optional[tzinfo] = None) -> None:
        self._zone = zone or timezone.utc

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return datetime.now(self._zone)


class FixedClock(Clock):
    """Clock frozen at a single instant.

    Args:
        instant: Timezone-aware point in time. Naive values are read as UTC.
        zone: Zone in which ``now()`` expresses the instant.
    """

    def __init__(self, instant: datetime, zone: Optional[tzinfo] = None) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant
        self._zone = zone or timezone.utc

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return self._instant.astimezone(self._zone)
