"""Time sources: system clock, fixed instant, and clock corrected by an official time API.

The holiday engine never reads a clock; callers read one of these once and
pass the instant along.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import requests

DEFAULT_TZ = "America/Sao_Paulo"
WORLDTIME_URL = "https://worldtimeapi.org/api/timezone/America/Sao_Paulo"


class TimeSyncError(Exception):
    """Official time could not be fetched or parsed."""


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware instant."""


class SystemClock(Clock):
    def __init__(self, tz: str = DEFAULT_TZ):
        self.tz = ZoneInfo(tz)

    def now(self) -> datetime:
        return datetime.now(tz=self.tz)


class FixedClock(Clock):
    """Always returns the same instant.

    Naive instants are wall time in tz; aware ones are converted to tz.
    """

    def __init__(self, instant: datetime, tz: str = DEFAULT_TZ):
        zone = ZoneInfo(tz)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=zone)
        self.instant = instant.astimezone(zone)

    def now(self) -> datetime:
        return self.instant


class OffsetSource(ABC):
    @abstractmethod
    def fetch_offset(self) -> timedelta:
        """Return official time minus local system time."""


class WorldTimeSource(OffsetSource):
    """WorldTimeAPI: official São Paulo time over HTTP."""

    def __init__(self, url: str = WORLDTIME_URL, timeout: float = 5):
        self.url = url
        self.timeout = timeout

    def fetch_offset(self) -> timedelta:
        try:
            resp = requests.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise TimeSyncError(f"request to {self.url} failed: {e}") from e
        local = datetime.now(tz=timezone.utc)
        return _parse_official_time(data) - local


def _parse_official_time(data: dict) -> datetime:
    """Parse the 'datetime' field of a WorldTimeAPI response."""
    try:
        official = datetime.fromisoformat(data["datetime"].replace("Z", "+00:00"))
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise TimeSyncError(f"unexpected time API response: {data!r}") from e
    if official.tzinfo is None:
        raise TimeSyncError(f"time API returned naive datetime: {data['datetime']}")
    return official


class SyncedClock(Clock):
    """System clock plus an offset from an OffsetSource, re-synced when stale.

    A failed sync falls back to zero offset (plain system time) and is retried
    after the next refresh interval.
    """

    def __init__(
        self,
        source: OffsetSource,
        tz: str = DEFAULT_TZ,
        refresh_seconds: float = 300,
        base: Clock | None = None,
    ):
        self.source = source
        self.refresh = timedelta(seconds=refresh_seconds)
        self.base = base or SystemClock(tz)
        self.tz = ZoneInfo(tz)
        self.offset = timedelta(0)
        self._synced_at: datetime | None = None

    def sync(self) -> timedelta:
        local = self.base.now()
        try:
            self.offset = self.source.fetch_offset()
        except TimeSyncError as e:
            print(f"  Warning: time sync failed ({e}), using system time")
            self.offset = timedelta(0)
        self._synced_at = local
        return self.offset

    def now(self) -> datetime:
        local = self.base.now()
        if self._synced_at is None or local - self._synced_at >= self.refresh:
            self.sync()
        return (local + self.offset).astimezone(self.tz)
