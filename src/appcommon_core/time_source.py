from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

from appcommon_core.config import AppCommonSettings, TimeSourceKind

# 622072000 seconds after the 2001-01-01 reference date.
DEFAULT_MOCK_NOW = datetime(2001, 1, 1, tzinfo=UTC) + timedelta(seconds=622072000)


class TimeSource(Protocol):
    """Source of "now" that classes depending on real time can be tested with."""

    @property
    def now(self) -> datetime:
        """Current time. Might be frozen, but never goes back."""
        ...

    def real_time_interval_from(self, interval: float) -> float:
        """Interval of this source expressed in real-time seconds, for timers."""
        ...


def _normalize_timestamp(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class DefaultTimeSource:
    @property
    def now(self) -> datetime:
        return datetime.now(tz=UTC)

    def real_time_interval_from(self, interval: float) -> float:
        return interval


class MockTimeSource:
    """Time source for unit tests.

    `now` is frozen until the test sets or advances it; `scale` maps the
    intervals of the class under test to real time.
    """

    def __init__(self, *, scale: float = 1.0, now: datetime = DEFAULT_MOCK_NOW) -> None:
        if scale <= 0:
            raise ValueError(f"time scale must be positive: {scale}")
        self.scale = scale
        self._now = _normalize_timestamp(now)

    @property
    def now(self) -> datetime:
        return self._now

    @now.setter
    def now(self, value: datetime) -> None:
        self._now = _normalize_timestamp(value)

    def advance(self, seconds: float) -> datetime:
        if seconds < 0:
            raise ValueError(f"mock time cannot go back: {seconds}")
        self._now = self._now + timedelta(seconds=seconds)
        return self._now

    def real_time_interval_from(self, interval: float) -> float:
        return interval * self.scale


def time_source_from_settings(settings: AppCommonSettings) -> TimeSource:
    if settings.time_source is TimeSourceKind.MOCK:
        return MockTimeSource(
            scale=settings.time_scale,
            now=settings.mock_now or DEFAULT_MOCK_NOW,
        )
    return DefaultTimeSource()
