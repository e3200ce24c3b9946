"""
조회 기간 분할

1회 조회 범위가 제한된 이력 API(입출금 90일 등)를 위해
전체 기간을 과거 방향의 고정 길이 구간으로 나눈다.

구간은 [start, end) 이며 최신 구간부터 생성된다.
전체 기간이 구간 길이로 나누어 떨어지지 않으면 마지막 구간은
기준 시점(start_from - total_duration)보다 과거까지 확장된다 (잘라내지 않음).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterator

from core.constants import Defaults
from core.utils.timezone import ensure_utc, now_utc, to_timestamp_ms


DEFAULT_HISTORY_INTERVAL = timedelta(days=Defaults.HISTORY_INTERVAL_DAYS)


@dataclass(frozen=True)
class TimeWindow:
    """조회 구간 [start, end)

    Attributes:
        start: 구간 시작 (UTC)
        end: 구간 종료 (UTC)
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(
                f"TimeWindow start must be before end: {self.start} >= {self.end}"
            )

    @property
    def start_ms(self) -> int:
        """구간 시작 (밀리초 타임스탬프)"""
        return to_timestamp_ms(self.start)

    @property
    def end_ms(self) -> int:
        """구간 종료 (밀리초 타임스탬프)"""
        return to_timestamp_ms(self.end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class WindowPlan:
    """과거 방향 구간 목록

    반복할 때마다 처음부터 다시 생성되며 (restartable), 항상 유한하다.

    Attributes:
        start_from: 가장 최신 구간의 종료 시점
        total_duration: 전체 조회 기간
        interval: 구간 길이 (API 최대 조회 범위)
    """

    start_from: datetime
    total_duration: timedelta
    interval: timedelta = DEFAULT_HISTORY_INTERVAL

    def __post_init__(self) -> None:
        if self.interval <= timedelta(0):
            raise ValueError(f"interval must be positive: {self.interval}")
        if self.total_duration < timedelta(0):
            raise ValueError(f"total_duration must not be negative: {self.total_duration}")
        object.__setattr__(self, "start_from", ensure_utc(self.start_from))

    @property
    def cutoff(self) -> datetime:
        """명목상 조회 하한 (start_from - total_duration)"""
        return self.start_from - self.total_duration

    def __iter__(self) -> Iterator[TimeWindow]:
        period_end = self.start_from
        cutoff = self.cutoff
        while period_end > cutoff:
            yield TimeWindow(start=period_end - self.interval, end=period_end)
            period_end -= self.interval

    def __len__(self) -> int:
        # ceil(total / interval)
        return -(-self.total_duration // self.interval)


def plan_windows(
    start_from: datetime | None = None,
    total_duration: timedelta | None = None,
    interval: timedelta = DEFAULT_HISTORY_INTERVAL,
) -> WindowPlan:
    """조회 구간 계획 생성

    Args:
        start_from: 조회 기준 시점 (None이면 현재)
        total_duration: 전체 조회 기간 (None이면 90일)
        interval: 구간 길이 (기본 90일)

    Returns:
        WindowPlan
    """
    return WindowPlan(
        start_from=start_from if start_from is not None else now_utc(),
        total_duration=total_duration if total_duration is not None else DEFAULT_HISTORY_INTERVAL,
        interval=interval,
    )
