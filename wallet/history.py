"""
기간 분할 이력 조회

1회 조회 범위가 제한된 이력 API를 고정 길이 구간으로 나누어
현재(또는 start_from)부터 과거 방향으로 순차 조회하고,
비어 있지 않은 구간 결과만 RecordHistory 목록으로 모은다.

전부 아니면 전무: 어느 구간이든 실패하면 예외가 그대로 전달되고
그때까지 모은 결과는 반환되지 않는다. 취소 시에도 동일.
"""

import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Sequence, TypeVar

from adapters.binance.requests import TimeRangeQuery
from adapters.models import RecordHistory
from core.utils.windows import DEFAULT_HISTORY_INTERVAL, plan_windows

logger = logging.getLogger(__name__)


Q = TypeVar("Q", bound=TimeRangeQuery)
R = TypeVar("R")


async def collect_history(
    fetch: Callable[[Q], Awaitable[Sequence[R]]],
    query: Q,
    start_from: datetime | None = None,
    total_duration: timedelta | None = None,
    interval: timedelta = DEFAULT_HISTORY_INTERVAL,
) -> list[RecordHistory[R]]:
    """구간별 이력 조회 후 병합

    구간마다 query.with_window()로 새 요청을 만들어 fetch를 1회 호출한다.
    이전 구간 조회가 끝나야 다음 구간을 조회한다.

    Args:
        fetch: 구간 요청 → 레코드 목록 (1회 시도, 실패 시 예외)
        query: 기본 요청 (start_time/end_time은 구간 값으로 덮어씀)
        start_from: 조회 기준 시점 (None이면 현재)
        total_duration: 전체 조회 기간 (None이면 90일)
        interval: 구간 길이 (기본 90일, API 최대 범위)

    Returns:
        최신 구간부터 정렬된 RecordHistory 목록 (빈 구간 제외)

    Raises:
        fetch가 발생시킨 예외 (부분 결과 없음)
    """
    plan = plan_windows(start_from, total_duration, interval)
    result: list[RecordHistory[R]] = []

    for window in plan:
        records = await fetch(query.with_window(window))

        logger.debug(
            "History window fetched",
            extra={
                "start_ms": window.start_ms,
                "end_ms": window.end_ms,
                "records": len(records),
            },
        )

        if records:
            result.append(
                RecordHistory(
                    start_at=window.start,
                    end_at=window.end,
                    records=tuple(records),
                )
            )

    logger.info(
        "기간 분할 이력 조회 완료",
        extra={
            "windows": len(plan),
            "non_empty_windows": len(result),
            "records": sum(len(item) for item in result),
        },
    )

    return result
