"""
타임존 유틸리티

내부 처리는 모두 UTC. API 파라미터는 밀리초 타임스탬프.
"""

from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    """naive datetime은 UTC로 간주하여 tzinfo 부여

    Args:
        dt: datetime 객체

    Returns:
        UTC 타임존의 datetime
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def utc_from_timestamp_ms(ts_ms: int) -> datetime:
    """밀리초 타임스탬프를 UTC datetime으로 변환

    Args:
        ts_ms: Unix 타임스탬프 (밀리초)

    Returns:
        UTC datetime

    Example:
        >>> utc_from_timestamp_ms(1708444800000)
        datetime(2024, 2, 20, 16, 0, 0, tzinfo=timezone.utc)
    """
    return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc)


def to_timestamp_ms(dt: datetime) -> int:
    """datetime을 밀리초 타임스탬프로 변환

    Args:
        dt: datetime 객체 (타임존 포함 권장)

    Returns:
        Unix 타임스탬프 (밀리초)
    """
    return int(ensure_utc(dt).timestamp() * 1000)
