"""
유틸리티 패키지

타임존 처리, 조회 기간 분할 등 공통 유틸리티
"""

from core.utils.timezone import (
    ensure_utc,
    now_utc,
    utc_from_timestamp_ms,
    to_timestamp_ms,
)
from core.utils.windows import (
    DEFAULT_HISTORY_INTERVAL,
    TimeWindow,
    WindowPlan,
    plan_windows,
)

__all__ = [
    "ensure_utc",
    "now_utc",
    "utc_from_timestamp_ms",
    "to_timestamp_ms",
    "DEFAULT_HISTORY_INTERVAL",
    "TimeWindow",
    "WindowPlan",
    "plan_windows",
]
