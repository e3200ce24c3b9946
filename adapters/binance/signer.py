"""
Binance 요청 서명

HMAC-SHA256 서명과 서명 대상 쿼리 문자열(canonical parameter string) 생성.
서명은 전송되는 쿼리 문자열 그대로를 대상으로 하므로
파라미터 순서와 인코딩은 이 모듈에서만 결정한다.
"""

import hashlib
import hmac
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping
from urllib.parse import urlencode


Params = Mapping[str, Any] | Iterable[tuple[str, Any]]


def sign(secret: bytes, message: bytes) -> str:
    """HMAC-SHA256 서명 생성

    빈 secret도 그대로 계산한다 (빈 자격증명은 호출 측에서 거부).

    Args:
        secret: API 시크릿
        message: 전송될 쿼리 문자열 바이트

    Returns:
        64자 소문자 16진수 서명 문자열
    """
    return hmac.new(secret, message, hashlib.sha256).hexdigest()


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        # 지수 표기(1E-7) 대신 고정 소수점
        return format(value, "f")
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_encode_value(v) for v in value)
    return str(value)


def normalize_params(params: Params | None) -> list[tuple[str, str]]:
    """파라미터를 삽입 순서가 유지된 (key, value) 문자열 쌍 목록으로 변환

    - None 값은 제외
    - bool → "true"/"false"
    - Decimal → 고정 소수점 문자열
    - Enum → value
    - list/tuple → 콤마 연결
    """
    if params is None:
        return []

    items = params.items() if isinstance(params, Mapping) else params

    return [
        (str(key), _encode_value(value))
        for key, value in items
        if value is not None
    ]


def build_query_string(params: Params | None) -> str:
    """URL 인코딩된 쿼리 문자열 생성 (서명 대상이자 전송 문자열)"""
    return urlencode(normalize_params(params))
