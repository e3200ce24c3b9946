"""
Binance 어댑터

Binance Spot/SAPI Wallet API 연동을 담당.
HMAC-SHA256 서명 요청과 응답 변환 지원.
"""

from adapters.binance.rest_client import BinanceRestClient
from adapters.binance.signer import sign, build_query_string
from adapters.binance.errors import (
    BinanceClientError,
    TransportError,
    BinanceApiError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "BinanceRestClient",
    "sign",
    "build_query_string",
    "BinanceClientError",
    "TransportError",
    "BinanceApiError",
    "SerializationError",
    "ValidationError",
]
