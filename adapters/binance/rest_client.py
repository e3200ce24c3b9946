"""
Binance Spot/SAPI REST API 클라이언트

HMAC-SHA256 서명 요청 전송 (signed-call dispatcher).
ISignedRestClient Protocol 준수.

재시도, Rate Limit, 캐시 없음: 모든 호출은 1회 시도이며 실패는 즉시 전달된다.
"""

import logging
import time
from typing import Any
from urllib.parse import urlencode

import httpx

from adapters.binance.errors import (
    BinanceApiError,
    SerializationError,
    TransportError,
    ValidationError,
)
from adapters.binance.signer import Params, normalize_params, sign
from core.config.loader import ExchangeConfig
from core.constants import BinanceEndpoints, Defaults, WalletEndpoints

logger = logging.getLogger(__name__)


class BinanceRestClient:
    """Binance REST API 클라이언트

    Args:
        base_url: REST API 베이스 URL
        api_key: API 키 (헤더로 전송)
        api_secret: API 시크릿 (서명에만 사용, 전송하지 않음)
        timeout: 요청 타임아웃 (초)

    Raises:
        ValidationError: api_key 또는 api_secret이 비어 있는 경우
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
    ):
        if not api_key or not api_secret:
            raise ValidationError("api_key and api_secret must not be empty")

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout

        self._client: httpx.AsyncClient | None = None

        # 서버 시간 동기화용 오프셋 (밀리초), sync_time() 호출 시에만 갱신
        self._time_offset: int = 0

    @classmethod
    def from_config(cls, config: ExchangeConfig, timeout: float = Defaults.HTTP_TIMEOUT_SEC) -> "BinanceRestClient":
        """ExchangeConfig로부터 생성"""
        return cls(
            base_url=config.rest_url,
            api_key=config.api_key,
            api_secret=config.api_secret,
            timeout=timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _generate_signature(self, query_string: str) -> str:
        """HMAC-SHA256 서명 생성

        Args:
            query_string: URL 인코딩된 파라미터 문자열

        Returns:
            16진수 서명 문자열
        """
        return sign(self.api_secret.encode("utf-8"), query_string.encode("utf-8"))

    def _get_timestamp(self) -> int:
        """서버 시간 오프셋이 적용된 타임스탬프 반환 (밀리초)"""
        return int(time.time() * 1000) + self._time_offset

    async def get_server_time(self) -> int:
        """서버 시간 조회 (밀리초)"""
        data = await self.get(WalletEndpoints.SERVER_TIME)
        try:
            return int(data["serverTime"])
        except (KeyError, TypeError, ValueError) as e:
            raise SerializationError(f"Unexpected server time response: {data!r}") from e

    async def sync_time(self) -> int:
        """서버 시간과 동기화

        로컬 시간과 서버 시간의 차이를 계산하여 오프셋 저장.
        명시적으로 호출한 경우에만 수행된다.

        Returns:
            계산된 시간 오프셋 (밀리초)
        """
        local_time = int(time.time() * 1000)
        server_time = await self.get_server_time()
        self._time_offset = server_time - local_time

        logger.info(
            "서버 시간 동기화 완료",
            extra={"offset_ms": self._time_offset},
        )

        return self._time_offset

    def build_signed_query(self, params: Params | None, recv_window: int) -> str:
        """서명이 붙은 쿼리 문자열 생성

        params 순서 그대로 timestamp, recvWindow를 덧붙인 문자열에 서명하고
        마지막에 signature를 추가한다. 서명 이후 문자열은 변경하지 않는다.
        """
        pairs = normalize_params(params)
        pairs.append(("timestamp", str(self._get_timestamp())))
        pairs.append(("recvWindow", str(recv_window)))

        query_string = urlencode(pairs)
        signature = self._generate_signature(query_string)
        return f"{query_string}&signature={signature}"

    async def _request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        signed: bool = False,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        """API 요청 실행 (1회 시도)

        Args:
            method: HTTP 메서드 (GET, POST, PUT, DELETE)
            path: API 경로 (예: /sapi/v1/capital/deposit/hisrec)
            params: 요청 파라미터 (순서 유지)
            signed: 서명 필요 여부
            recv_window: 허용 시간 오차 (밀리초)

        Returns:
            JSON 응답 (본문이 비어 있으면 None)

        Raises:
            TransportError: 네트워크 실패
            BinanceApiError: 2xx 이외 응답
            SerializationError: 응답이 JSON이 아닌 경우
        """
        if signed:
            query_string = self.build_signed_query(params, recv_window)
        else:
            query_string = urlencode(normalize_params(params))

        # 서명된 문자열을 그대로 전송 (httpx의 재인코딩 방지)
        url = f"{self.base_url}{path}"
        if query_string:
            url = f"{url}?{query_string}"

        headers = {BinanceEndpoints.API_KEY_HEADER: self.api_key}
        client = await self._get_client()

        logger.debug(
            "Binance request",
            extra={"method": method, "path": path, "signed": signed},
        )

        try:
            response = await client.request(method, url, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(
                "Request timeout",
                extra={"path": path, "error": str(e)},
            )
            raise TransportError(path, f"timeout: {e}") from e
        except httpx.RequestError as e:
            logger.error(
                "Request error",
                extra={"path": path, "error": str(e)},
            )
            raise TransportError(path, str(e)) from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            code, message = self._parse_error(response)
            logger.warning(
                "Binance API error",
                extra={"path": path, "status": status_code, "code": code, "error_message": message},
            )
            raise BinanceApiError(code=code, message=message, status_code=status_code)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise SerializationError(f"Invalid JSON response from {path}: {e}") from e

    @staticmethod
    def _parse_error(response: httpx.Response) -> tuple[int, str]:
        """에러 응답에서 (code, msg) 추출"""
        try:
            error_data = response.json()
        except ValueError:
            return response.status_code, response.text

        if not isinstance(error_data, dict):
            return response.status_code, response.text

        try:
            code = int(error_data.get("code", response.status_code))
        except (TypeError, ValueError):
            code = response.status_code
        return code, str(error_data.get("msg", response.text))

    # -------------------------------------------------------------------------
    # ISignedRestClient
    # -------------------------------------------------------------------------

    async def get(self, path: str, params: Params | None = None) -> Any:
        """서명 없는 GET"""
        return await self._request("GET", path, params=params)

    async def get_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        """서명된 GET"""
        return await self._request("GET", path, params=params, signed=True, recv_window=recv_window)

    async def post_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        """서명된 POST"""
        return await self._request("POST", path, params=params, signed=True, recv_window=recv_window)

    async def put_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        """서명된 PUT"""
        return await self._request("PUT", path, params=params, signed=True, recv_window=recv_window)

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "BinanceRestClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
