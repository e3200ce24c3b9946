"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable

from adapters.binance.signer import Params


@runtime_checkable
class ISignedRestClient(Protocol):
    """서명 요청 REST 클라이언트 인터페이스

    각 호출은 독립적인 1회 시도이며 실패 시 예외를 발생시킨다.
    반환값은 디코딩된 JSON (본문이 없으면 None).
    """

    async def get(self, path: str, params: Params | None = None) -> Any:
        """서명 없는 GET"""
        ...

    async def get_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = ...,
    ) -> Any:
        """서명된 GET

        Args:
            path: API 경로
            params: 요청 파라미터 (순서가 서명 대상 문자열 순서)
            recv_window: 허용 시간 오차 (밀리초)
        """
        ...

    async def post_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = ...,
    ) -> Any:
        """서명된 POST"""
        ...

    async def put_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = ...,
    ) -> Any:
        """서명된 PUT"""
        ...
