"""
Mock 서명 요청 클라이언트

테스트용 Mock REST 클라이언트.
ISignedRestClient Protocol 준수.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from adapters.binance.signer import Params, normalize_params
from core.constants import Defaults


@dataclass(frozen=True)
class MockCall:
    """기록된 요청"""

    method: str
    path: str
    params: tuple[tuple[str, str], ...]
    signed: bool
    recv_window: int | None

    @property
    def param_dict(self) -> dict[str, str]:
        return dict(self.params)


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    # 경로별 응답 큐 (path -> 응답 목록, 예외 인스턴스면 발생)
    responses: dict[str, deque[Any]] = field(default_factory=dict)

    # 큐가 비었을 때 경로별 기본 응답
    defaults: dict[str, Any] = field(default_factory=dict)

    # 요청 기록
    calls: list[MockCall] = field(default_factory=list)


class MockSignedRestClient:
    """Mock 서명 요청 클라이언트

    경로별로 등록한 응답을 순서대로 반환하고 모든 요청을 기록한다.

    사용 예시:
    ```python
    client = MockSignedRestClient()
    client.add_response("/sapi/v1/capital/deposit/hisrec", [{...}])
    client.add_response("/sapi/v1/capital/deposit/hisrec", BinanceApiError(-1000, "x"))

    wallet = Wallet(client)
    ```
    """

    def __init__(self, state: MockState | None = None):
        self.state = state or MockState()

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def add_response(self, path: str, response: Any) -> None:
        """응답 등록 (등록 순서대로 1회씩 반환, 예외면 발생)"""
        self.state.responses.setdefault(path, deque()).append(response)

    def set_default_response(self, path: str, response: Any) -> None:
        """큐가 비었을 때 반환할 기본 응답"""
        self.state.defaults[path] = response

    @property
    def calls(self) -> list[MockCall]:
        return self.state.calls

    def calls_to(self, path: str) -> list[MockCall]:
        return [call for call in self.state.calls if call.path == path]

    # -------------------------------------------------------------------------
    # ISignedRestClient
    # -------------------------------------------------------------------------

    async def _dispatch(
        self,
        method: str,
        path: str,
        params: Params | None,
        signed: bool,
        recv_window: int | None,
    ) -> Any:
        self.state.calls.append(
            MockCall(
                method=method,
                path=path,
                params=tuple(normalize_params(params)),
                signed=signed,
                recv_window=recv_window,
            )
        )

        queue = self.state.responses.get(path)
        if queue:
            response = queue.popleft()
        elif path in self.state.defaults:
            response = self.state.defaults[path]
        else:
            raise AssertionError(f"No mock response registered for {method} {path}")

        if isinstance(response, BaseException):
            raise response
        return response

    async def get(self, path: str, params: Params | None = None) -> Any:
        return await self._dispatch("GET", path, params, False, None)

    async def get_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        return await self._dispatch("GET", path, params, True, recv_window)

    async def post_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        return await self._dispatch("POST", path, params, True, recv_window)

    async def put_signed(
        self,
        path: str,
        params: Params | None = None,
        recv_window: int = Defaults.RECV_WINDOW_MS,
    ) -> Any:
        return await self._dispatch("PUT", path, params, True, recv_window)
