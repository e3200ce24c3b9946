"""
Binance 클라이언트 에러

- TransportError: 네트워크 실패 (연결, 타임아웃)
- BinanceApiError: 2xx 이외 응답
- SerializationError: 요청 인코딩 또는 응답 디코딩 실패
- ValidationError: 네트워크 호출 전 입력 검증 실패

재시도나 억제 없이 호출자에게 그대로 전달된다.
"""


class BinanceClientError(Exception):
    """Binance 클라이언트 에러 기반 클래스"""
    pass


class TransportError(BinanceClientError):
    """네트워크 전송 실패

    원인 httpx 예외는 __cause__로 보존된다.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Transport error on {path}: {message}")


class BinanceApiError(BinanceClientError):
    """Binance API 에러

    API 응답에서 에러 코드를 받았을 때 발생.
    본문이 JSON 에러 형식이 아니면 code는 HTTP 상태 코드.
    """

    def __init__(self, code: int, message: str, status_code: int | None = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"Binance API Error [{code}]: {message}")


class SerializationError(BinanceClientError):
    """요청/응답 직렬화 실패"""
    pass


class ValidationError(BinanceClientError, ValueError):
    """입력 검증 실패 (네트워크 호출 없음)"""
    pass
