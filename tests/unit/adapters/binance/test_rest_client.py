"""
Binance REST 클라이언트 테스트

BinanceRestClient 서명 요청 전송 테스트 (httpx mock 사용).
"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from adapters.binance.errors import (
    BinanceApiError,
    SerializationError,
    TransportError,
    ValidationError,
)
from adapters.binance.rest_client import BinanceRestClient
from adapters.binance.signer import sign
from adapters.interfaces import ISignedRestClient
from core.config.loader import ExchangeConfig


BASE_URL = "https://api.binance.com"
API_KEY = "test_api_key"
API_SECRET = "test_secret_key"
FIXED_TS = 1499827319559


def _make_client() -> BinanceRestClient:
    return BinanceRestClient(
        base_url=BASE_URL,
        api_key=API_KEY,
        api_secret=API_SECRET,
    )


def _make_response(
    status_code: int = 200,
    json_data=None,
    content: bytes = b"{}",
    text: str = "",
) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = json_data
    mock_response.content = content
    mock_response.text = text
    mock_response.headers = {}
    return mock_response


class TestBinanceRestClientInit:
    """생성 테스트"""

    def test_empty_api_key_rejected(self) -> None:
        """빈 api_key 거부"""
        with pytest.raises(ValidationError):
            BinanceRestClient(base_url=BASE_URL, api_key="", api_secret="secret")

    def test_empty_api_secret_rejected(self) -> None:
        """빈 api_secret 거부"""
        with pytest.raises(ValidationError):
            BinanceRestClient(base_url=BASE_URL, api_key="key", api_secret="")

    def test_base_url_trailing_slash(self) -> None:
        """base_url 끝 슬래시 제거"""
        client = BinanceRestClient(base_url=f"{BASE_URL}/", api_key="k", api_secret="s")

        assert client.base_url == BASE_URL

    def test_from_config(self) -> None:
        """ExchangeConfig로부터 생성"""
        config = ExchangeConfig(
            rest_url="https://api.binance.us",
            api_key="us_key",
            api_secret="us_secret",
        )

        client = BinanceRestClient.from_config(config)

        assert client.base_url == "https://api.binance.us"
        assert client.api_key == "us_key"
        assert client.api_secret == "us_secret"

    def test_protocol_compliance(self) -> None:
        """ISignedRestClient Protocol 준수"""
        assert isinstance(_make_client(), ISignedRestClient)


class TestBinanceRestClientSignature:
    """서명 생성 테스트"""

    def test_generate_signature(self) -> None:
        """HMAC-SHA256 서명 생성"""
        client = _make_client()

        signature = client._generate_signature("coin=BTC&timestamp=1234567890")

        # 서명은 64자 hex 문자열
        assert len(signature) == 64
        assert all(c in "0123456789abcdef" for c in signature)

    def test_signature_uses_secret(self) -> None:
        """api_secret으로 서명"""
        client = _make_client()

        assert client._generate_signature("a=1") == sign(API_SECRET.encode(), b"a=1")

    def test_build_signed_query(self) -> None:
        """params 순서 + timestamp + recvWindow + signature"""
        client = _make_client()

        with patch.object(client, "_get_timestamp", return_value=FIXED_TS):
            query = client.build_signed_query(
                [("coin", "BTC"), ("status", None), ("limit", 10)],
                recv_window=5000,
            )

        payload = f"coin=BTC&limit=10&timestamp={FIXED_TS}&recvWindow=5000"
        expected_signature = sign(API_SECRET.encode(), payload.encode())

        assert query == f"{payload}&signature={expected_signature}"

    def test_build_signed_query_without_params(self) -> None:
        """파라미터 없는 서명 요청"""
        client = _make_client()

        with patch.object(client, "_get_timestamp", return_value=FIXED_TS):
            query = client.build_signed_query(None, recv_window=15000)

        assert query.startswith(f"timestamp={FIXED_TS}&recvWindow=15000&signature=")


class TestBinanceRestClientRequest:
    """요청 전송 테스트"""

    @pytest.mark.asyncio
    async def test_signed_get_sends_signed_url(self) -> None:
        """서명된 문자열 그대로 전송 + API 키 헤더"""
        client = _make_client()
        mock_response = _make_response(json_data=[{"coin": "BTC"}])

        with patch.object(client, "_get_client") as mock_get_client, \
                patch.object(client, "_get_timestamp", return_value=FIXED_TS):
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            result = await client.get_signed(
                "/sapi/v1/capital/deposit/hisrec",
                [("coin", "BTC")],
            )

        assert result == [{"coin": "BTC"}]

        args, kwargs = mock_http_client.request.call_args
        payload = f"coin=BTC&timestamp={FIXED_TS}&recvWindow=5000"
        signature = sign(API_SECRET.encode(), payload.encode())

        assert args[0] == "GET"
        assert args[1] == (
            f"{BASE_URL}/sapi/v1/capital/deposit/hisrec?{payload}&signature={signature}"
        )
        assert kwargs["headers"] == {"X-MBX-APIKEY": API_KEY}

    @pytest.mark.asyncio
    async def test_signed_methods(self) -> None:
        """POST/PUT 메서드 전달"""
        client = _make_client()
        mock_response = _make_response(json_data={"tranId": 1})

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            await client.post_signed("/sapi/v1/asset/transfer")
            await client.put_signed("/sapi/v1/localentity/deposit/provide-info")

        methods = [c.args[0] for c in mock_http_client.request.call_args_list]
        assert methods == ["POST", "PUT"]

    @pytest.mark.asyncio
    async def test_recv_window_passed(self) -> None:
        """recv_window 지정값 사용"""
        client = _make_client()
        mock_response = _make_response(json_data={})

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            await client.put_signed("/p", [("tranId", "1")], recv_window=15000)

        url = mock_http_client.request.call_args.args[1]
        assert "&recvWindow=15000&signature=" in url

    @pytest.mark.asyncio
    async def test_unsigned_get(self) -> None:
        """서명 없는 GET은 timestamp/signature 없음"""
        client = _make_client()
        mock_response = _make_response(json_data={"status": 0, "msg": "normal"})

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            result = await client.get("/sapi/v1/system/status")

        assert result == {"status": 0, "msg": "normal"}
        assert mock_http_client.request.call_args.args[1] == f"{BASE_URL}/sapi/v1/system/status"

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self) -> None:
        """빈 본문 → None"""
        client = _make_client()
        mock_response = _make_response(content=b"")

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            result = await client.post_signed("/sapi/v1/account/enableFastWithdrawSwitch")

        assert result is None

    @pytest.mark.asyncio
    async def test_invalid_json_raises_serialization_error(self) -> None:
        """JSON 디코딩 실패 → SerializationError"""
        client = _make_client()
        mock_response = _make_response(content=b"<html>")
        mock_response.json.side_effect = ValueError("Expecting value")

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            with pytest.raises(SerializationError):
                await client.get_signed("/sapi/v1/account/status")


class TestBinanceRestClientErrors:
    """에러 처리 테스트"""

    @pytest.mark.asyncio
    async def test_api_error_with_code(self) -> None:
        """에러 본문의 code/msg 사용"""
        client = _make_client()
        mock_response = _make_response(
            status_code=400,
            json_data={"code": -1102, "msg": "Mandatory parameter 'coin' was not sent."},
        )

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            with pytest.raises(BinanceApiError) as exc_info:
                await client.get_signed("/sapi/v1/capital/deposit/address")

        assert exc_info.value.code == -1102
        assert exc_info.value.status_code == 400
        assert "Mandatory parameter" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_api_error_logged_with_message(self, caplog: pytest.LogCaptureFixture) -> None:
        """에러 로그 후 BinanceApiError 발생 (KeyError 아님)"""
        client = _make_client()
        mock_response = _make_response(
            status_code=400,
            json_data={"code": -1102, "msg": "bad"},
        )

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            with caplog.at_level("WARNING", logger="adapters.binance.rest_client"):
                with pytest.raises(BinanceApiError):
                    await client.get_signed("/sapi/v1/capital/deposit/hisrec")

        record = next(r for r in caplog.records if r.getMessage() == "Binance API error")
        assert record.error_message == "bad"
        assert record.code == -1102

    @pytest.mark.asyncio
    async def test_api_error_non_json_body(self) -> None:
        """JSON이 아닌 에러 본문 → HTTP 상태 코드 사용"""
        client = _make_client()
        mock_response = _make_response(status_code=502, text="Bad Gateway")
        mock_response.json.side_effect = ValueError("not json")

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            with pytest.raises(BinanceApiError) as exc_info:
                await client.get_signed("/sapi/v1/capital/withdraw/history")

        assert exc_info.value.code == 502
        assert exc_info.value.message == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_no_retry_on_error(self) -> None:
        """실패 시 재시도 없음 (1회 전송)"""
        client = _make_client()
        mock_response = _make_response(
            status_code=429,
            json_data={"code": -1003, "msg": "Too many requests"},
        )

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.return_value = mock_response
            mock_get_client.return_value = mock_http_client

            with pytest.raises(BinanceApiError):
                await client.get_signed("/sapi/v1/capital/deposit/hisrec")

        assert mock_http_client.request.call_count == 1

    @pytest.mark.asyncio
    async def test_timeout_raises_transport_error(self) -> None:
        """타임아웃 → TransportError"""
        client = _make_client()

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.side_effect = httpx.ConnectTimeout("timed out")
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError) as exc_info:
                await client.get_signed("/sapi/v1/capital/deposit/hisrec")

        assert exc_info.value.path == "/sapi/v1/capital/deposit/hisrec"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self) -> None:
        """연결 실패 → TransportError"""
        client = _make_client()

        with patch.object(client, "_get_client") as mock_get_client:
            mock_http_client = AsyncMock()
            mock_http_client.request.side_effect = httpx.ConnectError("refused")
            mock_get_client.return_value = mock_http_client

            with pytest.raises(TransportError):
                await client.get("/sapi/v1/system/status")


class TestBinanceRestClientTimeSync:
    """서버 시간 동기화 테스트"""

    @pytest.mark.asyncio
    async def test_sync_time_sets_offset(self) -> None:
        """sync_time 호출 시 오프셋 저장"""
        client = _make_client()

        with patch.object(client, "get", return_value={"serverTime": 1_000_500}), \
                patch("adapters.binance.rest_client.time.time", return_value=1000.0):
            offset = await client.sync_time()
            timestamp = client._get_timestamp()

        assert offset == 500
        assert timestamp == 1_000_500

    @pytest.mark.asyncio
    async def test_no_implicit_sync(self) -> None:
        """명시 호출 전에는 오프셋 0"""
        client = _make_client()

        with patch("adapters.binance.rest_client.time.time", return_value=1000.0):
            assert client._get_timestamp() == 1_000_000

    @pytest.mark.asyncio
    async def test_invalid_server_time_response(self) -> None:
        """serverTime 누락 → SerializationError"""
        client = _make_client()

        with patch.object(client, "get", return_value={"unexpected": 1}):
            with pytest.raises(SerializationError):
                await client.get_server_time()


class TestBinanceRestClientLifecycle:
    """HTTP 클라이언트 수명 주기 테스트"""

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        """close 후 재생성"""
        client = _make_client()

        http_client = await client._get_client()
        assert isinstance(http_client, httpx.AsyncClient)

        await client.close()
        assert client._client is None

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        """async with 종료 시 close"""
        async with _make_client() as client:
            await client._get_client()

        assert client._client is None
