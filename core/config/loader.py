"""
설정 로더

secrets.yaml에서 접속 모드와 모드별 API 자격증명을 읽어
Wallet 클라이언트 접속 설정(ExchangeConfig)을 만든다.

secrets.yaml 형식:
    mode: production | testnet | us
    <mode>:
      api_key: "..."
      api_secret: "..."
      recv_window: 5000   # 선택
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import BinanceEndpoints, Defaults, Paths
from core.types import TradingMode


# 모드별 REST 베이스 URL
_REST_URLS: dict[TradingMode, str] = {
    TradingMode.PRODUCTION: BinanceEndpoints.PROD_REST_URL,
    TradingMode.TESTNET: BinanceEndpoints.TEST_REST_URL,
    TradingMode.US: BinanceEndpoints.US_REST_URL,
}


@dataclass(frozen=True)
class Secrets:
    """선택된 모드의 자격증명 (secrets.yaml에서 로드)"""

    mode: TradingMode
    api_key: str
    api_secret: str
    recv_window: int = Defaults.RECV_WINDOW_MS


@dataclass(frozen=True)
class ExchangeConfig:
    """Wallet 클라이언트 접속 설정

    Attributes:
        rest_url: REST 베이스 URL
        api_key: API 키
        api_secret: API 시크릿
        recv_window: 서명 요청 허용 시간 오차 (밀리초)
        binance_us_api: Binance.US 전용 경로 사용 여부
    """

    rest_url: str
    api_key: str
    api_secret: str
    recv_window: int = Defaults.RECV_WINDOW_MS
    binance_us_api: bool = False


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def _parse_mode(value: Any) -> TradingMode:
    if value is None:
        raise SecretsLoadError("secrets.yaml에 'mode' 필드가 없습니다")
    try:
        return TradingMode(value)
    except ValueError as e:
        valid_modes = [m.value for m in TradingMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{value}'. 유효한 값: {valid_modes}"
        ) from e


def _read_credentials(mode: TradingMode, section: Any) -> Secrets:
    """모드 섹션에서 api_key, api_secret, recv_window 검증"""
    if not isinstance(section, dict):
        raise SecretsLoadError(f"secrets.yaml에 '{mode.value}' 설정이 없습니다")

    for key in ("api_key", "api_secret"):
        if not section.get(key):
            raise SecretsLoadError(
                f"secrets.yaml의 {mode.value} 섹션에 '{key}'가 없습니다"
            )

    recv_window = section.get("recv_window", Defaults.RECV_WINDOW_MS)
    # bool은 int 하위 타입이므로 별도 제외
    if isinstance(recv_window, bool) or not isinstance(recv_window, int) or recv_window <= 0:
        raise SecretsLoadError(
            f"secrets.yaml의 {mode.value} 섹션 'recv_window'는 양의 정수여야 합니다: {recv_window!r}"
        )

    return Secrets(
        mode=mode,
        api_key=str(section["api_key"]),
        api_secret=str(section["api_secret"]),
        recv_window=recv_window,
    )


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 로드 후 선택된 모드의 자격증명 반환

    Args:
        path: secrets.yaml 경로 (None이면 config/secrets.yaml)

    Raises:
        SecretsLoadError: 파일 없음, 파싱 실패, 필수 항목 누락
        ValueError: 유효하지 않은 mode
    """
    path = path or Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    mode = _parse_mode(data.get("mode"))
    return _read_credentials(mode, data.get(mode.value))


def get_exchange_config(secrets: Secrets) -> ExchangeConfig:
    """모드에 맞는 베이스 URL을 붙여 ExchangeConfig 생성

    us 모드는 binance_us_api가 켜져 거래 수수료 조회 경로가 바뀐다.
    """
    return ExchangeConfig(
        rest_url=_REST_URLS[secrets.mode],
        api_key=secrets.api_key,
        api_secret=secrets.api_secret,
        recv_window=secrets.recv_window,
        binance_us_api=secrets.mode == TradingMode.US,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    최초 생성 시 secrets.yaml을 한 번만 로드한다.
    """

    _instance: "Settings | None" = None
    _secrets: Secrets | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._secrets is None:
            self._secrets = load_secrets(secrets_path)

    @property
    def secrets(self) -> Secrets:
        """로드된 자격증명"""
        assert self._secrets is not None
        return self._secrets

    @property
    def exchange_config(self) -> ExchangeConfig:
        """현재 모드의 접속 설정"""
        return get_exchange_config(self.secrets)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._secrets = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 싱글턴 반환 (secrets_path는 최초 호출에서만 사용)"""
    return Settings(secrets_path)
