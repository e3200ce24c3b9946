"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BinanceEndpoints:
    """Binance Spot/SAPI 베이스 URL (고정값)

    공식 문서: https://developers.binance.com/docs/wallet/Introduction
    """

    # Production
    PROD_REST_URL: str = "https://api.binance.com"

    # Testnet (Spot testnet은 SAPI 지갑 기능이 제한적)
    TEST_REST_URL: str = "https://testnet.binance.vision"

    # Binance.US
    US_REST_URL: str = "https://api.binance.us"

    API_KEY_HEADER: str = "X-MBX-APIKEY"


class WalletEndpoints:
    """Wallet API 경로"""

    SERVER_TIME: str = "/api/v3/time"

    SYSTEM_STATUS: str = "/sapi/v1/system/status"
    CAPITAL_CONFIG_GETALL: str = "/sapi/v1/capital/config/getall"
    ACCOUNT_SNAPSHOT: str = "/sapi/v1/accountSnapshot"
    DISABLE_FAST_WITHDRAW_SWITCH: str = "/sapi/v1/account/disableFastWithdrawSwitch"
    ENABLE_FAST_WITHDRAW_SWITCH: str = "/sapi/v1/account/enableFastWithdrawSwitch"
    WITHDRAW_APPLY: str = "/sapi/v1/capital/withdraw/apply"
    DEPOSIT_HISTORY: str = "/sapi/v1/capital/deposit/hisrec"
    WITHDRAW_HISTORY: str = "/sapi/v1/capital/withdraw/history"
    DEPOSIT_ADDRESS: str = "/sapi/v1/capital/deposit/address"
    ACCOUNT_STATUS: str = "/sapi/v1/account/status"
    API_TRADING_STATUS: str = "/sapi/v1/account/apiTradingStatus"
    DUST_LOG: str = "/sapi/v1/asset/dribblet"
    DUST_BTC: str = "/sapi/v1/asset/dust-btc"
    DUST_TRANSFER: str = "/sapi/v1/asset/dust"
    ASSET_DIVIDEND: str = "/sapi/v1/asset/assetDividend"
    ASSET_DETAIL: str = "/sapi/v1/asset/assetDetail"
    TRADE_FEE: str = "/sapi/v1/asset/tradeFee"
    TRADE_FEE_US: str = "/sapi/v1/asset/query/trading-fee"
    ASSET_TRANSFER: str = "/sapi/v1/asset/transfer"
    FUNDING_ASSET: str = "/sapi/v1/asset/get-funding-asset"
    API_RESTRICTIONS: str = "/sapi/v1/account/apiRestrictions"
    SUB_ACCOUNT_UNIVERSAL_TRANSFER: str = "/sapi/v1/sub-account/universalTransfer"
    SUB_ACCOUNT_DEPOSIT_HISTORY: str = "/sapi/v1/broker/subAccount/depositHist"
    TRAVEL_RULE_DEPOSIT_HISTORY: str = "/sapi/v1/localentity/deposit/history"
    TRAVEL_RULE_DEPOSIT_PROVIDE_INFO: str = "/sapi/v1/localentity/deposit/provide-info"
    FLEXIBLE_LOAN_ONGOING_ORDERS: str = "/sapi/v2/loan/flexible/ongoing/orders"
    VIP_LOAN_ONGOING_ORDERS: str = "/sapi/v1/loan/vip/ongoing/orders"
    FLEXIBLE_LOAN_ADJUST_LTV: str = "/sapi/v2/loan/flexible/adjust/ltv"


class Defaults:
    """기본값 상수"""

    RECV_WINDOW_MS: int = 5000
    QUESTIONNAIRE_RECV_WINDOW_MS: int = 15000
    HTTP_TIMEOUT_SEC: float = 30.0

    # 입출금 이력 API 1회 조회 최대 범위
    HISTORY_INTERVAL_DAYS: int = 90

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
