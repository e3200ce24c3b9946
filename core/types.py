"""
타입 정의 모듈

Wallet API 요청/응답에 쓰이는 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum, IntEnum


class TradingMode(str, Enum):
    """접속 모드 (실거래 / 테스트넷 / Binance.US)"""

    PRODUCTION = "production"
    TESTNET = "testnet"
    US = "us"


class AccountSnapshotType(str, Enum):
    """Daily Account Snapshot 계좌 유형"""

    SPOT = "SPOT"
    MARGIN = "MARGIN"
    FUTURES = "FUTURES"


class UniversalTransferType(str, Enum):
    """Universal Transfer 유형 (출발_도착)"""

    MAIN_UMFUTURE = "MAIN_UMFUTURE"
    MAIN_CMFUTURE = "MAIN_CMFUTURE"
    MAIN_MARGIN = "MAIN_MARGIN"
    UMFUTURE_MAIN = "UMFUTURE_MAIN"
    UMFUTURE_MARGIN = "UMFUTURE_MARGIN"
    CMFUTURE_MAIN = "CMFUTURE_MAIN"
    CMFUTURE_MARGIN = "CMFUTURE_MARGIN"
    MARGIN_MAIN = "MARGIN_MAIN"
    MARGIN_UMFUTURE = "MARGIN_UMFUTURE"
    MARGIN_CMFUTURE = "MARGIN_CMFUTURE"
    ISOLATEDMARGIN_MARGIN = "ISOLATEDMARGIN_MARGIN"
    MARGIN_ISOLATEDMARGIN = "MARGIN_ISOLATEDMARGIN"
    ISOLATEDMARGIN_ISOLATEDMARGIN = "ISOLATEDMARGIN_ISOLATEDMARGIN"
    MAIN_FUNDING = "MAIN_FUNDING"
    FUNDING_MAIN = "FUNDING_MAIN"
    FUNDING_UMFUTURE = "FUNDING_UMFUTURE"
    UMFUTURE_FUNDING = "UMFUTURE_FUNDING"
    MARGIN_FUNDING = "MARGIN_FUNDING"
    FUNDING_MARGIN = "FUNDING_MARGIN"
    FUNDING_CMFUTURE = "FUNDING_CMFUTURE"
    CMFUTURE_FUNDING = "CMFUTURE_FUNDING"

    @property
    def requires_from_symbol(self) -> bool:
        """from_symbol 필수 여부 (Isolated Margin 출발)"""
        return self in (
            UniversalTransferType.ISOLATEDMARGIN_MARGIN,
            UniversalTransferType.ISOLATEDMARGIN_ISOLATEDMARGIN,
        )

    @property
    def requires_to_symbol(self) -> bool:
        """to_symbol 필수 여부 (Isolated Margin 도착)"""
        return self in (
            UniversalTransferType.MARGIN_ISOLATEDMARGIN,
            UniversalTransferType.ISOLATEDMARGIN_ISOLATEDMARGIN,
        )


class AdjustmentDirection(str, Enum):
    """Flexible Loan LTV 조정 방향"""

    ADDITIONAL = "ADDITIONAL"
    REDUCED = "REDUCED"


class DepositStatus(IntEnum):
    """입금 상태"""

    PENDING = 0
    SUCCESS = 1
    REJECTED = 2
    CREDITED_CANNOT_WITHDRAW = 6
    WRONG_DEPOSIT = 7
    WAITING_USER_CONFIRM = 8


class WithdrawStatus(IntEnum):
    """출금 상태"""

    EMAIL_SENT = 0
    CANCELLED = 1
    AWAITING_APPROVAL = 2
    REJECTED = 3
    PROCESSING = 4
    FAILURE = 5
    COMPLETED = 6


class SystemStatusCode(IntEnum):
    """시스템 상태 (0: 정상, 1: 점검)"""

    NORMAL = 0
    MAINTENANCE = 1
