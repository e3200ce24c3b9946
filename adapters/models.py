"""
어댑터 공통 데이터 모델

Wallet API 응답을 표준화한 도메인 모델.
모든 금액/수량은 Decimal, 시각은 밀리초 타임스탬프(int) 그대로 보관.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

from core.types import DepositStatus, SystemStatusCode, WithdrawStatus


T = TypeVar("T")


@dataclass(frozen=True)
class SystemStatus:
    """시스템 상태

    Attributes:
        status: 0 정상, 1 점검
        msg: 상태 메시지 ("normal" / "system_maintenance")
    """

    status: int
    msg: str

    @property
    def is_normal(self) -> bool:
        return self.status == SystemStatusCode.NORMAL


@dataclass(frozen=True)
class CoinNetwork:
    """코인별 입출금 네트워크 정보"""

    network: str
    coin: str
    name: str
    deposit_enable: bool
    withdraw_enable: bool
    withdraw_fee: Decimal
    withdraw_min: Decimal
    withdraw_max: Decimal
    is_default: bool = False
    min_confirm: int = 0
    unlock_confirm: int = 0
    address_regex: str = ""
    memo_regex: str = ""
    withdraw_integer_multiple: Decimal = Decimal("0")


@dataclass(frozen=True)
class WalletCoinInfo:
    """코인 정보 (입출금 가능 여부, 잔고)"""

    coin: str
    name: str
    free: Decimal
    locked: Decimal
    freeze: Decimal
    withdrawing: Decimal
    deposit_all_enable: bool
    withdraw_all_enable: bool
    trading: bool
    networks: tuple[CoinNetwork, ...] = ()


@dataclass(frozen=True)
class DepositRecord:
    """입금 내역

    Attributes:
        id: 입금 ID
        amount: 입금 수량
        coin: 코인 코드
        network: 네트워크
        status: 입금 상태 (DepositStatus)
        address: 입금 주소
        address_tag: 메모/태그
        tx_id: 트랜잭션 ID
        insert_time: 입금 시각 (밀리초)
        transfer_type: 0 외부, 1 내부 이체
        confirm_times: 컨펌 진행 ("12/12")
    """

    id: str
    amount: Decimal
    coin: str
    network: str
    status: int
    address: str
    address_tag: str
    tx_id: str
    insert_time: int
    transfer_type: int = 0
    confirm_times: str = ""
    unlock_confirm: int = 0
    wallet_type: int = 0

    @property
    def is_success(self) -> bool:
        return self.status == DepositStatus.SUCCESS


@dataclass(frozen=True)
class WithdrawalRecord:
    """출금 내역

    Attributes:
        id: 출금 ID
        amount: 출금 수량 (수수료 제외)
        transaction_fee: 출금 수수료
        coin: 코인 코드
        status: 출금 상태 (WithdrawStatus)
        address: 출금 주소
        tx_id: 트랜잭션 ID
        apply_time: 신청 시각 ("YYYY-MM-DD HH:MM:SS", UTC)
        network: 네트워크
    """

    id: str
    amount: Decimal
    transaction_fee: Decimal
    coin: str
    status: int
    address: str
    tx_id: str
    apply_time: str
    network: str
    transfer_type: int = 0
    withdraw_order_id: str | None = None
    info: str = ""
    confirm_no: int = 0
    wallet_type: int = 0
    tx_key: str = ""
    complete_time: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == WithdrawStatus.COMPLETED


@dataclass(frozen=True)
class DepositAddress:
    """입금 주소"""

    coin: str
    address: str
    tag: str
    url: str = ""


@dataclass(frozen=True)
class WithdrawId:
    """출금 신청 결과"""

    id: str


@dataclass(frozen=True)
class TransactionId:
    """이체 결과"""

    tran_id: int


@dataclass(frozen=True)
class UniversalTransferRecord:
    """Universal Transfer 이력"""

    asset: str
    amount: Decimal
    transfer_type: str
    status: str
    tran_id: int
    timestamp: int


@dataclass(frozen=True)
class AssetDividend:
    """자산 배당(에어드랍 등) 기록"""

    id: int
    amount: Decimal
    asset: str
    div_time: int
    en_info: str
    tran_id: int


@dataclass(frozen=True)
class RecordsQueryResult(Generic[T]):
    """total + rows 형태의 페이지 응답"""

    total: int
    rows: tuple[T, ...] = ()


@dataclass(frozen=True)
class AccountStatus:
    """계정 상태 ("Normal" 등)"""

    data: str


@dataclass(frozen=True)
class AssetDetail:
    """자산별 입출금 상세"""

    min_withdraw_amount: Decimal
    deposit_status: bool
    withdraw_fee: Decimal
    withdraw_status: bool
    deposit_tip: str = ""


@dataclass(frozen=True)
class TradeFee:
    """심볼별 거래 수수료율"""

    symbol: str
    maker_commission: Decimal
    taker_commission: Decimal


@dataclass(frozen=True)
class FundingAsset:
    """Funding 지갑 자산"""

    asset: str
    free: Decimal
    locked: Decimal
    freeze: Decimal
    withdrawing: Decimal
    btc_valuation: Decimal = Decimal("0")


@dataclass(frozen=True)
class ApiKeyPermissions:
    """API 키 권한"""

    ip_restrict: bool
    create_time: int
    enable_withdrawals: bool
    enable_internal_transfer: bool
    permits_universal_transfer: bool
    enable_vanilla_options: bool
    enable_reading: bool
    enable_futures: bool
    enable_margin: bool
    enable_spot_and_margin_trading: bool
    trading_authority_expiration_time: int | None = None


@dataclass(frozen=True)
class RecordHistory(Generic[T]):
    """기간별 조회 결과 묶음

    하나의 조회 구간 [start_at, end_at)에서 받은 레코드.
    생성 후 변경되지 않는다.

    Attributes:
        start_at: 구간 시작 (UTC)
        end_at: 구간 종료 (UTC)
        records: 해당 구간의 레코드 (비어 있지 않음)
    """

    start_at: datetime
    end_at: datetime
    records: tuple[T, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.records)
