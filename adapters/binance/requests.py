"""
Wallet API 요청 파라미터

불변 dataclass로 정의하고 to_params()로 API 파라미터 목록을 만든다.
목록 순서가 곧 서명 대상 문자열의 순서이므로 필드 순서를 바꾸지 않는다.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, TypeVar

from adapters.binance.errors import ValidationError
from core.types import AccountSnapshotType, UniversalTransferType
from core.utils.windows import TimeWindow


ParamList = list[tuple[str, Any]]

Q = TypeVar("Q", bound="TimeRangeQuery")


@dataclass(frozen=True)
class TimeRangeQuery(ABC):
    """startTime/endTime을 갖는 조회 요청

    with_window()는 구간만 바꾼 새 요청을 반환한다 (원본 불변).
    """

    start_time: int | None = None
    end_time: int | None = None

    def with_window(self: Q, window: TimeWindow) -> Q:
        return replace(self, start_time=window.start_ms, end_time=window.end_ms)

    @abstractmethod
    def to_params(self) -> ParamList:
        """API 파라미터 목록 (순서 = 서명 대상 문자열 순서)"""
        pass


@dataclass(frozen=True)
class DepositHistoryQuery(TimeRangeQuery):
    """입금 내역 조회

    Attributes:
        coin: 코인 코드
        status: 입금 상태 필터 (DepositStatus)
        offset: 건너뛸 개수
        limit: 조회 개수 (기본 1000, 최대 1000)
        tx_id: 트랜잭션 ID 필터
        include_source: 출처 주소 포함 여부
    """

    coin: str | None = None
    status: int | None = None
    offset: int | None = None
    limit: int | None = None
    tx_id: str | None = None
    include_source: bool | None = None

    def to_params(self) -> ParamList:
        return [
            ("coin", self.coin),
            ("status", self.status),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("offset", self.offset),
            ("limit", self.limit),
            ("txId", self.tx_id),
            ("includeSource", self.include_source),
        ]


@dataclass(frozen=True)
class WithdrawalHistoryQuery(TimeRangeQuery):
    """출금 내역 조회

    Attributes:
        coin: 코인 코드
        withdraw_order_id: 클라이언트 출금 ID
        status: 출금 상태 필터 (WithdrawStatus)
        offset: 건너뛸 개수
        limit: 조회 개수 (기본 1000, 최대 1000)
        id_list: 출금 ID 목록 (최대 45개)
    """

    coin: str | None = None
    withdraw_order_id: str | None = None
    status: int | None = None
    offset: int | None = None
    limit: int | None = None
    id_list: tuple[str, ...] | None = None

    def to_params(self) -> ParamList:
        return [
            ("coin", self.coin),
            ("withdrawOrderId", self.withdraw_order_id),
            ("status", self.status),
            ("offset", self.offset),
            ("limit", self.limit),
            ("idList", self.id_list),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
        ]


@dataclass(frozen=True)
class AccountSnapshotQuery(TimeRangeQuery):
    """Daily Account Snapshot 조회 (최근 1개월, limit 7~30)"""

    account_type: AccountSnapshotType = AccountSnapshotType.SPOT
    limit: int | None = None

    def to_params(self) -> ParamList:
        return [
            ("type", self.account_type),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("limit", self.limit),
        ]


@dataclass(frozen=True)
class UniversalTransferHistoryQuery(TimeRangeQuery):
    """Universal Transfer 이력 조회

    최근 6개월까지, 기간 미지정 시 최근 7일.
    """

    transfer_type: UniversalTransferType = UniversalTransferType.MAIN_FUNDING
    current: int | None = None
    size: int | None = None
    from_symbol: str | None = None
    to_symbol: str | None = None

    def to_params(self) -> ParamList:
        return [
            ("type", self.transfer_type),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("current", self.current),
            ("size", self.size),
            ("fromSymbol", self.from_symbol),
            ("toSymbol", self.to_symbol),
        ]


@dataclass(frozen=True)
class AssetDividendQuery(TimeRangeQuery):
    """자산 배당 기록 조회"""

    asset: str | None = None
    limit: int | None = None

    def to_params(self) -> ParamList:
        return [
            ("asset", self.asset),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("limit", self.limit),
        ]


@dataclass(frozen=True)
class SubAccountDepositHistoryQuery(TimeRangeQuery):
    """브로커 하위 계정 입금 내역 (최근 7일 범위)"""

    sub_account_id: str | None = None
    coin: str | None = None
    status: int | None = None
    limit: int | None = None
    offset: int | None = None

    def to_params(self) -> ParamList:
        return [
            ("subAccountId", self.sub_account_id),
            ("coin", self.coin),
            ("status", self.status),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("limit", self.limit),
            ("offset", self.offset),
        ]


@dataclass(frozen=True)
class TravelRuleDepositHistoryQuery(TimeRangeQuery):
    """Travel Rule 입금 내역 조회"""

    tr_id: str | None = None
    tx_id: str | None = None
    tran_id: str | None = None
    network: str | None = None
    coin: str | None = None
    travel_rule_status: int | None = None
    pending_questionnaire: bool | None = None
    offset: int | None = None
    limit: int | None = None

    def to_params(self) -> ParamList:
        return [
            ("trId", self.tr_id),
            ("txId", self.tx_id),
            ("tranId", self.tran_id),
            ("network", self.network),
            ("coin", self.coin),
            ("travelRuleStatus", self.travel_rule_status),
            ("pendingQuestionnaire", self.pending_questionnaire),
            ("startTime", self.start_time),
            ("endTime", self.end_time),
            ("offset", self.offset),
            ("limit", self.limit),
        ]


@dataclass(frozen=True)
class DepositAddressQuery:
    """입금 주소 조회"""

    coin: str
    network: str | None = None
    amount: Decimal | None = None

    def to_params(self) -> ParamList:
        return [
            ("coin", self.coin),
            ("network", self.network),
            ("amount", self.amount),
        ]


@dataclass(frozen=True)
class CoinWithdrawalRequest:
    """출금 신청

    Attributes:
        coin: 코인 코드
        address: 출금 주소
        amount: 출금 수량
        network: 네트워크 (미지정 시 기본 네트워크)
        address_tag: 메모/태그
        withdraw_order_id: 클라이언트 출금 ID
        transaction_fee_flag: 내부 이체 시 수수료를 수신자에게 부과
        name: 주소록 이름
        wallet_type: 0 Spot, 1 Funding
    """

    coin: str
    address: str
    amount: Decimal
    network: str | None = None
    address_tag: str | None = None
    withdraw_order_id: str | None = None
    transaction_fee_flag: bool | None = None
    name: str | None = None
    wallet_type: int | None = None

    def __post_init__(self) -> None:
        if not self.coin or not self.address:
            raise ValidationError("coin and address are required")
        if self.amount <= Decimal("0"):
            raise ValidationError("amount must be positive")

    def to_params(self) -> ParamList:
        return [
            ("coin", self.coin),
            ("withdrawOrderId", self.withdraw_order_id),
            ("network", self.network),
            ("address", self.address),
            ("addressTag", self.address_tag),
            ("amount", self.amount),
            ("transactionFeeFlag", self.transaction_fee_flag),
            ("name", self.name),
            ("walletType", self.wallet_type),
        ]


@dataclass(frozen=True)
class UaeQuestionnaire:
    """UAE Travel Rule 입금 설문

    deposit_originator, receive_from은 필수 (0은 미입력으로 간주).
    """

    deposit_originator: int
    receive_from: int
    org_type: int | None = None
    org_name: str | None = None
    country: str | None = None
    city: str | None = None
    vasp: str | None = None
    vasp_name: str | None = None

    def to_json(self) -> str:
        """questionnaire 파라미터용 JSON (None 필드 제외, 공백 없음)"""
        payload = {
            "depositOriginator": self.deposit_originator,
            "orgType": self.org_type,
            "orgName": self.org_name,
            "country": self.country,
            "city": self.city,
            "receiveFrom": self.receive_from,
            "vasp": self.vasp,
            "vaspName": self.vasp_name,
        }
        return json.dumps(
            {k: v for k, v in payload.items() if v is not None},
            separators=(",", ":"),
        )


@dataclass(frozen=True)
class DepositQuestionnaireRequest:
    """Travel Rule 입금 설문 제출"""

    tran_id: str
    questionnaire: UaeQuestionnaire
