"""
Wallet API 게이트웨이

입출금, 이체, 계정 상태, 수수료 조회 등 Wallet 엔드포인트별 메서드 제공.
모든 요청은 ISignedRestClient를 통해 1회 전송되며 응답은 공통 모델로 변환.
"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from adapters.binance.errors import ValidationError
from adapters.binance.models import (
    parse_account_status,
    parse_api_key_permissions,
    parse_asset_details,
    parse_asset_dividend,
    parse_coin_info,
    parse_deposit_address,
    parse_deposit_record,
    parse_funding_asset,
    parse_list,
    parse_records_query_result,
    parse_response,
    parse_system_status,
    parse_trade_fee,
    parse_transaction_id,
    parse_universal_transfer_record,
    parse_withdraw_id,
    parse_withdrawal_record,
)
from adapters.binance.requests import (
    AccountSnapshotQuery,
    AssetDividendQuery,
    CoinWithdrawalRequest,
    DepositAddressQuery,
    DepositHistoryQuery,
    DepositQuestionnaireRequest,
    SubAccountDepositHistoryQuery,
    TravelRuleDepositHistoryQuery,
    UniversalTransferHistoryQuery,
    WithdrawalHistoryQuery,
)
from adapters.binance.rest_client import BinanceRestClient
from adapters.interfaces import ISignedRestClient
from adapters.models import (
    AccountStatus,
    ApiKeyPermissions,
    AssetDetail,
    AssetDividend,
    DepositAddress,
    DepositRecord,
    FundingAsset,
    RecordHistory,
    RecordsQueryResult,
    SystemStatus,
    TradeFee,
    TransactionId,
    UniversalTransferRecord,
    WalletCoinInfo,
    WithdrawalRecord,
    WithdrawId,
)
from core.config.loader import ExchangeConfig
from core.constants import Defaults, WalletEndpoints
from core.types import AdjustmentDirection, UniversalTransferType
from wallet.history import collect_history

logger = logging.getLogger(__name__)


class Wallet:
    """Wallet 엔드포인트 게이트웨이

    Args:
        client: 서명 요청 클라이언트
        recv_window: 허용 시간 오차 (밀리초)
        binance_us_api: Binance.US 경로 사용 여부 (거래 수수료 조회)
    """

    def __init__(
        self,
        client: ISignedRestClient,
        recv_window: int = Defaults.RECV_WINDOW_MS,
        binance_us_api: bool = False,
    ):
        self.client = client
        self.recv_window = recv_window
        self.binance_us_api = binance_us_api

    @classmethod
    def from_config(cls, config: ExchangeConfig) -> "Wallet":
        """ExchangeConfig로 BinanceRestClient를 생성하여 Wallet 구성"""
        return cls(
            client=BinanceRestClient.from_config(config),
            recv_window=config.recv_window,
            binance_us_api=config.binance_us_api,
        )

    # -------------------------------------------------------------------------
    # 시스템 / 코인 정보
    # -------------------------------------------------------------------------

    async def system_status(self) -> SystemStatus:
        """시스템 상태 조회 (서명 불필요)"""
        data = await self.client.get(WalletEndpoints.SYSTEM_STATUS)
        return parse_response(parse_system_status, data)

    async def all_coin_info(self) -> list[WalletCoinInfo]:
        """입출금 가능한 코인 정보 조회"""
        data = await self.client.get_signed(
            WalletEndpoints.CAPITAL_CONFIG_GETALL,
            recv_window=self.recv_window,
        )
        return parse_list(parse_coin_info, data)

    async def daily_account_snapshot(self, query: AccountSnapshotQuery) -> dict[str, Any]:
        """Daily Account Snapshot 조회

        조회 기간은 30일 미만, 최근 1개월만 지원.
        start_time/end_time 미지정 시 최근 7일.

        Note:
            - Weight: 2400 (매우 높음)
        """
        return await self.client.get_signed(
            WalletEndpoints.ACCOUNT_SNAPSHOT,
            query.to_params(),
            recv_window=self.recv_window,
        )

    # -------------------------------------------------------------------------
    # 출금
    # -------------------------------------------------------------------------

    async def disable_fast_withdraw_switch(self) -> None:
        """Fast Withdraw 비활성화"""
        await self.client.post_signed(
            WalletEndpoints.DISABLE_FAST_WITHDRAW_SWITCH,
            recv_window=self.recv_window,
        )

    async def enable_fast_withdraw_switch(self) -> None:
        """Fast Withdraw 활성화"""
        await self.client.post_signed(
            WalletEndpoints.ENABLE_FAST_WITHDRAW_SWITCH,
            recv_window=self.recv_window,
        )

    async def withdraw(self, request: CoinWithdrawalRequest) -> WithdrawId:
        """출금 신청

        Returns:
            출금 ID
        """
        data = await self.client.post_signed(
            WalletEndpoints.WITHDRAW_APPLY,
            request.to_params(),
            recv_window=self.recv_window,
        )
        withdraw_id = parse_response(parse_withdraw_id, data)

        logger.info(
            "출금 신청 완료",
            extra={
                "coin": request.coin,
                "network": request.network,
                "amount": str(request.amount),
                "withdraw_id": withdraw_id.id,
            },
        )

        return withdraw_id

    # -------------------------------------------------------------------------
    # 입출금 이력
    # -------------------------------------------------------------------------

    async def deposit_history(self, query: DepositHistoryQuery) -> list[DepositRecord]:
        """입금 내역 조회 (1회 조회 최대 90일)"""
        data = await self.client.get_signed(
            WalletEndpoints.DEPOSIT_HISTORY,
            query.to_params(),
            recv_window=self.recv_window,
        )
        return parse_list(parse_deposit_record, data)

    async def deposit_history_quick(
        self,
        query: DepositHistoryQuery,
        start_from: datetime | None = None,
        total_duration: timedelta | None = None,
    ) -> list[RecordHistory[DepositRecord]]:
        """장기간 입금 내역 조회

        start_from(기본 현재)부터 total_duration(기본 90일) 동안을
        90일 구간으로 나누어 과거 방향으로 조회한다.

        Returns:
            최신 구간부터 정렬된 구간별 입금 내역 (빈 구간 제외)
        """
        return await collect_history(
            self.deposit_history,
            query,
            start_from=start_from,
            total_duration=total_duration,
        )

    async def withdraw_history(self, query: WithdrawalHistoryQuery) -> list[WithdrawalRecord]:
        """출금 내역 조회 (1회 조회 최대 90일)"""
        data = await self.client.get_signed(
            WalletEndpoints.WITHDRAW_HISTORY,
            query.to_params(),
            recv_window=self.recv_window,
        )
        return parse_list(parse_withdrawal_record, data)

    async def withdraw_history_quick(
        self,
        query: WithdrawalHistoryQuery,
        start_from: datetime | None = None,
        total_duration: timedelta | None = None,
    ) -> list[RecordHistory[WithdrawalRecord]]:
        """장기간 출금 내역 조회

        start_from(기본 현재)부터 total_duration(기본 90일) 동안을
        90일 구간으로 나누어 과거 방향으로 조회한다.

        Example:
            >>> await wallet.withdraw_history_quick(
            ...     WithdrawalHistoryQuery(), total_duration=timedelta(weeks=52 * 5)
            ... )
        """
        return await collect_history(
            self.withdraw_history,
            query,
            start_from=start_from,
            total_duration=total_duration,
        )

    async def deposit_address(self, query: DepositAddressQuery) -> DepositAddress:
        """입금 주소 조회"""
        data = await self.client.get_signed(
            WalletEndpoints.DEPOSIT_ADDRESS,
            query.to_params(),
            recv_window=self.recv_window,
        )
        return parse_response(parse_deposit_address, data)

    async def sub_account_deposit_history(
        self,
        query: SubAccountDepositHistoryQuery,
    ) -> list[dict[str, Any]]:
        """브로커 하위 계정 입금 내역 조회

        조회 기간은 최근 7일 이내. 기간 미지정 시 최근 7일.
        """
        return await self.client.get_signed(
            WalletEndpoints.SUB_ACCOUNT_DEPOSIT_HISTORY,
            query.to_params(),
            recv_window=self.recv_window,
        )

    async def travel_rule_deposit_history(
        self,
        query: TravelRuleDepositHistoryQuery,
    ) -> list[dict[str, Any]]:
        """Travel Rule 입금 내역 조회"""
        return await self.client.get_signed(
            WalletEndpoints.TRAVEL_RULE_DEPOSIT_HISTORY,
            query.to_params(),
            recv_window=self.recv_window,
        )

    async def submit_deposit_questionnaire(
        self,
        request: DepositQuestionnaireRequest,
    ) -> dict[str, Any]:
        """UAE Travel Rule 입금 설문 제출

        Raises:
            ValidationError: depositOriginator 또는 receiveFrom 누락 (요청 전송 안 함)
        """
        questionnaire = request.questionnaire
        if questionnaire.deposit_originator == 0 or questionnaire.receive_from == 0:
            raise ValidationError(
                "Questionnaire must include depositOriginator and receiveFrom"
            )

        params = [
            ("tranId", request.tran_id),
            ("questionnaire", questionnaire.to_json()),
        ]

        return await self.client.put_signed(
            WalletEndpoints.TRAVEL_RULE_DEPOSIT_PROVIDE_INFO,
            params,
            recv_window=Defaults.QUESTIONNAIRE_RECV_WINDOW_MS,
        )

    # -------------------------------------------------------------------------
    # 이체
    # -------------------------------------------------------------------------

    async def universal_transfer(
        self,
        asset: str,
        amount: Decimal,
        transfer_type: UniversalTransferType,
        from_symbol: str | None = None,
        to_symbol: str | None = None,
    ) -> TransactionId:
        """Universal Transfer (계좌 간 이체)

        ISOLATEDMARGIN_MARGIN, ISOLATEDMARGIN_ISOLATEDMARGIN은 from_symbol 필수.
        MARGIN_ISOLATEDMARGIN, ISOLATEDMARGIN_ISOLATEDMARGIN은 to_symbol 필수.

        Raises:
            ValidationError: 필수 심볼 누락 (요청 전송 안 함)
        """
        if transfer_type.requires_from_symbol and not from_symbol:
            raise ValidationError(f"from_symbol is required for {transfer_type.value}")
        if transfer_type.requires_to_symbol and not to_symbol:
            raise ValidationError(f"to_symbol is required for {transfer_type.value}")

        params = [
            ("type", transfer_type),
            ("asset", asset),
            ("amount", amount),
            ("fromSymbol", from_symbol),
            ("toSymbol", to_symbol),
        ]

        data = await self.client.post_signed(
            WalletEndpoints.ASSET_TRANSFER,
            params,
            recv_window=self.recv_window,
        )
        transaction = parse_response(parse_transaction_id, data)

        logger.info(
            "Universal Transfer 완료",
            extra={
                "asset": asset,
                "amount": str(amount),
                "type": transfer_type.value,
                "tran_id": transaction.tran_id,
            },
        )

        return transaction

    async def universal_transfer_history(
        self,
        query: UniversalTransferHistoryQuery,
    ) -> RecordsQueryResult[UniversalTransferRecord]:
        """Universal Transfer 이력 조회

        최근 6개월까지 조회 가능, 기간 미지정 시 최근 7일.
        """
        data = await self.client.get_signed(
            WalletEndpoints.ASSET_TRANSFER,
            query.to_params(),
            recv_window=self.recv_window,
        )
        return parse_response(
            lambda d: parse_records_query_result(parse_universal_transfer_record, d),
            data,
        )

    async def universal_transfer_subaccount(
        self,
        asset: str,
        amount: Decimal,
        from_email: str,
        to_email: str,
        from_account_type: str,
        to_account_type: str,
    ) -> dict[str, Any]:
        """하위 계정 간 Universal Transfer"""
        params = [
            ("fromEmail", from_email),
            ("toEmail", to_email),
            ("fromAccountType", from_account_type),
            ("toAccountType", to_account_type),
            ("asset", asset),
            ("amount", amount),
        ]

        return await self.client.post_signed(
            WalletEndpoints.SUB_ACCOUNT_UNIVERSAL_TRANSFER,
            params,
            recv_window=self.recv_window,
        )

    # -------------------------------------------------------------------------
    # 계정 상태
    # -------------------------------------------------------------------------

    async def account_status(self) -> AccountStatus:
        """계정 상태 조회"""
        data = await self.client.get_signed(
            WalletEndpoints.ACCOUNT_STATUS,
            recv_window=self.recv_window,
        )
        return parse_response(parse_account_status, data)

    async def api_trading_status(self) -> dict[str, Any]:
        """API 거래 상태 조회"""
        return await self.client.get_signed(
            WalletEndpoints.API_TRADING_STATUS,
            recv_window=self.recv_window,
        )

    async def api_key_permissions(self) -> ApiKeyPermissions:
        """API 키 권한 조회"""
        data = await self.client.get_signed(
            WalletEndpoints.API_RESTRICTIONS,
            recv_window=self.recv_window,
        )
        return parse_response(parse_api_key_permissions, data)

    # -------------------------------------------------------------------------
    # Dust / 배당 / 자산
    # -------------------------------------------------------------------------

    async def dust_log(
        self,
        start_time: int | None = None,
        end_time: int | None = None,
    ) -> dict[str, Any]:
        """Dust → BNB 전환 이력 조회 (최근 100건)"""
        params = [
            ("startTime", start_time),
            ("endTime", end_time),
        ]
        return await self.client.get_signed(
            WalletEndpoints.DUST_LOG,
            params,
            recv_window=self.recv_window,
        )

    async def convertible_assets(self) -> dict[str, Any]:
        """BNB로 전환 가능한 자산 조회"""
        return await self.client.post_signed(
            WalletEndpoints.DUST_BTC,
            recv_window=self.recv_window,
        )

    async def dust_transfer(self, assets: list[str]) -> dict[str, Any]:
        """Dust 자산을 BNB로 전환"""
        if not assets:
            raise ValidationError("assets must not be empty")

        return await self.client.post_signed(
            WalletEndpoints.DUST_TRANSFER,
            [("asset", asset) for asset in assets],
            recv_window=self.recv_window,
        )

    async def asset_dividends(
        self,
        query: AssetDividendQuery,
    ) -> RecordsQueryResult[AssetDividend]:
        """자산 배당 기록 조회"""
        data = await self.client.get_signed(
            WalletEndpoints.ASSET_DIVIDEND,
            query.to_params(),
            recv_window=self.recv_window,
        )
        return parse_response(
            lambda d: parse_records_query_result(parse_asset_dividend, d),
            data,
        )

    async def asset_detail(self, asset: str | None = None) -> dict[str, AssetDetail]:
        """자산별 입출금 상세 조회 (asset 미지정 시 전체)"""
        data = await self.client.get_signed(
            WalletEndpoints.ASSET_DETAIL,
            [("asset", asset)],
            recv_window=self.recv_window,
        )
        return parse_response(parse_asset_details, data)

    async def trade_fees(self, symbol: str | None = None) -> list[TradeFee]:
        """심볼별 거래 수수료 조회

        Binance.US는 별도 경로 사용.
        """
        path = WalletEndpoints.TRADE_FEE_US if self.binance_us_api else WalletEndpoints.TRADE_FEE
        data = await self.client.get_signed(
            path,
            [("symbol", symbol)],
            recv_window=self.recv_window,
        )
        return parse_list(parse_trade_fee, data)

    async def funding_wallet(
        self,
        asset: str | None = None,
        need_btc_valuation: bool | None = None,
    ) -> list[FundingAsset]:
        """Funding 지갑 조회

        Binance Pay, Binance Card, Binance Gift Card, Stock Token 자산.
        """
        params = [
            ("asset", asset),
            ("needBtcValuation", need_btc_valuation),
        ]
        data = await self.client.post_signed(
            WalletEndpoints.FUNDING_ASSET,
            params,
            recv_window=self.recv_window,
        )
        return parse_list(parse_funding_asset, data)

    # -------------------------------------------------------------------------
    # 대출
    # -------------------------------------------------------------------------

    async def get_loans(self) -> dict[str, Any]:
        """Flexible Loan 진행 중 주문 조회"""
        return await self.client.get_signed(
            WalletEndpoints.FLEXIBLE_LOAN_ONGOING_ORDERS,
            recv_window=self.recv_window,
        )

    async def get_vip_loans(self) -> dict[str, Any]:
        """VIP Loan 진행 중 주문 조회"""
        return await self.client.get_signed(
            WalletEndpoints.VIP_LOAN_ONGOING_ORDERS,
            recv_window=self.recv_window,
        )

    async def flexible_loan_adjust_ltv(
        self,
        loan_coin: str,
        collateral_coin: str,
        adjustment_amount: Decimal,
        direction: AdjustmentDirection,
    ) -> dict[str, Any]:
        """Flexible Loan 담보 비율(LTV) 조정"""
        params = [
            ("loanCoin", loan_coin),
            ("collateralCoin", collateral_coin),
            ("adjustmentAmount", adjustment_amount),
            ("direction", direction),
        ]
        return await self.client.post_signed(
            WalletEndpoints.FLEXIBLE_LOAN_ADJUST_LTV,
            params,
            recv_window=self.recv_window,
        )
