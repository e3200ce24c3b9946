"""
Binance API 응답 -> 공통 모델 변환

Wallet API 응답을 adapters.models의 표준 모델로 변환.
모든 금액/수량은 문자열에서 Decimal로 변환.
응답 형식이 예상과 다르면 SerializationError.
"""

from decimal import Decimal
from typing import Any, Callable, TypeVar

from adapters.binance.errors import SerializationError
from adapters.models import (
    AccountStatus,
    ApiKeyPermissions,
    AssetDetail,
    AssetDividend,
    CoinNetwork,
    DepositAddress,
    DepositRecord,
    FundingAsset,
    RecordsQueryResult,
    SystemStatus,
    TradeFee,
    TransactionId,
    UniversalTransferRecord,
    WalletCoinInfo,
    WithdrawalRecord,
    WithdrawId,
)


T = TypeVar("T")

_PARSE_ERRORS = (KeyError, TypeError, ValueError, ArithmeticError, AttributeError)


def _name(parser: Callable[..., Any]) -> str:
    return getattr(parser, "__name__", repr(parser))


def parse_response(parser: Callable[[Any], T], data: Any) -> T:
    """단일 응답 변환 (실패 시 SerializationError)"""
    try:
        return parser(data)
    except _PARSE_ERRORS as e:
        raise SerializationError(
            f"{_name(parser)} failed: {type(e).__name__}: {e}"
        ) from e


def parse_list(parser: Callable[[Any], T], data: Any) -> list[T]:
    """리스트 응답 변환 (실패 시 SerializationError)"""
    if not isinstance(data, list):
        raise SerializationError(
            f"{_name(parser)} expected a list, got {type(data).__name__}"
        )
    return [parse_response(parser, item) for item in data]


def _dec(value: Any) -> Decimal:
    # float 응답도 문자열을 거쳐 정확히 변환
    return Decimal(str(value))


def parse_system_status(data: dict[str, Any]) -> SystemStatus:
    """GET /sapi/v1/system/status

    {"status": 0, "msg": "normal"}
    """
    return SystemStatus(status=int(data["status"]), msg=data["msg"])


def parse_coin_network(data: dict[str, Any]) -> CoinNetwork:
    return CoinNetwork(
        network=data["network"],
        coin=data["coin"],
        name=data.get("name", ""),
        deposit_enable=bool(data["depositEnable"]),
        withdraw_enable=bool(data["withdrawEnable"]),
        withdraw_fee=_dec(data["withdrawFee"]),
        withdraw_min=_dec(data["withdrawMin"]),
        withdraw_max=_dec(data["withdrawMax"]),
        is_default=bool(data.get("isDefault", False)),
        min_confirm=int(data.get("minConfirm", 0)),
        unlock_confirm=int(data.get("unLockConfirm", 0)),
        address_regex=data.get("addressRegex", ""),
        memo_regex=data.get("memoRegex", ""),
        withdraw_integer_multiple=_dec(data.get("withdrawIntegerMultiple", "0")),
    )


def parse_coin_info(data: dict[str, Any]) -> WalletCoinInfo:
    """GET /sapi/v1/capital/config/getall 항목

    {
        "coin": "BTC",
        "depositAllEnable": true,
        "free": "0.08074558",
        "freeze": "0",
        "ipoable": "0",
        "ipoing": "0",
        "isLegalMoney": false,
        "locked": "0",
        "name": "Bitcoin",
        "networkList": [...],
        "storage": "0",
        "trading": true,
        "withdrawAllEnable": true,
        "withdrawing": "0"
    }
    """
    return WalletCoinInfo(
        coin=data["coin"],
        name=data.get("name", ""),
        free=_dec(data["free"]),
        locked=_dec(data["locked"]),
        freeze=_dec(data.get("freeze", "0")),
        withdrawing=_dec(data.get("withdrawing", "0")),
        deposit_all_enable=bool(data["depositAllEnable"]),
        withdraw_all_enable=bool(data["withdrawAllEnable"]),
        trading=bool(data.get("trading", False)),
        networks=tuple(parse_coin_network(n) for n in data.get("networkList", [])),
    )


def parse_deposit_record(data: dict[str, Any]) -> DepositRecord:
    """GET /sapi/v1/capital/deposit/hisrec 항목

    {
        "id": "769800519366885376",
        "amount": "0.001",
        "coin": "BNB",
        "network": "BNB",
        "status": 1,
        "address": "bnb136ns6lfw4zs5hg4n85vdthaad7hq5m4gtkgf23",
        "addressTag": "101764890",
        "txId": "98A3EA560C6B3336D348B6C83F0F95ECE4F1F5919E94BD006E5BF3BF264FACFC",
        "insertTime": 1661493146000,
        "transferType": 0,
        "confirmTimes": "1/1",
        "unlockConfirm": 0,
        "walletType": 0
    }
    """
    return DepositRecord(
        id=str(data["id"]),
        amount=_dec(data["amount"]),
        coin=data["coin"],
        network=data.get("network", ""),
        status=int(data["status"]),
        address=data.get("address", ""),
        address_tag=data.get("addressTag", ""),
        tx_id=data.get("txId", ""),
        insert_time=int(data["insertTime"]),
        transfer_type=int(data.get("transferType", 0)),
        confirm_times=data.get("confirmTimes", ""),
        unlock_confirm=int(data.get("unlockConfirm", 0)),
        wallet_type=int(data.get("walletType", 0)),
    )


def parse_withdrawal_record(data: dict[str, Any]) -> WithdrawalRecord:
    """GET /sapi/v1/capital/withdraw/history 항목

    {
        "id": "b6ae22b3aa844210a7041aee7589627c",
        "amount": "8.91000000",
        "transactionFee": "0.004",
        "coin": "USDT",
        "status": 6,
        "address": "0x94df8b352de7f46f64b01d3666bf6e936e44ce60",
        "txId": "0xb5ef8c13b968a406cc62a93a8bd80f9e9a906ef1b3fcf20a2e48573c17659268",
        "applyTime": "2019-10-12 11:12:02",
        "network": "ETH",
        "transferType": 0,
        "withdrawOrderId": "WITHDRAWtest123",
        "info": "The address is not valid. Please confirm with the recipient",
        "confirmNo": 3,
        "walletType": 1,
        "txKey": "",
        "completeTime": "2023-03-23 16:52:41"
    }
    """
    return WithdrawalRecord(
        id=str(data["id"]),
        amount=_dec(data["amount"]),
        transaction_fee=_dec(data.get("transactionFee", "0")),
        coin=data["coin"],
        status=int(data["status"]),
        address=data.get("address", ""),
        tx_id=data.get("txId", ""),
        apply_time=data.get("applyTime", ""),
        network=data.get("network", ""),
        transfer_type=int(data.get("transferType", 0)),
        withdraw_order_id=data.get("withdrawOrderId"),
        info=data.get("info", ""),
        confirm_no=int(data.get("confirmNo", 0)),
        wallet_type=int(data.get("walletType", 0)),
        tx_key=data.get("txKey", ""),
        complete_time=data.get("completeTime"),
    )


def parse_deposit_address(data: dict[str, Any]) -> DepositAddress:
    return DepositAddress(
        coin=data["coin"],
        address=data["address"],
        tag=data.get("tag", ""),
        url=data.get("url", ""),
    )


def parse_withdraw_id(data: dict[str, Any]) -> WithdrawId:
    return WithdrawId(id=str(data["id"]))


def parse_transaction_id(data: dict[str, Any]) -> TransactionId:
    return TransactionId(tran_id=int(data["tranId"]))


def parse_universal_transfer_record(data: dict[str, Any]) -> UniversalTransferRecord:
    return UniversalTransferRecord(
        asset=data["asset"],
        amount=_dec(data["amount"]),
        transfer_type=data["type"],
        status=data["status"],
        tran_id=int(data["tranId"]),
        timestamp=int(data["timestamp"]),
    )


def parse_asset_dividend(data: dict[str, Any]) -> AssetDividend:
    return AssetDividend(
        id=int(data["id"]),
        amount=_dec(data["amount"]),
        asset=data["asset"],
        div_time=int(data["divTime"]),
        en_info=data.get("enInfo", ""),
        tran_id=int(data["tranId"]),
    )


def parse_records_query_result(
    row_parser: Callable[[Any], T],
    data: dict[str, Any],
) -> RecordsQueryResult[T]:
    """{"total": n, "rows": [...]} 응답 변환

    결과가 없으면 Binance는 rows 키를 생략한다.
    """
    rows = data.get("rows") or []
    return RecordsQueryResult(
        total=int(data.get("total", len(rows))),
        rows=tuple(row_parser(row) for row in rows),
    )


def parse_account_status(data: dict[str, Any]) -> AccountStatus:
    return AccountStatus(data=data["data"])


def parse_asset_detail(data: dict[str, Any]) -> AssetDetail:
    return AssetDetail(
        min_withdraw_amount=_dec(data["minWithdrawAmount"]),
        deposit_status=bool(data["depositStatus"]),
        withdraw_fee=_dec(data["withdrawFee"]),
        withdraw_status=bool(data["withdrawStatus"]),
        deposit_tip=data.get("depositTip", ""),
    )


def parse_asset_details(data: dict[str, Any]) -> dict[str, AssetDetail]:
    """GET /sapi/v1/asset/assetDetail (자산 코드 → 상세)"""
    return {asset: parse_asset_detail(detail) for asset, detail in data.items()}


def parse_trade_fee(data: dict[str, Any]) -> TradeFee:
    """tradeFee 항목 (Binance.US query/trading-fee도 동일 키)

    {"symbol": "BTCUSDT", "makerCommission": "0.001", "takerCommission": "0.001"}
    """
    return TradeFee(
        symbol=data["symbol"],
        maker_commission=_dec(data["makerCommission"]),
        taker_commission=_dec(data["takerCommission"]),
    )


def parse_funding_asset(data: dict[str, Any]) -> FundingAsset:
    return FundingAsset(
        asset=data["asset"],
        free=_dec(data["free"]),
        locked=_dec(data["locked"]),
        freeze=_dec(data["freeze"]),
        withdrawing=_dec(data["withdrawing"]),
        btc_valuation=_dec(data.get("btcValuation", "0")),
    )


def parse_api_key_permissions(data: dict[str, Any]) -> ApiKeyPermissions:
    expiration = data.get("tradingAuthorityExpirationTime")
    return ApiKeyPermissions(
        ip_restrict=bool(data["ipRestrict"]),
        create_time=int(data["createTime"]),
        enable_withdrawals=bool(data["enableWithdrawals"]),
        enable_internal_transfer=bool(data["enableInternalTransfer"]),
        permits_universal_transfer=bool(data["permitsUniversalTransfer"]),
        enable_vanilla_options=bool(data.get("enableVanillaOptions", False)),
        enable_reading=bool(data["enableReading"]),
        enable_futures=bool(data.get("enableFutures", False)),
        enable_margin=bool(data.get("enableMargin", False)),
        enable_spot_and_margin_trading=bool(data.get("enableSpotAndMarginTrading", False)),
        trading_authority_expiration_time=int(expiration) if expiration is not None else None,
    )
