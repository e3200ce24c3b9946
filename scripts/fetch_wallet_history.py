"""입출금 이력 조회 스크립트

90일 구간으로 나누어 현재부터 과거 방향으로 입금 또는 출금 내역을 조회한다.

사용법:
    python scripts/fetch_wallet_history.py --kind deposit --days 365 --coin USDT
"""
import argparse
import asyncio
import logging
import sys
from datetime import timedelta
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.binance.errors import BinanceClientError
from adapters.binance.requests import DepositHistoryQuery, WithdrawalHistoryQuery
from adapters.binance.rest_client import BinanceRestClient
from core.config.loader import get_settings
from core.logging import setup_logging
from core.utils.timezone import utc_from_timestamp_ms
from wallet.gateway import Wallet

logger = logging.getLogger(__name__)


async def main(kind: str, days: int, coin: str | None, secrets_path: Path | None) -> int:
    config = get_settings(secrets_path).exchange_config

    async with BinanceRestClient.from_config(config) as client:
        wallet = Wallet(
            client,
            recv_window=config.recv_window,
            binance_us_api=config.binance_us_api,
        )

        try:
            if kind == "deposit":
                histories = await wallet.deposit_history_quick(
                    DepositHistoryQuery(coin=coin),
                    total_duration=timedelta(days=days),
                )
            else:
                histories = await wallet.withdraw_history_quick(
                    WithdrawalHistoryQuery(coin=coin),
                    total_duration=timedelta(days=days),
                )
        except BinanceClientError as e:
            logger.error(f"이력 조회 실패: {e}")
            return 1

    print("=" * 60)
    print(f"=== {kind} 이력 ({days}일) ===")
    print("=" * 60)

    for history in histories:
        print(f"\n[{history.start_at:%Y-%m-%d} ~ {history.end_at:%Y-%m-%d}] {len(history)}건")
        for record in history.records:
            if kind == "deposit":
                when = f"{utc_from_timestamp_ms(record.insert_time):%Y-%m-%d %H:%M:%S}"
            else:
                when = record.apply_time
            print(f"  {when} | {record.coin:6} | {record.amount:>18} | status={record.status}")

    total = sum(len(history) for history in histories)
    print(f"\n합계: {total}건")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Binance 입출금 이력 조회")
    parser.add_argument(
        "--kind",
        choices=["deposit", "withdraw"],
        default="deposit",
        help="조회 대상 (기본: deposit)",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=90,
        help="조회 기간 (일, 기본: 90)",
    )
    parser.add_argument("--coin", default=None, help="코인 코드 필터")
    parser.add_argument(
        "--secrets",
        type=Path,
        default=None,
        help="secrets.yaml 경로 (기본: config/secrets.yaml)",
    )
    args = parser.parse_args()

    setup_logging("wallet")
    sys.exit(asyncio.run(main(args.kind, args.days, args.coin, args.secrets)))
