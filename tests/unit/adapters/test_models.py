"""
공통 모델 테스트

RecordHistory, DepositRecord, WithdrawalRecord 모델 테스트.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from adapters.models import (
    DepositRecord,
    RecordHistory,
    RecordsQueryResult,
    SystemStatus,
    WithdrawalRecord,
)
from core.types import DepositStatus, WithdrawStatus


def _deposit(status: int = DepositStatus.SUCCESS) -> DepositRecord:
    return DepositRecord(
        id="1",
        amount=Decimal("0.5"),
        coin="BTC",
        network="BTC",
        status=status,
        address="addr",
        address_tag="",
        tx_id="tx",
        insert_time=1661493146000,
    )


class TestDepositRecord:
    """DepositRecord 모델 테스트"""

    def test_is_success(self) -> None:
        """성공 상태"""
        assert _deposit().is_success
        assert not _deposit(DepositStatus.PENDING).is_success

    def test_frozen(self) -> None:
        """불변성 확인"""
        record = _deposit()

        with pytest.raises(AttributeError):
            record.amount = Decimal("1")  # type: ignore


class TestWithdrawalRecord:
    """WithdrawalRecord 모델 테스트"""

    def test_is_completed(self) -> None:
        """완료 상태"""
        record = WithdrawalRecord(
            id="w1",
            amount=Decimal("10"),
            transaction_fee=Decimal("1"),
            coin="USDT",
            status=WithdrawStatus.COMPLETED,
            address="0xabc",
            tx_id="0xdef",
            apply_time="2019-10-12 11:12:02",
            network="ETH",
        )

        assert record.is_completed


class TestRecordHistory:
    """RecordHistory 모델 테스트"""

    def test_len(self) -> None:
        """레코드 수"""
        end = datetime(2024, 1, 1, tzinfo=timezone.utc)
        history = RecordHistory(
            start_at=end - timedelta(days=90),
            end_at=end,
            records=(_deposit(), _deposit()),
        )

        assert len(history) == 2
        assert history.end_at - history.start_at == timedelta(days=90)

    def test_frozen(self) -> None:
        """생성 후 변경 불가"""
        end = datetime(2024, 1, 1, tzinfo=timezone.utc)
        history = RecordHistory(start_at=end - timedelta(days=1), end_at=end, records=(1,))

        with pytest.raises(AttributeError):
            history.records = ()  # type: ignore


class TestMisc:
    """기타 모델 테스트"""

    def test_system_status(self) -> None:
        """정상 여부"""
        assert SystemStatus(status=0, msg="normal").is_normal

    def test_records_query_result_default_rows(self) -> None:
        """rows 기본값"""
        assert RecordsQueryResult(total=0).rows == ()
