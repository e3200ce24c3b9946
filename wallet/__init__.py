"""
Wallet 패키지

Wallet 엔드포인트 게이트웨이와 기간 분할 이력 조회.
"""

from wallet.gateway import Wallet
from wallet.history import collect_history

__all__ = [
    "Wallet",
    "collect_history",
]
