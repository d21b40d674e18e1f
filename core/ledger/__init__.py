"""
거래 원장 (Ledger)

append-only 거래 기록, ID 시퀀싱, 집계.

- core.ledger.types: 거래 방향, 카테고리, 상태
- core.ledger.sequencer: 거래 ID 배정, sender/receiver 결정
- core.ledger.aggregation: 수입/지출/잔액 집계

주의: 도메인 모델(core.domain.models)이 types를 참조하므로
여기서는 types만 노출 (sequencer/aggregation은 모듈 경로로 import).
"""

from core.ledger.types import (
    EXTERNAL_RECEIVER,
    EXTERNAL_SENDER,
    Category,
    Direction,
    TransactionStatus,
)

__all__ = [
    "Direction",
    "Category",
    "TransactionStatus",
    "EXTERNAL_SENDER",
    "EXTERNAL_RECEIVER",
]
