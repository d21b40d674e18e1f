"""
Ledger 참조 해시 유틸리티

거래 내용에서 결정적 참조 해시 생성 및 형식 판별
규칙:
- blockchain 모드: 0x{sha256 64자}
- mock 모드: mock_{sha256 앞 16자}
"""

import hashlib
from datetime import datetime
from decimal import Decimal

from core.types import ChainMode

CHAIN_REF_PREFIX: str = "0x"
MOCK_REF_PREFIX: str = "mock_"
MOCK_REF_LENGTH: int = 16


def make_ledger_ref(
    transaction_id: int,
    description: str,
    amount: Decimal,
    direction: str,
    sender: str,
    receiver: str,
    created_at: datetime,
    chain_mode: ChainMode | str = ChainMode.MOCK,
) -> str:
    """결정적 ledger 참조 해시 생성

    동일한 거래 내용이면 항상 동일한 해시.

    Args:
        transaction_id: 시퀀서가 배정한 거래 ID
        description: 거래 설명
        amount: 금액
        direction: income / expense
        sender: 보낸 지갑
        receiver: 받은 지갑
        created_at: 생성 시간
        chain_mode: 시작 시 결정된 체인 모드

    Returns:
        0x... 또는 mock_... 형식의 참조 해시

    Example:
        >>> make_ledger_ref(1, "Rent", Decimal("400"), "expense", "0xA", "external_receiver", ts)
        'mock_3f1c9a...'
    """
    if transaction_id < 1:
        raise ValueError("transaction_id는 1 이상이어야 합니다")

    canonical = "|".join([
        str(transaction_id),
        description,
        format(Decimal(amount).normalize(), "f"),
        str(direction),
        sender,
        receiver,
        created_at.isoformat(),
    ])
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    if ChainMode(chain_mode) == ChainMode.BLOCKCHAIN:
        return f"{CHAIN_REF_PREFIX}{digest}"
    return f"{MOCK_REF_PREFIX}{digest[:MOCK_REF_LENGTH]}"


def ledger_ref_mode(ledger_ref: str) -> ChainMode | None:
    """참조 해시가 어느 모드에서 생성되었는지 판별

    Returns:
        ChainMode 또는 None (형식 불일치 시)
    """
    if not ledger_ref:
        return None

    if ledger_ref.startswith(MOCK_REF_PREFIX):
        body = ledger_ref[len(MOCK_REF_PREFIX):]
        if len(body) == MOCK_REF_LENGTH and _is_hex(body):
            return ChainMode.MOCK
        return None

    if ledger_ref.startswith(CHAIN_REF_PREFIX):
        body = ledger_ref[len(CHAIN_REF_PREFIX):]
        if len(body) == 64 and _is_hex(body):
            return ChainMode.BLOCKCHAIN

    return None


def is_ledger_ref(ledger_ref: str) -> bool:
    """유효한 ledger 참조 해시인지 확인"""
    return ledger_ref_mode(ledger_ref) is not None


def _is_hex(text: str) -> bool:
    return all(c in "0123456789abcdef" for c in text)
