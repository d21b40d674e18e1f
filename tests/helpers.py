"""
테스트 헬퍼 함수

테스트에서 공통으로 사용되는 도메인 객체 생성 함수.
"""

from datetime import datetime, timezone
from decimal import Decimal

from core.domain.models import Principal, Transaction
from core.ledger.types import Category, Direction


TEST_WALLETS = ("0xAAA", "0xBBB", "0xCCC")


def make_principal(
    principal_id: str = "p-alice",
    username: str = "alice",
    email: str = "alice@x.com",
    wallet_address: str = "0xAAA",
) -> Principal:
    """테스트용 사용자 생성"""
    return Principal(
        principal_id=principal_id,
        username=username,
        email=email,
        password_hash="hash",
        wallet_address=wallet_address,
    )


def make_transaction(
    transaction_id: int,
    amount: str = "100",
    direction: Direction = Direction.INCOME,
    category: Category = Category.OTHER,
    created_by: str = "p-alice",
    created_at: datetime | None = None,
) -> Transaction:
    """테스트용 거래 생성"""
    return Transaction(
        transaction_id=transaction_id,
        description=f"tx {transaction_id}",
        amount=Decimal(amount),
        direction=direction.value,
        category=category.value,
        sender="external_sender" if direction == Direction.INCOME else "0xAAA",
        receiver="0xAAA" if direction == Direction.INCOME else "external_receiver",
        created_at=created_at or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
        ledger_ref=f"mock_{transaction_id:016x}",
        created_by=created_by,
    )
