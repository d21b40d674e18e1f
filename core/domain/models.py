"""
도메인 모델

Principal(사용자), Transaction(거래) 등 저장소에 기록되는 데이터 구조
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import uuid4

from core.ledger.types import Category, Direction, TransactionStatus
from core.types import Role
from core.utils.amount import format_amount
from core.utils.timezone import now_utc


@dataclass
class Principal:
    """사용자

    username, email은 전체 사용자 중 유일.
    wallet_address는 한 번 배정되면 변경되지 않음.
    """

    principal_id: str
    username: str
    email: str
    password_hash: str
    role: str = Role.USER.value
    wallet_address: str = ""
    created_at: datetime = field(default_factory=now_utc)

    @staticmethod
    def create(
        username: str,
        email: str,
        password_hash: str,
        wallet_address: str,
        role: Role | str = Role.USER,
    ) -> "Principal":
        """새 사용자 생성 (principal_id 자동 발급)"""
        return Principal(
            principal_id=uuid4().hex,
            username=username,
            email=email,
            password_hash=password_hash,
            role=Role(role).value,
            wallet_address=wallet_address,
        )

    def to_public(self) -> dict[str, Any]:
        """비밀번호 해시를 제외한 공개 정보"""
        return {
            "id": self.principal_id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "walletAddress": self.wallet_address,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class TransactionDraft:
    """검증을 마친 거래 요청 (ID 배정 전)"""

    description: str
    amount: Decimal
    direction: Direction
    category: Category = Category.OTHER
    counterparty: str | None = None


@dataclass(frozen=True)
class Transaction:
    """거래 (불변)

    생성 이후 수정/삭제되지 않음 (append-only).
    """

    transaction_id: int
    description: str
    amount: Decimal
    direction: str
    category: str
    sender: str
    receiver: str
    created_at: datetime
    ledger_ref: str
    created_by: str
    status: str = TransactionStatus.COMPLETED.value

    def to_dict(self) -> dict[str, Any]:
        """API 응답 형식으로 변환"""
        return {
            "transactionId": self.transaction_id,
            "description": self.description,
            "amount": format_amount(self.amount),
            "type": self.direction,
            "category": self.category,
            "sender": self.sender,
            "receiver": self.receiver,
            "timestamp": self.created_at.isoformat(),
            "blockchainHash": self.ledger_ref,
            "status": self.status,
            "createdBy": self.created_by,
        }


@dataclass(frozen=True)
class TransactionFilter:
    """거래 조회 필터

    정렬은 항상 transaction_id 기준 (동일 조건 재조회 시 동일 순서 보장).
    """

    created_by: str | None = None
    direction: str | None = None
    category: str | None = None
    limit: int | None = None
    offset: int = 0
    newest_first: bool = True

    def matches(self, transaction: Transaction) -> bool:
        """메모리 저장소용 조건 판정"""
        if self.created_by is not None and transaction.created_by != self.created_by:
            return False
        if self.direction is not None and transaction.direction != self.direction:
            return False
        if self.category is not None and transaction.category != self.category:
            return False
        return True
