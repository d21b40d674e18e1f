"""
거래 서비스

거래 생성(ID 배정, sender/receiver 결정)과 사용자별 거래 조회
"""

import logging
from typing import Any

from core.domain.models import Principal, TransactionDraft, TransactionFilter
from core.errors import ValidationError
from core.ledger.sequencer import LedgerSequencer
from core.ledger.types import Category, Direction
from core.storage.facade import LedgerStoreFacade
from web.models.requests import TransactionCreateRequest

logger = logging.getLogger(__name__)


class TransactionService:
    """거래 서비스

    Args:
        store: Ledger Store Facade
        sequencer: 거래 ID 시퀀서
    """

    def __init__(self, store: LedgerStoreFacade, sequencer: LedgerSequencer):
        self.store = store
        self.sequencer = sequencer

    @staticmethod
    def to_draft(request: TransactionCreateRequest) -> TransactionDraft:
        """요청 검증 후 TransactionDraft 생성

        ID 배정 전에 모든 검증을 끝냄.

        Raises:
            ValidationError: 빈 설명, 잘못된 카테고리
            InvalidDirection: income/expense가 아닌 type
        """
        if not request.description:
            raise ValidationError("Description, amount, and type are required")

        return TransactionDraft(
            description=request.description,
            amount=request.amount,
            direction=Direction.parse(request.type),
            category=Category.parse(request.category),
            counterparty=request.receiver,
        )

    async def create(
        self,
        request: TransactionCreateRequest,
        principal: Principal,
    ) -> dict[str, Any]:
        """거래 생성

        Raises:
            ValidationError / InvalidDirection: 요청 오류
            DuplicateIdError: ID 충돌 재시도 초과
            StoreUnavailable: 저장소 접근 불가
        """
        draft = self.to_draft(request)
        transaction = await self.sequencer.commit(draft, principal)

        return {
            "success": True,
            "message": "Transaction added successfully",
            "transaction": transaction.to_dict(),
            "storage": self.store.storage_flag(),
        }

    async def list_for(
        self,
        principal: Principal,
        limit: int | None = None,
        offset: int = 0,
    ) -> dict[str, Any]:
        """사용자 거래 목록 (최신순)"""
        flt = TransactionFilter(
            created_by=principal.principal_id,
            limit=limit,
            offset=offset,
        )
        transactions = await self.store.find_all(flt)
        total = await self.store.count(TransactionFilter(created_by=principal.principal_id))

        return {
            "success": True,
            "count": len(transactions),
            "total": total,
            "transactions": [tx.to_dict() for tx in transactions],
            "storage": self.store.storage_flag(),
        }
