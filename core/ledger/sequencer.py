"""
Ledger Sequencer

거래 ID 배정과 sender/receiver 결정.

ID 규칙:
- 저장된 최대 ID + 1 (거래가 없으면 1)
- 공유 write lock 안에서 조회와 저장을 함께 수행
- 저장소가 ID 중복을 거부하면(다른 프로세스와 경쟁) 최대 ID를 다시 읽어 재시도
"""

import asyncio
import logging

from core.constants import Defaults
from core.domain.models import Principal, Transaction, TransactionDraft
from core.errors import DuplicateIdError
from core.ledger.types import EXTERNAL_RECEIVER, EXTERNAL_SENDER, Direction
from core.storage.facade import LedgerStoreFacade
from core.types import ChainMode
from core.utils.ledger_ref import make_ledger_ref
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class LedgerSequencer:
    """거래 ID 시퀀서

    Args:
        store: Ledger Store Facade
        lock: 지갑 배정과 공유하는 write lock
        chain_mode: 시작 시 결정된 체인 모드 (참조 해시 형식)
        max_retries: ID 충돌 시 재시도 횟수

    사용 예시:
    ```python
    sequencer = LedgerSequencer(facade, asyncio.Lock())

    tx = await sequencer.commit(draft, principal)
    print(tx.transaction_id, tx.sender, tx.receiver)
    ```
    """

    def __init__(
        self,
        store: LedgerStoreFacade,
        lock: asyncio.Lock,
        chain_mode: ChainMode = ChainMode.MOCK,
        max_retries: int = Defaults.SEQUENCER_MAX_RETRIES,
    ):
        self.store = store
        self.lock = lock
        self.chain_mode = chain_mode
        self.max_retries = max_retries

    async def next_id(self) -> int:
        """다음 거래 ID (최대 ID + 1, 없으면 1)"""
        max_id = await self.store.find_max_id()
        return 1 if max_id is None else max_id + 1

    @staticmethod
    def attribute(
        direction: Direction | str,
        principal_wallet: str,
        counterparty: str | None = None,
    ) -> tuple[str, str]:
        """거래 방향에 따라 (sender, receiver) 결정

        income: 상대방 → 사용자 지갑
        expense: 사용자 지갑 → 상대방
        상대방이 없으면 external_sender / external_receiver.

        Raises:
            InvalidDirection: income/expense가 아닌 경우
        """
        direction = Direction.parse(direction)

        if direction == Direction.INCOME:
            return (counterparty or EXTERNAL_SENDER, principal_wallet)
        return (principal_wallet, counterparty or EXTERNAL_RECEIVER)

    def _build(self, transaction_id: int, draft: TransactionDraft, principal: Principal) -> Transaction:
        sender, receiver = self.attribute(
            draft.direction, principal.wallet_address, draft.counterparty
        )
        created_at = now_utc()

        ledger_ref = make_ledger_ref(
            transaction_id,
            draft.description,
            draft.amount,
            draft.direction.value,
            sender,
            receiver,
            created_at,
            chain_mode=self.chain_mode,
        )

        return Transaction(
            transaction_id=transaction_id,
            description=draft.description,
            amount=draft.amount,
            direction=draft.direction.value,
            category=draft.category.value,
            sender=sender,
            receiver=receiver,
            created_at=created_at,
            ledger_ref=ledger_ref,
            created_by=principal.principal_id,
        )

    async def commit(self, draft: TransactionDraft, principal: Principal) -> Transaction:
        """ID 배정 후 거래 저장

        Raises:
            DuplicateIdError: 재시도 횟수 초과
            StoreUnavailable: 저장소 접근 불가 (fallback 없음)
        """
        async with self.lock:
            attempt = 0
            while True:
                transaction_id = await self.next_id()
                tx = self._build(transaction_id, draft, principal)

                try:
                    saved = await self.store.insert(tx)
                except DuplicateIdError:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.error(
                            "거래 ID 충돌 재시도 초과",
                            extra={"transaction_id": transaction_id, "attempts": attempt},
                        )
                        raise
                    logger.warning(
                        "거래 ID 충돌, 재시도",
                        extra={"transaction_id": transaction_id, "attempt": attempt},
                    )
                    continue

                logger.info(
                    "거래 기록",
                    extra={
                        "transaction_id": saved.transaction_id,
                        "direction": saved.direction,
                        "tier": self.store.tier.value,
                    },
                )
                return saved
