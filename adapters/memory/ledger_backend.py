"""
메모리 Ledger 저장소

ILedgerBackend Protocol 구현.
- storage.backend: memory 설정 시 기본 저장소
- SQLite 접근 불가 시 Facade의 fallback 저장소

프로세스 종료 시 데이터가 사라지며 SQLite와 동기화하지 않음.
"""

import logging
from collections.abc import Callable

from core.domain.models import Principal, Transaction, TransactionFilter
from core.errors import DuplicateIdError, DuplicatePrincipalError, StoreUnavailable
from core.types import StorageTier

logger = logging.getLogger(__name__)


class MemoryLedgerBackend:
    """메모리 Ledger 저장소

    SQLite 구현과 같은 유일성 규칙(username, email, wallet_address, transaction_id)을 적용.

    사용 예시:
    ```python
    backend = MemoryLedgerBackend()
    await backend.connect()

    await backend.insert_transaction(tx)
    assert await backend.find_max_transaction_id() == tx.transaction_id
    ```
    """

    def __init__(self, should_fail: bool = False):
        """
        Args:
            should_fail: True면 모든 호출이 StoreUnavailable (장애 시나리오 테스트용)
        """
        self.should_fail = should_fail
        self._principals: dict[str, Principal] = {}
        self._transactions: dict[int, Transaction] = {}
        # 삽입 직전 호출되는 훅 (경쟁 상황 재현용)
        self.before_insert: Callable[[Transaction], None] | None = None

    @property
    def tier(self) -> StorageTier:
        return StorageTier.MEMORY

    def _check(self) -> None:
        if self.should_fail:
            raise StoreUnavailable("Memory backend unavailable (should_fail)")

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        self._check()
        logger.info("메모리 저장소 사용")

    async def close(self) -> None:
        pass

    async def ping(self) -> bool:
        self._check()
        return True

    # -------------------------------------------------------------------------
    # 사용자
    # -------------------------------------------------------------------------

    async def insert_principal(self, principal: Principal) -> Principal:
        self._check()

        for existing in self._principals.values():
            if existing.username == principal.username:
                raise DuplicatePrincipalError("username")
            if existing.email == principal.email:
                raise DuplicatePrincipalError("email")
            if principal.wallet_address and existing.wallet_address == principal.wallet_address:
                raise DuplicatePrincipalError("wallet_address")

        self._principals[principal.principal_id] = principal
        return principal

    async def find_principal(self, principal_id: str) -> Principal | None:
        self._check()
        return self._principals.get(principal_id)

    async def find_principal_by_username(self, username: str) -> Principal | None:
        self._check()
        return next(
            (p for p in self._principals.values() if p.username == username),
            None,
        )

    async def find_principal_by_email(self, email: str) -> Principal | None:
        self._check()
        return next(
            (p for p in self._principals.values() if p.email == email),
            None,
        )

    async def find_principals(self) -> list[Principal]:
        self._check()
        return sorted(
            self._principals.values(),
            key=lambda p: (p.created_at, p.principal_id),
        )

    async def count_principals(self) -> int:
        self._check()
        return len(self._principals)

    async def list_wallet_addresses(self) -> list[tuple[str, str]]:
        self._check()
        return [
            (p.wallet_address, p.principal_id)
            for p in self._principals.values()
            if p.wallet_address
        ]

    # -------------------------------------------------------------------------
    # 거래
    # -------------------------------------------------------------------------

    async def insert_transaction(self, transaction: Transaction) -> Transaction:
        self._check()

        if self.before_insert is not None:
            self.before_insert(transaction)

        if transaction.transaction_id in self._transactions:
            raise DuplicateIdError(transaction.transaction_id)

        self._transactions[transaction.transaction_id] = transaction
        return transaction

    async def find_transactions(self, flt: TransactionFilter) -> list[Transaction]:
        self._check()

        ids = sorted(self._transactions, reverse=flt.newest_first)
        matched = [
            self._transactions[i] for i in ids if flt.matches(self._transactions[i])
        ]

        end = None if flt.limit is None else flt.offset + flt.limit
        return matched[flt.offset:end]

    async def count_transactions(self, flt: TransactionFilter) -> int:
        self._check()
        return sum(1 for tx in self._transactions.values() if flt.matches(tx))

    async def find_max_transaction_id(self) -> int | None:
        self._check()
        return max(self._transactions) if self._transactions else None

    # -------------------------------------------------------------------------
    # 테스트 헬퍼 메서드
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        """저장된 데이터 초기화"""
        self._principals.clear()
        self._transactions.clear()

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    @property
    def principal_count(self) -> int:
        return len(self._principals)
