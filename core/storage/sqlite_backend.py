"""
SQLite Ledger 저장소

ILedgerBackend Protocol 구현.
PrincipalStore / TransactionStore를 조합하고 SQLite 예외를 도메인 에러로 변환.
"""

import logging
import sqlite3
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.domain.models import Principal, Transaction, TransactionFilter
from core.errors import DuplicateIdError, DuplicatePrincipalError, StoreUnavailable
from core.storage.principal_store import PrincipalStore
from core.storage.transaction_store import TransactionStore
from core.types import StorageTier

logger = logging.getLogger(__name__)


def _duplicate_field(error: sqlite3.IntegrityError) -> str | None:
    """UNIQUE 제약 위반 메시지에서 컬럼 이름 추출

    예: "UNIQUE constraint failed: principal.email" → "email"
    """
    message = str(error)
    if "UNIQUE constraint failed" not in message:
        return None
    column = message.rsplit(":", 1)[-1].strip()
    return column.split(".", 1)[-1]


class SQLiteLedgerBackend:
    """SQLite Ledger 저장소

    Args:
        db_path: DB 파일 경로
        busy_timeout_ms: 잠금 대기 시간 (밀리초)

    에러 변환:
        - UNIQUE(username/email/wallet_address) → DuplicatePrincipalError
        - UNIQUE(transaction_id) → DuplicateIdError
        - 그 외 DatabaseError, 미연결 → StoreUnavailable
    """

    def __init__(self, db_path: Path | str, busy_timeout_ms: int = 5000):
        self.db = SQLiteAdapter(db_path, busy_timeout_ms=busy_timeout_ms)
        self.principals = PrincipalStore(self.db)
        self.transactions = TransactionStore(self.db)

    @property
    def tier(self) -> StorageTier:
        return StorageTier.PERSISTENT

    @asynccontextmanager
    async def _guard(self) -> AsyncIterator[None]:
        """저장소 접근 불가 예외를 StoreUnavailable로 변환"""
        try:
            yield
        except sqlite3.IntegrityError:
            raise
        except sqlite3.DatabaseError as e:
            logger.warning(f"SQLite 오류: {e}", extra={"db_path": str(self.db.db_path)})
            raise StoreUnavailable(f"Database error: {e}") from e
        except RuntimeError as e:
            # SQLiteAdapter 미연결
            raise StoreUnavailable(str(e)) from e

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        try:
            await self.db.connect()
            await init_schema(self.db)
        except (sqlite3.DatabaseError, OSError) as e:
            logger.warning(f"SQLite 연결 실패: {e}", extra={"db_path": str(self.db.db_path)})
            await self.db.close()
            raise StoreUnavailable(f"Database not available: {e}") from e

    async def close(self) -> None:
        await self.db.close()

    async def ping(self) -> bool:
        async with self._guard():
            await self.db.fetchone("SELECT 1")
        return True

    # -------------------------------------------------------------------------
    # 사용자
    # -------------------------------------------------------------------------

    async def insert_principal(self, principal: Principal) -> Principal:
        async with self._guard():
            try:
                return await self.principals.insert(principal)
            except sqlite3.IntegrityError as e:
                field = _duplicate_field(e)
                if field is None:
                    raise StoreUnavailable(f"Database error: {e}") from e
                raise DuplicatePrincipalError(field) from e

    async def find_principal(self, principal_id: str) -> Principal | None:
        async with self._guard():
            return await self.principals.find_by_id(principal_id)

    async def find_principal_by_username(self, username: str) -> Principal | None:
        async with self._guard():
            return await self.principals.find_by_username(username)

    async def find_principal_by_email(self, email: str) -> Principal | None:
        async with self._guard():
            return await self.principals.find_by_email(email)

    async def find_principals(self) -> list[Principal]:
        async with self._guard():
            return await self.principals.find_all()

    async def count_principals(self) -> int:
        async with self._guard():
            return await self.principals.count()

    async def list_wallet_addresses(self) -> list[tuple[str, str]]:
        async with self._guard():
            return await self.principals.list_wallets()

    # -------------------------------------------------------------------------
    # 거래
    # -------------------------------------------------------------------------

    async def insert_transaction(self, transaction: Transaction) -> Transaction:
        async with self._guard():
            try:
                return await self.transactions.insert(transaction)
            except sqlite3.IntegrityError as e:
                if _duplicate_field(e) == "transaction_id":
                    raise DuplicateIdError(transaction.transaction_id) from e
                # FOREIGN KEY / CHECK 위반은 호출자 버그
                raise StoreUnavailable(f"Database error: {e}") from e

    async def find_transactions(self, flt: TransactionFilter) -> list[Transaction]:
        async with self._guard():
            return await self.transactions.find(flt)

    async def count_transactions(self, flt: TransactionFilter) -> int:
        async with self._guard():
            return await self.transactions.count(flt)

    async def find_max_transaction_id(self) -> int | None:
        async with self._guard():
            return await self.transactions.max_id()
