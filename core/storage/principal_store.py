"""
PrincipalStore - 사용자 저장소

principal 테이블 CRUD (수정/삭제 없음).
SQLite 예외는 그대로 전파하며 도메인 에러 변환은 SQLiteLedgerBackend에서 수행.
"""

import logging
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import Principal
from core.utils.timezone import parse_iso

logger = logging.getLogger(__name__)


_COLUMNS = """
    principal_id, username, email, password_hash,
    role, wallet_address, created_at
"""


def _row_to_principal(row: tuple[Any, ...]) -> Principal:
    return Principal(
        principal_id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        role=row[4],
        wallet_address=row[5],
        created_at=parse_iso(row[6]),
    )


class PrincipalStore:
    """사용자 저장소

    Args:
        db: SQLiteAdapter 인스턴스
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def insert(self, principal: Principal) -> Principal:
        """사용자 저장 (트랜잭션, 실패 시 롤백)

        Raises:
            sqlite3.IntegrityError: username/email/wallet_address 중복
        """
        async with self.db.transaction():
            await self.db.execute(
                f"INSERT INTO principal ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    principal.principal_id,
                    principal.username,
                    principal.email,
                    principal.password_hash,
                    principal.role,
                    principal.wallet_address,
                    principal.created_at.isoformat(),
                ),
            )

        logger.debug(f"Saved principal: {principal.username}")
        return principal

    async def _find_one(self, where: str, value: str) -> Principal | None:
        row = await self.db.fetchone(
            f"SELECT {_COLUMNS} FROM principal WHERE {where} = ?",
            (value,),
        )
        return _row_to_principal(row) if row else None

    async def find_by_id(self, principal_id: str) -> Principal | None:
        return await self._find_one("principal_id", principal_id)

    async def find_by_username(self, username: str) -> Principal | None:
        return await self._find_one("username", username)

    async def find_by_email(self, email: str) -> Principal | None:
        return await self._find_one("email", email)

    async def find_all(self) -> list[Principal]:
        """전체 사용자 (가입 순)"""
        rows = await self.db.fetchall(
            f"SELECT {_COLUMNS} FROM principal ORDER BY created_at, principal_id"
        )
        return [_row_to_principal(row) for row in rows]

    async def count(self) -> int:
        row = await self.db.fetchone("SELECT COUNT(*) FROM principal")
        return row[0] if row else 0

    async def list_wallets(self) -> list[tuple[str, str]]:
        """배정된 지갑 목록 (address, principal_id), 가입 순"""
        rows = await self.db.fetchall(
            """
            SELECT wallet_address, principal_id
            FROM principal
            WHERE wallet_address != ''
            ORDER BY created_at
            """
        )
        return [(row[0], row[1]) for row in rows]
