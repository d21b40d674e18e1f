"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
여러 Web 워커가 같은 DB 파일에 동시에 접근할 수 있도록 설정.

주의: SQLite alias로 time, count 사용 금지 (예약어)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

from core.constants import Paths
from core.types import Environment

logger = logging.getLogger(__name__)


def get_db_path(mode: Environment | str) -> Path:
    """환경에 따른 DB 경로 반환

    Args:
        mode: 실행 환경 (PRODUCTION/DEVELOPMENT)

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if isinstance(mode, str):
        mode = Environment(mode.lower())

    if mode == Environment.PRODUCTION:
        return Paths.PROD_DB
    return Paths.DEV_DB


async def create_connection(
    db_path: Path | str,
    busy_timeout_ms: int = 5000,
) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로
        busy_timeout_ms: 잠금 대기 시간 (밀리초)

    Returns:
        aiosqlite 연결 객체
    """
    db_path_str = str(db_path)

    # 디렉토리가 없으면 생성
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path_str)

    await conn.execute("PRAGMA journal_mode=WAL")
    # 잠금 대기가 길어지면 저장소 제한 시간보다 먼저 실패하도록
    await conn.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.info(
        "SQLite 연결 생성",
        extra={"db_path": db_path_str, "busy_timeout_ms": busy_timeout_ms},
    )

    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    WAL 모드로 SQLite 연결 관리.
    트랜잭션 컨텍스트 매니저 제공.

    Args:
        db_path: DB 파일 경로
        busy_timeout_ms: 잠금 대기 시간 (밀리초)

    사용 예시:
    ```python
    adapter = SQLiteAdapter(db_path)
    await adapter.connect()

    async with adapter.transaction():
        await adapter.execute("INSERT INTO ...")

    await adapter.close()
    ```
    """

    def __init__(self, db_path: Path | str, busy_timeout_ms: int = 5000):
        self.db_path = Path(db_path)
        self.busy_timeout_ms = busy_timeout_ms
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """연결 상태 확인"""
        return self._conn is not None

    async def connect(self) -> None:
        """연결 생성"""
        if self._conn is not None:
            return

        self._conn = await create_connection(self.db_path, self.busy_timeout_ms)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("SQLite 연결 종료")

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        """SQL 실행"""
        conn = self._require_conn()

        if parameters:
            return await conn.execute(sql, parameters)
        return await conn.execute(sql)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        """단일 행 조회"""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        """전체 행 조회"""
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        """커밋"""
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        """롤백"""
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 예외 시 자동 롤백.
        """
        conn = self._require_conn()

        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def table_exists(self, table_name: str) -> bool:
        """테이블 존재 여부 확인"""
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)

    Args:
        adapter: 연결된 SQLiteAdapter

    주의: 이미 존재하는 테이블은 건드리지 않음 (IF NOT EXISTS).
    """
    # principal (사용자)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS principal (
            principal_id     TEXT PRIMARY KEY,
            username         TEXT NOT NULL UNIQUE,
            email            TEXT NOT NULL UNIQUE,
            password_hash    TEXT NOT NULL,
            role             TEXT NOT NULL DEFAULT 'user',
            wallet_address   TEXT NOT NULL DEFAULT '',
            created_at       TEXT NOT NULL
        )
    """)

    # ledger_transaction (append-only 거래 원장)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS ledger_transaction (
            transaction_id   INTEGER PRIMARY KEY,
            description      TEXT NOT NULL,
            amount           TEXT NOT NULL,
            direction        TEXT NOT NULL CHECK (direction IN ('income', 'expense')),
            category         TEXT NOT NULL DEFAULT 'other',
            sender           TEXT NOT NULL,
            receiver         TEXT NOT NULL,
            created_at       TEXT NOT NULL,
            ledger_ref       TEXT NOT NULL,
            status           TEXT NOT NULL DEFAULT 'completed',
            created_by       TEXT NOT NULL,

            FOREIGN KEY (created_by) REFERENCES principal(principal_id)
        )
    """)

    # 지갑 주소는 빈 값(미배정)을 제외하고 유일
    await adapter.execute("""
        CREATE UNIQUE INDEX IF NOT EXISTS ux_principal_wallet
        ON principal(wallet_address) WHERE wallet_address != ''
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_ledger_transaction_created_by
        ON ledger_transaction(created_by, transaction_id)
    """)

    await adapter.commit()

    logger.info("스키마 초기화 완료")
