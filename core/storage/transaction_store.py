"""
TransactionStore - 거래 원장 저장소

ledger_transaction 테이블 저장 및 조회.
append-only: INSERT와 SELECT만 존재.
"""

import logging
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.domain.models import Transaction, TransactionFilter
from core.utils.amount import format_amount
from core.utils.timezone import parse_iso

logger = logging.getLogger(__name__)


_COLUMNS = """
    transaction_id, description, amount, direction, category,
    sender, receiver, created_at, ledger_ref, status, created_by
"""


def _row_to_transaction(row: tuple[Any, ...]) -> Transaction:
    return Transaction(
        transaction_id=row[0],
        description=row[1],
        amount=Decimal(row[2]),
        direction=row[3],
        category=row[4],
        sender=row[5],
        receiver=row[6],
        created_at=parse_iso(row[7]),
        ledger_ref=row[8],
        status=row[9],
        created_by=row[10],
    )


def _where_clause(flt: TransactionFilter) -> tuple[str, list[Any]]:
    conditions: list[str] = []
    params: list[Any] = []

    if flt.created_by is not None:
        conditions.append("created_by = ?")
        params.append(flt.created_by)
    if flt.direction is not None:
        conditions.append("direction = ?")
        params.append(flt.direction)
    if flt.category is not None:
        conditions.append("category = ?")
        params.append(flt.category)

    if not conditions:
        return "", params
    return " WHERE " + " AND ".join(conditions), params


class TransactionStore:
    """거래 원장 저장소

    Args:
        db: SQLiteAdapter 인스턴스

    사용 예시:
    ```python
    store = TransactionStore(db)

    await store.insert(tx)
    txs = await store.find(TransactionFilter(created_by=principal_id))
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def insert(self, tx: Transaction) -> Transaction:
        """거래 저장

        Raises:
            sqlite3.IntegrityError: transaction_id 중복
        """
        async with self.db.transaction():
            await self.db.execute(
                f"INSERT INTO ledger_transaction ({_COLUMNS}) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    tx.transaction_id,
                    tx.description,
                    format_amount(tx.amount),
                    tx.direction,
                    tx.category,
                    tx.sender,
                    tx.receiver,
                    tx.created_at.isoformat(),
                    tx.ledger_ref,
                    tx.status,
                    tx.created_by,
                ),
            )

        logger.debug(f"Saved transaction: {tx.transaction_id}")
        return tx

    async def find(self, flt: TransactionFilter) -> list[Transaction]:
        """조건에 맞는 거래 목록 (transaction_id 순)"""
        where, params = _where_clause(flt)
        order = "DESC" if flt.newest_first else "ASC"

        # SQLite는 OFFSET 단독 사용 불가 → LIMIT -1 (무제한)
        limit = -1 if flt.limit is None else flt.limit
        params.extend([limit, flt.offset])

        rows = await self.db.fetchall(
            f"SELECT {_COLUMNS} FROM ledger_transaction{where} "
            f"ORDER BY transaction_id {order} LIMIT ? OFFSET ?",
            tuple(params),
        )
        return [_row_to_transaction(row) for row in rows]

    async def count(self, flt: TransactionFilter) -> int:
        """조건에 맞는 거래 수 (limit/offset 무시)"""
        where, params = _where_clause(flt)
        row = await self.db.fetchone(
            f"SELECT COUNT(*) FROM ledger_transaction{where}",
            tuple(params),
        )
        return row[0] if row else 0

    async def max_id(self) -> int | None:
        """가장 큰 transaction_id"""
        row = await self.db.fetchone("SELECT MAX(transaction_id) FROM ledger_transaction")
        return row[0] if row else None
