"""
Ledger Store Facade

요청 처리 코드가 사용하는 단일 저장소 진입점.

- 모든 호출은 제한 시간(timeout_sec) 안에 끝나거나 실패
- 기본 저장소가 응답하지 않으면 fallback(메모리)으로 전환
- 전환은 프로세스 수명 동안 유지되며 두 저장소는 동기화하지 않음
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from adapters.interfaces import ILedgerBackend
from core.constants import Defaults
from core.domain.models import Principal, Transaction, TransactionFilter
from core.errors import StoreUnavailable
from core.types import StorageTier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LedgerStoreFacade:
    """Ledger 저장소 Facade

    Args:
        primary: 기본 저장소 (시작 시 선택된 ILedgerBackend)
        fallback: 장애 시 전환할 저장소 (None이면 StoreUnavailable 전파)
        timeout_sec: 저장소 호출 제한 시간

    사용 예시:
    ```python
    facade = LedgerStoreFacade(
        SQLiteLedgerBackend(db_path),
        fallback=MemoryLedgerBackend(),
    )
    await facade.connect()

    max_id = await facade.find_max_id()
    await facade.insert(tx)

    if facade.degraded:
        ...  # 메모리 저장소에 기록됨 (재시작 시 유실)
    ```
    """

    def __init__(
        self,
        primary: ILedgerBackend,
        fallback: ILedgerBackend | None = None,
        timeout_sec: float = Defaults.STORE_TIMEOUT_SEC,
    ):
        self._primary = primary
        self._fallback = fallback
        self._active = primary
        self.timeout_sec = timeout_sec
        self._degraded = False

    @property
    def tier(self) -> StorageTier:
        """현재 요청을 처리하는 저장소 계층"""
        return self._active.tier

    @property
    def degraded(self) -> bool:
        """fallback으로 전환되었는지 여부"""
        return self._degraded

    @property
    def active(self) -> ILedgerBackend:
        return self._active

    def storage_flag(self) -> dict[str, Any]:
        """응답에 포함되는 저장소 상태"""
        tier = self.tier
        return {
            "tier": tier.value,
            "degraded": self._degraded,
            "persisted": tier == StorageTier.PERSISTENT,
        }

    # -------------------------------------------------------------------------
    # 장애 전환
    # -------------------------------------------------------------------------

    async def _failover(self, reason: str) -> None:
        if self._fallback is None or self._degraded:
            return

        logger.warning(
            "저장소 장애, 메모리 저장소로 전환",
            extra={"reason": reason, "primary": self._primary.tier.value},
        )
        await self._fallback.connect()
        self._active = self._fallback
        self._degraded = True

    async def _call(
        self,
        op: str,
        func: Callable[[ILedgerBackend], Awaitable[T]],
    ) -> T:
        """제한 시간 적용 호출, 기본 저장소 장애 시 fallback으로 재실행"""
        backend = self._active
        try:
            return await asyncio.wait_for(func(backend), timeout=self.timeout_sec)
        except asyncio.TimeoutError:
            reason = f"{op} timed out after {self.timeout_sec}s"
            error = StoreUnavailable()
        except StoreUnavailable as e:
            reason = f"{op}: {e.message}"
            error = e

        if backend is not self._primary or self._fallback is None:
            logger.error("저장소 접근 불가", extra={"op": op, "reason": reason})
            raise error

        await self._failover(reason)
        try:
            return await asyncio.wait_for(func(self._active), timeout=self.timeout_sec)
        except asyncio.TimeoutError as e:
            raise StoreUnavailable(f"{op} timed out on fallback") from e

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """기본 저장소 연결 (실패 시 즉시 fallback 전환)"""
        try:
            await asyncio.wait_for(self._primary.connect(), timeout=self.timeout_sec)
        except (StoreUnavailable, asyncio.TimeoutError) as e:
            if self._fallback is None:
                raise StoreUnavailable() from e
            await self._failover(f"connect: {e}")

    async def close(self) -> None:
        await self._primary.close()
        if self._fallback is not None:
            await self._fallback.close()

    async def ping(self) -> bool:
        return await self._call("ping", lambda b: b.ping())

    # -------------------------------------------------------------------------
    # 거래
    # -------------------------------------------------------------------------

    async def find_all(self, flt: TransactionFilter | None = None) -> list[Transaction]:
        flt = flt or TransactionFilter()
        return await self._call("find_all", lambda b: b.find_transactions(flt))

    async def insert(self, transaction: Transaction) -> Transaction:
        """거래 저장

        Raises:
            DuplicateIdError: transaction_id 중복 (전환 대상 아님)
        """
        return await self._call("insert", lambda b: b.insert_transaction(transaction))

    async def count(self, flt: TransactionFilter | None = None) -> int:
        flt = flt or TransactionFilter()
        return await self._call("count", lambda b: b.count_transactions(flt))

    async def find_max_id(self) -> int | None:
        return await self._call("find_max_id", lambda b: b.find_max_transaction_id())

    # -------------------------------------------------------------------------
    # 사용자
    # -------------------------------------------------------------------------

    async def insert_principal(self, principal: Principal) -> Principal:
        return await self._call(
            "insert_principal", lambda b: b.insert_principal(principal)
        )

    async def find_principal(self, principal_id: str) -> Principal | None:
        return await self._call(
            "find_principal", lambda b: b.find_principal(principal_id)
        )

    async def find_principal_by_username(self, username: str) -> Principal | None:
        return await self._call(
            "find_principal_by_username",
            lambda b: b.find_principal_by_username(username),
        )

    async def find_principal_by_email(self, email: str) -> Principal | None:
        return await self._call(
            "find_principal_by_email",
            lambda b: b.find_principal_by_email(email),
        )

    async def find_principals(self) -> list[Principal]:
        return await self._call("find_principals", lambda b: b.find_principals())

    async def count_principals(self) -> int:
        return await self._call("count_principals", lambda b: b.count_principals())

    async def list_wallet_addresses(self) -> list[tuple[str, str]]:
        return await self._call(
            "list_wallet_addresses", lambda b: b.list_wallet_addresses()
        )
