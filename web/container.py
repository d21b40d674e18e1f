"""
애플리케이션 컨테이너

lifespan에서 한 번 생성되어 app.state.container에 보관되는 객체 묶음.
모듈 전역 상태 없이 요청마다 Request에서 꺼내 사용.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime

from adapters.chain.rpc_client import ChainRpcClient, MockChainClient
from adapters.interfaces import IChainClient, ILedgerBackend
from adapters.memory.ledger_backend import MemoryLedgerBackend
from adapters.models import ChainStatus
from core.auth import PasswordHasher, TokenIssuer
from core.config.loader import Settings
from core.ledger.sequencer import LedgerSequencer
from core.storage.facade import LedgerStoreFacade
from core.storage.sqlite_backend import SQLiteLedgerBackend
from core.types import BackendKind
from core.utils.timezone import now_utc
from core.wallet.pool import WalletPool

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """요청 처리에 필요한 객체 묶음

    write_lock은 지갑 배정(등록)과 거래 ID 배정(거래 생성)이 공유하는
    단일 직렬화 지점.
    """

    settings: Settings
    store: LedgerStoreFacade
    wallet_pool: WalletPool
    sequencer: LedgerSequencer
    write_lock: asyncio.Lock
    hasher: PasswordHasher
    tokens: TokenIssuer
    chain_client: IChainClient
    chain_status: ChainStatus
    started_at: datetime = field(default_factory=now_utc)

    async def close(self) -> None:
        await self.chain_client.close()
        await self.store.close()
        logger.info("컨테이너 종료")


def _select_backends(settings: Settings) -> tuple[ILedgerBackend, ILedgerBackend | None]:
    """설정에 따라 기본 저장소와 fallback 선택 (시작 시 1회)"""
    storage = settings.storage

    if storage.backend == BackendKind.MEMORY:
        return MemoryLedgerBackend(), None

    primary = SQLiteLedgerBackend(
        settings.db_path,
        busy_timeout_ms=int(storage.timeout_sec * 1000),
    )
    fallback = MemoryLedgerBackend() if storage.fallback else None
    return primary, fallback


async def build_container(
    settings: Settings,
    primary: ILedgerBackend | None = None,
    fallback: ILedgerBackend | None = None,
    chain_client: IChainClient | None = None,
) -> AppContainer:
    """컨테이너 생성

    Args:
        settings: 애플리케이션 설정
        primary: 기본 저장소 (None이면 설정으로 선택)
        fallback: fallback 저장소 (primary를 직접 지정한 경우에만 사용)
        chain_client: 체인 클라이언트 (None이면 rpc_url 유무로 선택)

    Raises:
        StoreUnavailable: 기본 저장소 연결 실패 + fallback 없음
    """
    if primary is None:
        primary, fallback = _select_backends(settings)

    store = LedgerStoreFacade(primary, fallback, timeout_sec=settings.storage.timeout_sec)
    await store.connect()

    # 재시작 후에도 이미 배정된 주소는 다시 배정하지 않음
    wallet_pool = WalletPool(settings.wallet_addresses)
    wallet_pool.restore(await store.list_wallet_addresses())

    if chain_client is None:
        if settings.chain_rpc_url:
            chain_client = ChainRpcClient(settings.chain_rpc_url)
        else:
            chain_client = MockChainClient()
    chain_status = await chain_client.probe()

    write_lock = asyncio.Lock()
    sequencer = LedgerSequencer(store, write_lock, chain_mode=chain_status.mode)

    logger.info(
        "컨테이너 생성",
        extra={
            "backend": settings.storage.backend.value,
            "tier": store.tier.value,
            "degraded": store.degraded,
            "chain_mode": chain_status.mode.value,
            "wallets_available": wallet_pool.available_count,
        },
    )

    return AppContainer(
        settings=settings,
        store=store,
        wallet_pool=wallet_pool,
        sequencer=sequencer,
        write_lock=write_lock,
        hasher=PasswordHasher(),
        tokens=TokenIssuer(settings.web_secret_key, settings.token_expire_minutes),
        chain_client=chain_client,
        chain_status=chain_status,
    )
