"""
시스템 상태 서비스

체인 모드, 저장소 상태, 사용자/거래 수, 가동 시간
"""

import logging
from typing import Any

from core.constants import Defaults
from core.errors import StoreUnavailable
from core.utils.timezone import now_utc
from web.container import AppContainer

logger = logging.getLogger(__name__)


class StatusService:
    """시스템 상태 서비스

    저장소 장애 시에도 응답 (counts는 null).
    """

    def __init__(self, container: AppContainer):
        self.container = container

    async def _counts(self) -> tuple[int | None, int | None]:
        store = self.container.store
        try:
            return await store.count_principals(), await store.count()
        except StoreUnavailable as e:
            logger.warning(f"상태 조회 중 저장소 접근 불가: {e.message}")
            return None, None

    async def get_status(self) -> dict[str, Any]:
        container = self.container
        store = container.store
        now = now_utc()
        principals, transactions = await self._counts()

        return {
            "success": True,
            "system": {
                "mode": container.chain_status.mode.value,
                "environment": container.settings.mode.value,
                "version": Defaults.APP_VERSION,
                "serverTime": now.isoformat(),
                "uptimeSec": int((now - container.started_at).total_seconds()),
            },
            "services": {
                "blockchain": container.chain_status.to_dict(),
                "storage": {
                    "backend": container.settings.storage.backend.value,
                    **store.storage_flag(),
                    "users": principals,
                    "transactions": transactions,
                },
                "wallets": {
                    "size": container.wallet_pool.size,
                    "assigned": container.wallet_pool.assigned_count,
                    "available": container.wallet_pool.available_count,
                },
            },
        }
