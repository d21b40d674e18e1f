"""
관리자 서비스

전체 사용자/거래 조회 (admin 역할 전용)
"""

from typing import Any

from core.domain.models import TransactionFilter
from core.storage.facade import LedgerStoreFacade


class AdminService:
    """관리자 서비스

    Args:
        store: Ledger Store Facade
    """

    def __init__(self, store: LedgerStoreFacade):
        self.store = store

    async def list_users(self) -> dict[str, Any]:
        """전체 사용자 (비밀번호 해시 제외, 가입 순)"""
        principals = await self.store.find_principals()
        return {
            "success": True,
            "count": len(principals),
            "users": [p.to_public() for p in principals],
            "storage": self.store.storage_flag(),
        }

    async def list_transactions(self) -> dict[str, Any]:
        """전체 거래 (최신순)

        각 거래에 작성자 username/email을 함께 반환.
        저장소에 없는 작성자는 null (fallback 전환 이전 사용자 등).
        """
        transactions = await self.store.find_all(TransactionFilter(newest_first=True))
        owners = {p.principal_id: p for p in await self.store.find_principals()}

        items = []
        for tx in transactions:
            owner = owners.get(tx.created_by)
            items.append(
                {
                    **tx.to_dict(),
                    "createdByUser": (
                        {"username": owner.username, "email": owner.email} if owner else None
                    ),
                }
            )

        return {
            "success": True,
            "count": len(items),
            "transactions": items,
            "storage": self.store.storage_flag(),
        }
