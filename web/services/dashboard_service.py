"""
대시보드 서비스

사용자 거래 전체를 집계하여 요약/분석/최근 거래 제공
"""

from typing import Any

from core.constants import Defaults
from core.domain.models import Principal, TransactionFilter
from core.ledger.aggregation import summarize
from core.storage.facade import LedgerStoreFacade


class DashboardService:
    """대시보드 서비스

    Args:
        store: Ledger Store Facade
        recent_limit: 최근 거래 개수
    """

    def __init__(
        self,
        store: LedgerStoreFacade,
        recent_limit: int = Defaults.RECENT_TRANSACTIONS,
    ):
        self.store = store
        self.recent_limit = recent_limit

    async def get_summary(self, principal: Principal) -> dict[str, Any]:
        """대시보드 요약

        Returns:
            summary(수입/지출/잔액/건수), analytics(카테고리별/월별),
            recentTransactions(최신순), storage
        """
        transactions = await self.store.find_all(
            TransactionFilter(created_by=principal.principal_id, newest_first=True)
        )
        summary = summarize(transactions).to_dict()

        return {
            "success": True,
            "summary": {
                "totalIncome": summary["totalIncome"],
                "totalExpenses": summary["totalExpenses"],
                "balance": summary["balance"],
                "transactionCount": summary["transactionCount"],
            },
            "analytics": {
                "byCategory": summary["byCategory"],
                "byMonth": summary["byMonth"],
            },
            "recentTransactions": [
                tx.to_dict() for tx in transactions[: self.recent_limit]
            ],
            "storage": self.store.storage_flag(),
        }
