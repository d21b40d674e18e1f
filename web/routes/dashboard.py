"""
대시보드 라우트

GET /api/dashboard/summary - 수입/지출/잔액, 카테고리별/월별 집계, 최근 거래
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.domain.models import Principal
from web.dependencies import get_current_principal, get_dashboard_service
from web.models.responses import DashboardSummaryResponse
from web.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummaryResponse)
async def get_summary(
    principal: Principal = Depends(get_current_principal),
    service: DashboardService = Depends(get_dashboard_service),
) -> dict[str, Any]:
    """대시보드 요약"""
    return await service.get_summary(principal)
