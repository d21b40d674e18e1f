"""
시스템 상태 라우트

GET /api/status - 체인 모드, 저장소 상태, 사용자/거래 수
"""

from typing import Any

from fastapi import APIRouter, Depends

from web.dependencies import get_status_service
from web.models.responses import StatusResponse
from web.services.status_service import StatusService

router = APIRouter(prefix="/api", tags=["Status"])


@router.get("/status", response_model=StatusResponse)
async def get_status(
    service: StatusService = Depends(get_status_service),
) -> dict[str, Any]:
    """시스템 상태 조회 (인증 불필요)"""
    return await service.get_status()
