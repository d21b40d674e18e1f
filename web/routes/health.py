"""
헬스 체크 엔드포인트

GET /health - 서버 상태 확인
"""

from fastapi import APIRouter, Depends

from core.constants import Defaults
from web.container import AppContainer
from web.dependencies import get_container
from web.models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(container: AppContainer = Depends(get_container)) -> HealthResponse:
    """서버 상태 확인

    Returns:
        HealthResponse: status, mode(blockchain/mock), version 정보
    """
    return HealthResponse(
        status="ok",
        mode=container.chain_status.mode.value,
        version=Defaults.APP_VERSION,
    )
