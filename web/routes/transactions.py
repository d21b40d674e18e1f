"""
거래 라우트

POST /api/transactions - 거래 생성
GET /api/transactions - 내 거래 목록 (최신순)
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from core.domain.models import Principal
from web.dependencies import get_current_principal, get_transaction_service
from web.models.requests import TransactionCreateRequest
from web.models.responses import (
    ErrorResponse,
    TransactionCreateResponse,
    TransactionListResponse,
)
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.post(
    "/transactions",
    response_model=TransactionCreateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def create_transaction(
    request: TransactionCreateRequest,
    principal: Principal = Depends(get_current_principal),
    service: TransactionService = Depends(get_transaction_service),
) -> dict[str, Any]:
    """거래 생성

    - 400 invalid_direction: type이 income/expense가 아님
    - 503 store_unavailable: 저장소 접근 불가 (fallback 없음)
    """
    return await service.create(request, principal)


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    principal: Principal = Depends(get_current_principal),
    service: TransactionService = Depends(get_transaction_service),
) -> dict[str, Any]:
    """내 거래 목록 조회"""
    return await service.list_for(principal, limit=limit, offset=offset)
