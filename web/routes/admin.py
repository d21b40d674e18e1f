"""
관리자 라우트 (admin 역할 전용)

GET /api/admin/users - 전체 사용자
GET /api/admin/transactions - 전체 거래
"""

from typing import Any

from fastapi import APIRouter, Depends

from core.types import Role
from web.dependencies import get_admin_service, require_role
from web.models.responses import (
    AdminTransactionListResponse,
    AdminUserListResponse,
    ErrorResponse,
)
from web.services.admin_service import AdminService

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
    dependencies=[Depends(require_role(Role.ADMIN))],
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)


@router.get("/users", response_model=AdminUserListResponse)
async def list_users(service: AdminService = Depends(get_admin_service)) -> dict[str, Any]:
    """전체 사용자 조회"""
    return await service.list_users()


@router.get("/transactions", response_model=AdminTransactionListResponse)
async def list_transactions(
    service: AdminService = Depends(get_admin_service),
) -> dict[str, Any]:
    """전체 거래 조회 (작성자 정보 포함)"""
    return await service.list_transactions()
