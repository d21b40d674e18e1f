"""
인증 라우트

POST /api/auth/register - 회원가입 (지갑 자동 배정)
POST /api/auth/login - 로그인
GET /api/auth/me - 현재 사용자
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from core.domain.models import Principal
from web.dependencies import get_auth_service, get_current_principal
from web.models.requests import LoginRequest, RegisterRequest
from web.models.responses import AuthResponse, ErrorResponse, MeResponse
from web.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> dict[str, Any]:
    """회원가입

    - 409 duplicate_principal: username/email 중복
    - 409 wallet_pool_exhausted: 배정 가능한 지갑 없음
    """
    return await service.register(request)


@router.post("/login", response_model=AuthResponse, responses={401: {"model": ErrorResponse}})
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> dict[str, Any]:
    """로그인 (email 또는 username)"""
    return await service.login(request)


@router.get("/me", response_model=MeResponse)
async def me(principal: Principal = Depends(get_current_principal)) -> dict[str, Any]:
    """현재 사용자 정보"""
    return {"success": True, "user": principal.to_public()}
