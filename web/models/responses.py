"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    mode: str = Field(..., description="체인 모드 (blockchain/mock)")
    version: str = Field(..., description="애플리케이션 버전")


class StorageFlag(BaseModel):
    """응답을 처리한 저장소 상태

    degraded=True면 메모리 저장소에 기록되어 재시작 시 유실됨.
    """

    tier: str = Field(..., description="persistent / memory")
    degraded: bool = Field(..., description="fallback 전환 여부")
    persisted: bool = Field(..., description="영구 저장 여부")


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = Field(default=False)
    error: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")


class UserPayload(BaseModel):
    """사용자 공개 정보 (비밀번호 해시 제외)"""

    id: str
    username: str
    email: str
    role: str
    walletAddress: str
    createdAt: str


class AuthResponse(BaseModel):
    """회원가입/로그인 응답"""

    success: bool = True
    message: str
    token: str
    user: UserPayload
    storage: StorageFlag


class MeResponse(BaseModel):
    success: bool = True
    user: UserPayload


class TransactionCreateResponse(BaseModel):
    success: bool = True
    message: str
    transaction: dict[str, Any]
    storage: StorageFlag


class TransactionListResponse(BaseModel):
    success: bool = True
    count: int
    total: int
    transactions: list[dict[str, Any]]
    storage: StorageFlag


class DashboardSummaryResponse(BaseModel):
    """대시보드 요약 응답"""

    success: bool = True
    summary: dict[str, Any]
    analytics: dict[str, Any]
    recentTransactions: list[dict[str, Any]]
    storage: StorageFlag


class StatusResponse(BaseModel):
    """시스템 상태 응답"""

    success: bool = True
    system: dict[str, Any]
    services: dict[str, Any]


class AdminUserListResponse(BaseModel):
    success: bool = True
    count: int
    users: list[UserPayload]
    storage: StorageFlag


class AdminTransactionListResponse(BaseModel):
    success: bool = True
    count: int
    transactions: list[dict[str, Any]]
    storage: StorageFlag
