"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    LoginRequest,
    RegisterRequest,
    TransactionCreateRequest,
)
from web.models.responses import (
    AdminTransactionListResponse,
    AdminUserListResponse,
    AuthResponse,
    DashboardSummaryResponse,
    ErrorResponse,
    HealthResponse,
    MeResponse,
    StatusResponse,
    StorageFlag,
    TransactionCreateResponse,
    TransactionListResponse,
    UserPayload,
)

__all__ = [
    # Requests
    "RegisterRequest",
    "LoginRequest",
    "TransactionCreateRequest",
    # Responses
    "AdminTransactionListResponse",
    "AdminUserListResponse",
    "AuthResponse",
    "DashboardSummaryResponse",
    "ErrorResponse",
    "HealthResponse",
    "MeResponse",
    "StatusResponse",
    "StorageFlag",
    "TransactionCreateResponse",
    "TransactionListResponse",
    "UserPayload",
]
