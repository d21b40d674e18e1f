"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.admin_service import AdminService
from web.services.auth_service import AuthService
from web.services.dashboard_service import DashboardService
from web.services.status_service import StatusService
from web.services.transaction_service import TransactionService

__all__ = [
    "AdminService",
    "AuthService",
    "DashboardService",
    "StatusService",
    "TransactionService",
]
