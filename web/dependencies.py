"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
모든 객체는 lifespan에서 만든 AppContainer(app.state.container)에서 가져옴.
"""

from collections.abc import Awaitable, Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.domain.models import Principal
from core.errors import AuthenticationError, PermissionDenied
from core.types import Role
from web.container import AppContainer
from web.services.admin_service import AdminService
from web.services.auth_service import AuthService
from web.services.dashboard_service import DashboardService
from web.services.status_service import StatusService
from web.services.transaction_service import TransactionService

# 헤더 누락 시 FastAPI 기본 403 대신 AuthenticationError(401)로 처리
bearer_scheme = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    """애플리케이션 컨테이너 반환"""
    return request.app.state.container


# =========================================================================
# 서비스
# =========================================================================


def get_auth_service(container: AppContainer = Depends(get_container)) -> AuthService:
    return AuthService(
        store=container.store,
        pool=container.wallet_pool,
        lock=container.write_lock,
        hasher=container.hasher,
        tokens=container.tokens,
    )


def get_transaction_service(
    container: AppContainer = Depends(get_container),
) -> TransactionService:
    return TransactionService(container.store, container.sequencer)


def get_dashboard_service(
    container: AppContainer = Depends(get_container),
) -> DashboardService:
    return DashboardService(container.store)


def get_status_service(container: AppContainer = Depends(get_container)) -> StatusService:
    return StatusService(container)


def get_admin_service(container: AppContainer = Depends(get_container)) -> AdminService:
    return AdminService(container.store)


# =========================================================================
# 인증
# =========================================================================


async def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: AppContainer = Depends(get_container),
    auth: AuthService = Depends(get_auth_service),
) -> Principal:
    """Bearer 토큰의 사용자

    Raises:
        AuthenticationError: 토큰 누락/위조/만료
        PrincipalNotFound: 저장소에 사용자가 없음
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    claims = container.tokens.decode(credentials.credentials)
    return await auth.current_principal(claims)


def require_role(*roles: Role | str) -> Callable[..., Awaitable[Principal]]:
    """허용 역할 확인 의존성

    사용 예시:
    ```python
    @router.get("/users", dependencies=[Depends(require_role(Role.ADMIN))])
    ```

    Raises:
        PermissionDenied: 현재 사용자의 역할이 허용 목록에 없음
    """
    allowed = frozenset(Role(r).value for r in roles)

    async def check_role(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role not in allowed:
            raise PermissionDenied(principal.role)
        return principal

    return check_role
