"""
에러 정의

요청 경계에서 구조화된 응답으로 변환되는 도메인 에러.
모든 에러는 복구 가능하며 프로세스를 종료시키지 않음.
"""


class LedgerError(Exception):
    """도메인 에러 기본 클래스

    Args:
        message: 사용자에게 반환할 메시지
    """

    code: str = "ledger_error"
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """응답 본문 형식으로 변환"""
        return {"success": False, "error": self.code, "message": self.message}


class ValidationError(LedgerError):
    """필수 필드 누락 또는 형식 오류"""

    code = "validation_error"
    status_code = 400


class InvalidDirection(ValidationError):
    """income/expense 이외의 거래 방향"""

    code = "invalid_direction"

    def __init__(self, direction: object):
        self.direction = direction
        super().__init__(
            f"Invalid transaction type: {direction!r}. Valid types: ['income', 'expense']"
        )


class DuplicatePrincipalError(LedgerError):
    """username 또는 email 중복

    Args:
        field: 충돌한 필드 (username / email)
    """

    code = "duplicate_principal"
    status_code = 409

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"User with this {field} already exists")


class InvalidCredentialsError(LedgerError):
    """로그인 실패

    어느 쪽이 틀렸는지 노출하지 않음.
    """

    code = "invalid_credentials"
    status_code = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthenticationError(LedgerError):
    """토큰 누락/위조/만료"""

    code = "authentication_failed"
    status_code = 401


class PermissionDenied(LedgerError):
    """역할 권한 부족"""

    code = "permission_denied"
    status_code = 403

    def __init__(self, role: str):
        self.role = role
        super().__init__("Insufficient permissions")


class PrincipalNotFound(LedgerError):
    """토큰은 유효하나 사용자가 저장소에 없음"""

    code = "principal_not_found"
    status_code = 404

    def __init__(self, principal_id: str):
        self.principal_id = principal_id
        super().__init__("User not found")


class PoolExhausted(LedgerError):
    """배정 가능한 지갑 주소 없음"""

    code = "wallet_pool_exhausted"
    status_code = 409

    def __init__(self, pool_size: int):
        self.pool_size = pool_size
        super().__init__(f"No more wallets available (pool size: {pool_size})")


class DuplicateIdError(LedgerError):
    """거래 ID 충돌 (시퀀서 경쟁에서 패배)"""

    code = "duplicate_transaction_id"
    status_code = 409

    def __init__(self, transaction_id: int):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction id already exists: {transaction_id}")


class StoreUnavailable(LedgerError):
    """저장소 접근 불가 (재시도 가능)"""

    code = "store_unavailable"
    status_code = 503

    def __init__(self, message: str = "Database not available. Please try again later."):
        super().__init__(message)
