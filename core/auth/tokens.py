"""
인증 토큰

PyJWT HS256 서명 토큰 발급과 검증.
"""

from dataclasses import dataclass
from datetime import timedelta

import jwt

from core.constants import Defaults
from core.domain.models import Principal
from core.errors import AuthenticationError
from core.utils.timezone import now_utc

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """검증된 토큰 내용"""

    principal_id: str
    username: str
    role: str
    wallet_address: str


class TokenIssuer:
    """토큰 발급기

    Args:
        secret_key: 서명 키
        expire_minutes: 만료 시간 (분)

    사용 예시:
    ```python
    issuer = TokenIssuer(secret_key="...")
    token = issuer.issue(principal)
    claims = issuer.decode(token)
    assert claims.principal_id == principal.principal_id
    ```
    """

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = Defaults.TOKEN_EXPIRE_MINUTES,
    ):
        if not secret_key:
            raise ValueError("secret_key가 비어 있습니다")
        self._secret_key = secret_key
        self.expire_minutes = expire_minutes

    def issue(self, principal: Principal) -> str:
        payload = {
            "sub": principal.principal_id,
            "username": principal.username,
            "role": principal.role,
            "wallet_address": principal.wallet_address,
            "exp": now_utc() + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        """토큰 검증

        Raises:
            AuthenticationError: 만료, 서명 불일치, 형식 오류
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("Invalid token") from e

        principal_id = payload.get("sub")
        if not principal_id:
            raise AuthenticationError("Invalid token")

        return TokenClaims(
            principal_id=principal_id,
            username=payload.get("username", ""),
            role=payload.get("role", ""),
            wallet_address=payload.get("wallet_address", ""),
        )
