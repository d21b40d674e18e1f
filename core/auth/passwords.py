"""
비밀번호 해시

passlib CryptContext (pbkdf2_sha256) 기반 단방향 해시와 검증.
"""

from passlib.context import CryptContext


class PasswordHasher:
    """비밀번호 해시/검증

    Args:
        schemes: passlib 해시 스킴 목록 (첫 번째가 신규 해시에 사용)

    사용 예시:
    ```python
    hasher = PasswordHasher()
    hashed = hasher.hash("secret")
    assert hasher.verify("secret", hashed)
    ```
    """

    def __init__(self, schemes: list[str] | None = None):
        self._context = CryptContext(
            schemes=schemes or ["pbkdf2_sha256"],
            deprecated="auto",
        )

    def hash(self, secret: str) -> str:
        return self._context.hash(secret)

    def verify(self, secret: str, hashed: str) -> bool:
        """비밀번호 일치 여부 (형식이 잘못된 해시는 False)"""
        try:
            return self._context.verify(secret, hashed)
        except (ValueError, TypeError):
            return False
