"""
인증 모듈

비밀번호 해시(passlib)와 토큰 발급/검증(PyJWT)
"""

from core.auth.passwords import PasswordHasher
from core.auth.tokens import TokenClaims, TokenIssuer

__all__ = [
    "PasswordHasher",
    "TokenClaims",
    "TokenIssuer",
]
