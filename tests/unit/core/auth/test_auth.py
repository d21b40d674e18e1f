"""
core/auth 테스트

비밀번호 해시, 토큰 발급/검증
"""

from datetime import timedelta

import jwt
import pytest

from core.auth import PasswordHasher, TokenIssuer
from core.domain.models import Principal
from core.errors import AuthenticationError
from core.utils.timezone import now_utc


class TestPasswordHasher:
    """PasswordHasher 테스트"""

    def test_hash_and_verify(self) -> None:
        """해시 후 검증"""
        hasher = PasswordHasher()
        hashed = hasher.hash("secret1")

        assert hashed != "secret1"
        assert hasher.verify("secret1", hashed)
        assert not hasher.verify("wrong", hashed)

    def test_salted(self) -> None:
        """같은 비밀번호도 해시가 다름"""
        hasher = PasswordHasher()

        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_malformed_hash(self) -> None:
        """형식이 잘못된 해시는 False"""
        assert PasswordHasher().verify("secret1", "not-a-hash") is False


class TestTokenIssuer:
    """TokenIssuer 테스트"""

    def test_issue_and_decode(self, principal: Principal) -> None:
        """발급한 토큰 검증"""
        issuer = TokenIssuer("test-secret", expire_minutes=5)

        claims = issuer.decode(issuer.issue(principal))

        assert claims.principal_id == principal.principal_id
        assert claims.username == principal.username
        assert claims.role == principal.role
        assert claims.wallet_address == principal.wallet_address

    def test_wrong_secret(self, principal: Principal) -> None:
        """다른 키로 서명된 토큰"""
        token = TokenIssuer("secret-a").issue(principal)

        with pytest.raises(AuthenticationError, match="Invalid token"):
            TokenIssuer("secret-b").decode(token)

    def test_expired(self) -> None:
        """만료된 토큰"""
        token = jwt.encode(
            {"sub": "p1", "exp": now_utc() - timedelta(minutes=1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError, match="expired"):
            TokenIssuer("test-secret").decode(token)

    def test_garbage(self) -> None:
        """형식 오류"""
        with pytest.raises(AuthenticationError):
            TokenIssuer("test-secret").decode("not.a.token")

    def test_missing_subject(self) -> None:
        """sub 누락"""
        token = jwt.encode(
            {"exp": now_utc() + timedelta(minutes=1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError):
            TokenIssuer("test-secret").decode(token)

    def test_empty_secret(self) -> None:
        """빈 서명 키 거부"""
        with pytest.raises(ValueError):
            TokenIssuer("")
