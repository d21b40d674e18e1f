"""
인증 서비스

회원가입(지갑 자동 배정), 로그인, 현재 사용자 조회
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any

from core.auth import PasswordHasher, TokenClaims, TokenIssuer
from core.domain.models import Principal
from core.errors import DuplicatePrincipalError, InvalidCredentialsError, PrincipalNotFound
from core.storage.facade import LedgerStoreFacade
from core.wallet.pool import WalletPool
from web.models.requests import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

# 저장소에는 있으나 풀 상태에 없던 주소를 표시하는 보유자
EXTERNAL_HOLDER = "<external>"


class AuthService:
    """인증 서비스

    Args:
        store: Ledger Store Facade
        pool: 지갑 풀
        lock: 거래 ID 배정과 공유하는 write lock
        hasher: 비밀번호 해시
        tokens: 토큰 발급기
    """

    def __init__(
        self,
        store: LedgerStoreFacade,
        pool: WalletPool,
        lock: asyncio.Lock,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ):
        self.store = store
        self.pool = pool
        self.lock = lock
        self.hasher = hasher
        self.tokens = tokens

    def _auth_payload(self, message: str, principal: Principal) -> dict[str, Any]:
        return {
            "success": True,
            "message": message,
            "token": self.tokens.issue(principal),
            "user": principal.to_public(),
            "storage": self.store.storage_flag(),
        }

    async def register(self, request: RegisterRequest) -> dict[str, Any]:
        """회원가입

        중복 확인 → 지갑 배정 → 저장을 write lock 안에서 수행.
        저장 실패 시 지갑 배정은 취소되어 풀 상태가 변하지 않음.

        Raises:
            DuplicatePrincipalError: username 또는 email 중복
            PoolExhausted: 배정 가능한 지갑 없음
            StoreUnavailable: 저장소 접근 불가
        """
        username = request.username
        email = str(request.email).lower()

        # 해시는 lock 밖, 별도 스레드에서 계산 (CPU 작업)
        password_hash = await asyncio.to_thread(self.hasher.hash, request.password)
        candidate = Principal.create(
            username=username,
            email=email,
            password_hash=password_hash,
            wallet_address="",
        )

        async with self.lock:
            if await self.store.find_principal_by_username(username) is not None:
                raise DuplicatePrincipalError("username")
            if await self.store.find_principal_by_email(email) is not None:
                raise DuplicatePrincipalError("email")

            while True:
                try:
                    with self.pool.assignment(candidate.principal_id) as address:
                        principal = replace(candidate, wallet_address=address)
                        await self.store.insert_principal(principal)
                    break
                except DuplicatePrincipalError as e:
                    if e.field != "wallet_address":
                        raise
                    # 다른 프로세스가 같은 DB에 먼저 배정한 주소
                    logger.warning(
                        "저장소에 이미 배정된 지갑, 다음 주소로 재시도",
                        extra={"address": address},
                    )
                    self.pool.restore([(address, EXTERNAL_HOLDER)])

        logger.info(
            "회원가입 완료",
            extra={
                "principal_id": principal.principal_id,
                "wallet_address": principal.wallet_address,
                "tier": self.store.tier.value,
            },
        )
        return self._auth_payload("User registered successfully", principal)

    async def login(self, request: LoginRequest) -> dict[str, Any]:
        """로그인

        Raises:
            InvalidCredentialsError: 사용자 없음 또는 비밀번호 불일치 (구분하지 않음)
        """
        if request.email:
            principal = await self.store.find_principal_by_email(request.email.strip().lower())
        else:
            principal = await self.store.find_principal_by_username((request.username or "").strip())

        verified = principal is not None and await asyncio.to_thread(
            self.hasher.verify, request.password, principal.password_hash
        )
        if not verified:
            logger.info("로그인 실패", extra={"email": request.email, "username": request.username})
            raise InvalidCredentialsError()

        return self._auth_payload("Login successful", principal)

    async def current_principal(self, claims: TokenClaims) -> Principal:
        """토큰의 사용자 조회

        Raises:
            PrincipalNotFound: 저장소에 사용자가 없음 (fallback 전환 후 등)
        """
        principal = await self.store.find_principal(claims.principal_id)
        if principal is None:
            raise PrincipalNotFound(claims.principal_id)
        return principal
