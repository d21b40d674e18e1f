"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Protocol, runtime_checkable

from adapters.models import ChainStatus
from core.domain.models import Principal, Transaction, TransactionFilter
from core.types import StorageTier


@runtime_checkable
class ILedgerBackend(Protocol):
    """Ledger 저장소 인터페이스

    사용자와 거래를 저장하는 문서 저장소.
    시작 시 한 번 선택 (SQLite / 메모리), 요청마다 분기하지 않음.
    거래는 append-only: 수정/삭제 메서드 없음.

    에러 규약:
        - 저장소 접근 불가: StoreUnavailable
        - username/email 중복: DuplicatePrincipalError
        - transaction_id 중복: DuplicateIdError
    """

    @property
    def tier(self) -> StorageTier:
        """저장소 계층 (persistent / memory)"""
        ...

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def connect(self) -> None:
        """연결 (스키마 준비 포함)"""
        ...

    async def close(self) -> None:
        """연결 종료"""
        ...

    async def ping(self) -> bool:
        """저장소 응답 확인

        Raises:
            StoreUnavailable: 응답 없음
        """
        ...

    # -------------------------------------------------------------------------
    # 사용자
    # -------------------------------------------------------------------------

    async def insert_principal(self, principal: Principal) -> Principal:
        """사용자 저장

        Raises:
            DuplicatePrincipalError: username 또는 email 중복
        """
        ...

    async def find_principal(self, principal_id: str) -> Principal | None:
        """ID로 사용자 조회"""
        ...

    async def find_principal_by_username(self, username: str) -> Principal | None:
        """username으로 사용자 조회"""
        ...

    async def find_principal_by_email(self, email: str) -> Principal | None:
        """email로 사용자 조회"""
        ...

    async def find_principals(self) -> list[Principal]:
        """전체 사용자 (가입 순)"""
        ...

    async def count_principals(self) -> int:
        """사용자 수"""
        ...

    async def list_wallet_addresses(self) -> list[tuple[str, str]]:
        """배정된 지갑 목록 (address, principal_id)"""
        ...

    # -------------------------------------------------------------------------
    # 거래
    # -------------------------------------------------------------------------

    async def insert_transaction(self, transaction: Transaction) -> Transaction:
        """거래 저장

        Raises:
            DuplicateIdError: transaction_id 중복
        """
        ...

    async def find_transactions(self, flt: TransactionFilter) -> list[Transaction]:
        """조건에 맞는 거래 목록 (transaction_id 순)"""
        ...

    async def count_transactions(self, flt: TransactionFilter) -> int:
        """조건에 맞는 거래 수 (limit/offset 무시)"""
        ...

    async def find_max_transaction_id(self) -> int | None:
        """가장 큰 transaction_id (거래가 없으면 None)"""
        ...


@runtime_checkable
class IChainClient(Protocol):
    """블록체인 노드 클라이언트 인터페이스

    시작 시 한 번 probe하여 ChainMode 결정.
    """

    async def probe(self) -> ChainStatus:
        """노드 상태 조회 (예외를 발생시키지 않음)"""
        ...

    async def close(self) -> None:
        """클라이언트 종료"""
        ...
