"""
어댑터 공통 데이터 모델

외부 서비스(체인 노드 등) 응답을 표준화한 모델.
"""

from dataclasses import dataclass, field
from typing import Any

from core.types import ChainMode


@dataclass(frozen=True)
class ChainStatus:
    """블록체인 노드 상태

    Attributes:
        connected: 노드 응답 여부
        mode: blockchain (연결됨) / mock (미연결)
        accounts: 노드 계정 수
        current_block: 최신 블록 번호
        network: 네트워크 이름
        test_accounts: 앞쪽 계정 주소 일부 (최대 3개)
        error: 연결 실패 사유
    """

    connected: bool
    mode: ChainMode
    accounts: int = 0
    current_block: int | None = None
    network: str | None = None
    test_accounts: tuple[str, ...] = field(default_factory=tuple)
    error: str | None = None

    @classmethod
    def mock(cls, error: str | None = None) -> "ChainStatus":
        """미연결 상태 생성"""
        return cls(connected=False, mode=ChainMode.MOCK, error=error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "connected": self.connected,
            "status": "connected" if self.connected else self.mode.value,
            "accounts": self.accounts,
            "currentBlock": self.current_block,
            "network": self.network,
            "testAccounts": list(self.test_accounts),
            "error": self.error,
        }
