"""
어댑터 레이어

외부 자원(SQLite, 메모리 저장소, 블록체인 노드)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import IChainClient, ILedgerBackend
from adapters.models import ChainStatus

__all__ = [
    # Interfaces
    "ILedgerBackend",
    "IChainClient",
    # Models
    "ChainStatus",
]
