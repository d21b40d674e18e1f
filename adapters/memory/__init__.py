"""
메모리 어댑터

프로세스 메모리 기반 저장소.
ILedgerBackend Protocol 준수하여 SQLite 구현과 교체 가능.
"""

from adapters.memory.ledger_backend import MemoryLedgerBackend

__all__ = ["MemoryLedgerBackend"]
