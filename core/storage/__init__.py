"""
스토리지 모듈

SQLite 저장소(PrincipalStore, TransactionStore)와 Ledger Store Facade 제공
"""

from core.storage.facade import LedgerStoreFacade
from core.storage.principal_store import PrincipalStore
from core.storage.sqlite_backend import SQLiteLedgerBackend
from core.storage.transaction_store import TransactionStore

__all__ = [
    "LedgerStoreFacade",
    "PrincipalStore",
    "SQLiteLedgerBackend",
    "TransactionStore",
]
