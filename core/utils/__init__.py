"""
유틸리티 패키지

ledger 참조 해시 생성, 타임존 처리 등 공통 유틸리티
"""

from core.utils.amount import format_amount
from core.utils.ledger_ref import (
    is_ledger_ref,
    ledger_ref_mode,
    make_ledger_ref,
)
from core.utils.timezone import (
    month_key,
    now_utc,
    parse_iso,
    to_utc,
)

__all__ = [
    "format_amount",
    "is_ledger_ref",
    "ledger_ref_mode",
    "make_ledger_ref",
    "month_key",
    "now_utc",
    "parse_iso",
    "to_utc",
]
