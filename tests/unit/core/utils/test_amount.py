"""
core/utils/amount.py 테스트
"""

from decimal import Decimal

import pytest

from core.domain.models import Transaction
from core.ledger.aggregation import summarize
from core.utils.amount import format_amount
from tests.helpers import make_transaction


class TestFormatAmount:
    """format_amount 테스트"""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1E+2"), "100"),
            (Decimal("1e2"), "100"),
            (Decimal("1234.50"), "1234.50"),
            (Decimal("0"), "0"),
            (Decimal("1E-2"), "0.01"),
            (Decimal("-400"), "-400"),
        ],
    )
    def test_no_exponent(self, value: Decimal, expected: str) -> None:
        """지수 표기 없는 고정 소수점"""
        assert format_amount(value) == expected

    def test_transaction_to_dict(self) -> None:
        """거래 응답 금액"""
        tx: Transaction = make_transaction(1, amount="1e2")

        assert tx.to_dict()["amount"] == "100"

    def test_summary_to_dict(self) -> None:
        """집계 응답 금액"""
        summary = summarize([make_transaction(1, amount="1e3")]).to_dict()

        assert summary["totalIncome"] == "1000"
        assert summary["balance"] == "1000"
        assert summary["byCategory"]["other"]["income"] == "1000"
