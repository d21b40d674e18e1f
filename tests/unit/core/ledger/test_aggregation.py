"""
core/ledger/aggregation.py 테스트

수입/지출/잔액, 카테고리별/월별 집계
"""

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.ledger.aggregation import BucketTotals, summarize
from core.ledger.types import Category, Direction
from tests.helpers import make_transaction


class TestSummarizeEmpty:
    """빈 입력 테스트"""

    def test_zeros(self) -> None:
        """모든 값이 0"""
        summary = summarize([])

        assert summary.total_income == Decimal("0")
        assert summary.total_expenses == Decimal("0")
        assert summary.balance == Decimal("0")
        assert summary.transaction_count == 0
        assert summary.by_category == {}
        assert summary.by_month == {}


class TestSummarize:
    """집계 테스트"""

    def test_salary_and_rent(self) -> None:
        """수입 1000(salary), 지출 400(rent)"""
        transactions = [
            make_transaction(1, "1000", Direction.INCOME, Category.SALARY),
            make_transaction(2, "400", Direction.EXPENSE, Category.RENT),
        ]

        summary = summarize(transactions)

        assert summary.total_income == Decimal("1000")
        assert summary.total_expenses == Decimal("400")
        assert summary.balance == Decimal("600")
        assert summary.by_category["salary"] == BucketTotals(
            income=Decimal("1000"), expense=Decimal("0"), total=Decimal("1000")
        )
        assert summary.by_category["rent"] == BucketTotals(
            income=Decimal("0"), expense=Decimal("400"), total=Decimal("400")
        )

    def test_category_totals_sum(self) -> None:
        """카테고리 total 합 = 수입 + 지출"""
        transactions = [
            make_transaction(1, "10.50", Direction.INCOME, Category.OTHER),
            make_transaction(2, "3.25", Direction.EXPENSE, Category.OTHER),
            make_transaction(3, "7", Direction.EXPENSE, Category.MARKETING),
            make_transaction(4, "100", Direction.INCOME, Category.SALARY),
        ]

        summary = summarize(transactions)
        category_total = sum((b.total for b in summary.by_category.values()), Decimal("0"))

        assert category_total == summary.total_income + summary.total_expenses
        assert summary.balance == summary.total_income - summary.total_expenses
        assert summary.transaction_count == 4

    def test_exact_decimal(self) -> None:
        """부동소수 오차 없음"""
        transactions = [
            make_transaction(i, "0.10", Direction.INCOME) for i in range(1, 4)
        ]

        assert summarize(transactions).total_income == Decimal("0.30")

    def test_bucket_insertion_order(self) -> None:
        """버킷은 처음 등장 순서"""
        transactions = [
            make_transaction(1, "1", Direction.INCOME, Category.RENT),
            make_transaction(2, "1", Direction.INCOME, Category.SALARY),
            make_transaction(3, "1", Direction.INCOME, Category.RENT),
        ]

        assert list(summarize(transactions).by_category) == ["rent", "salary"]

    def test_by_month(self) -> None:
        """생성 월별 집계"""
        jan = datetime(2024, 1, 31, 23, 0, tzinfo=timezone.utc)
        feb = datetime(2024, 2, 1, 1, 0, tzinfo=timezone.utc)
        transactions = [
            make_transaction(1, "100", Direction.INCOME, created_at=jan),
            make_transaction(2, "30", Direction.EXPENSE, created_at=feb),
            make_transaction(3, "20", Direction.EXPENSE, created_at=feb),
        ]

        by_month = summarize(transactions).by_month

        assert by_month["2024-01"].income == Decimal("100")
        assert by_month["2024-02"].expense == Decimal("50")
        assert by_month["2024-02"].total == Decimal("50")

    def test_without_months(self) -> None:
        """월별 집계 생략"""
        summary = summarize([make_transaction(1)], include_months=False)

        assert summary.by_month == {}

    def test_order_independent(self) -> None:
        """입력 순서와 무관한 합계"""
        transactions = [
            make_transaction(1, "5", Direction.INCOME),
            make_transaction(2, "2", Direction.EXPENSE),
        ]

        forward = summarize(transactions)
        backward = summarize(list(reversed(transactions)))

        assert forward.balance == backward.balance == Decimal("3")

    def test_unknown_direction(self) -> None:
        """저장소에 없는 방향이 들어오면 ValueError"""
        tx = make_transaction(1)
        bad = replace(tx, direction="transfer")

        with pytest.raises(ValueError):
            summarize([bad])


class TestSummaryToDict:
    """응답 형식 테스트"""

    def test_amounts_as_strings(self) -> None:
        """금액은 문자열"""
        result = summarize([make_transaction(1, "12.34", Direction.INCOME, Category.SALARY)]).to_dict()

        assert result["totalIncome"] == "12.34"
        assert result["balance"] == "12.34"
        assert result["byCategory"]["salary"] == {
            "income": "12.34", "expense": "0", "total": "12.34",
        }
        assert "2024-01" in result["byMonth"]
