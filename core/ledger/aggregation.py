"""
거래 집계

전체 거래 목록에서 수입/지출/잔액, 카테고리별, 월별 합계 계산.
순수 함수 - 부수 효과 없음.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from core.domain.models import Transaction
from core.ledger.types import Direction
from core.utils.amount import format_amount
from core.utils.timezone import month_key


@dataclass
class BucketTotals:
    """카테고리/월 단위 부분 합계"""

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    total: Decimal = Decimal("0")

    def add(self, direction: str, amount: Decimal) -> None:
        if direction == Direction.INCOME.value:
            self.income += amount
        else:
            self.expense += amount
        self.total += amount

    def to_dict(self) -> dict[str, str]:
        return {
            "income": format_amount(self.income),
            "expense": format_amount(self.expense),
            "total": format_amount(self.total),
        }


@dataclass
class Summary:
    """집계 결과

    balance = total_income - total_expenses
    sum(by_category[*].total) = total_income + total_expenses
    """

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    transaction_count: int = 0
    by_category: dict[str, BucketTotals] = field(default_factory=dict)
    by_month: dict[str, BucketTotals] = field(default_factory=dict)

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": format_amount(self.total_income),
            "totalExpenses": format_amount(self.total_expenses),
            "balance": format_amount(self.balance),
            "transactionCount": self.transaction_count,
            "byCategory": {k: v.to_dict() for k, v in self.by_category.items()},
            "byMonth": {k: v.to_dict() for k, v in self.by_month.items()},
        }


def summarize(
    transactions: Iterable[Transaction],
    include_months: bool = True,
) -> Summary:
    """거래 목록 집계

    카테고리/월 버킷은 처음 등장할 때 생성 (입력 순서 유지).
    빈 입력은 에러 없이 0으로 채워진 Summary 반환.

    Args:
        transactions: 거래 목록
        include_months: 월별 집계 포함 여부

    Returns:
        Summary
    """
    summary = Summary()

    for tx in transactions:
        amount = Decimal(tx.amount)

        if tx.direction == Direction.INCOME.value:
            summary.total_income += amount
        elif tx.direction == Direction.EXPENSE.value:
            summary.total_expenses += amount
        else:
            # 저장소에는 검증된 방향만 존재
            raise ValueError(f"Unknown direction in ledger: {tx.direction!r}")

        summary.transaction_count += 1
        summary.by_category.setdefault(tx.category, BucketTotals()).add(tx.direction, amount)

        if include_months:
            key = month_key(tx.created_at)
            summary.by_month.setdefault(key, BucketTotals()).add(tx.direction, amount)

    return summary
