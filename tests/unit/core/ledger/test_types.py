"""Ledger 타입 테스트"""

import pytest

from core.errors import InvalidDirection, ValidationError
from core.ledger.types import (
    EXTERNAL_RECEIVER,
    EXTERNAL_SENDER,
    Category,
    Direction,
    TransactionStatus,
)


class TestDirection:
    """Direction Enum 테스트"""

    def test_values(self) -> None:
        """income / expense"""
        assert Direction.INCOME == "income"
        assert Direction.EXPENSE == "expense"

    def test_parse(self) -> None:
        """문자열 변환"""
        assert Direction.parse("income") is Direction.INCOME
        assert Direction.parse(Direction.EXPENSE) is Direction.EXPENSE

    @pytest.mark.parametrize("value", ["transfer", "INCOME", "", None, 1])
    def test_parse_invalid(self, value: object) -> None:
        """income/expense 이외의 값은 InvalidDirection"""
        with pytest.raises(InvalidDirection) as exc_info:
            Direction.parse(value)

        assert exc_info.value.code == "invalid_direction"
        assert exc_info.value.status_code == 400

    def test_invalid_direction_is_validation_error(self) -> None:
        """InvalidDirection은 ValidationError의 하위 타입"""
        assert issubclass(InvalidDirection, ValidationError)


class TestCategory:
    """Category Enum 테스트"""

    def test_default_other(self) -> None:
        """값이 없으면 other"""
        assert Category.parse(None) is Category.OTHER
        assert Category.parse("") is Category.OTHER

    def test_parse(self) -> None:
        """목록의 카테고리"""
        assert Category.parse("rent") is Category.RENT
        assert Category.parse("salary") is Category.SALARY

    def test_parse_invalid(self) -> None:
        """목록에 없는 카테고리"""
        with pytest.raises(ValidationError, match="Invalid category"):
            Category.parse("gambling")

    def test_all_values(self) -> None:
        """고정 목록"""
        assert [c.value for c in Category] == [
            "salary", "rent", "equipment", "utilities", "marketing", "other",
        ]


class TestConstants:
    """상수 테스트"""

    def test_sentinels(self) -> None:
        """상대방 없음 표시 값"""
        assert EXTERNAL_SENDER == "external_sender"
        assert EXTERNAL_RECEIVER == "external_receiver"

    def test_status(self) -> None:
        """기본 상태"""
        assert TransactionStatus.COMPLETED.value == "completed"
