"""
Ledger 타입 정의

거래 방향, 카테고리, 상태 등 Ledger에서 사용하는 Enum 정의
"""

from enum import Enum

from core.errors import InvalidDirection, ValidationError


# 상대방 지갑이 없을 때 기록되는 값
EXTERNAL_SENDER: str = "external_sender"
EXTERNAL_RECEIVER: str = "external_receiver"


class Direction(str, Enum):
    """거래 방향

    income: 사용자 지갑이 receiver
    expense: 사용자 지갑이 sender
    """

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value: object) -> "Direction":
        """문자열을 Direction으로 변환

        Raises:
            InvalidDirection: income/expense가 아닌 경우 (대소문자 구분)
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidDirection(value) from e


class Category(str, Enum):
    """거래 카테고리 (고정 목록)"""

    SALARY = "salary"
    RENT = "rent"
    EQUIPMENT = "equipment"
    UTILITIES = "utilities"
    MARKETING = "marketing"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object | None) -> "Category":
        """문자열을 Category로 변환 (없으면 other)

        Raises:
            ValidationError: 목록에 없는 카테고리
        """
        if value is None or value == "":
            return cls.OTHER
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            valid = [c.value for c in cls]
            raise ValidationError(
                f"Invalid category: {value!r}. Valid categories: {valid}"
            ) from e


class TransactionStatus(str, Enum):
    """거래 상태"""

    COMPLETED = "completed"
