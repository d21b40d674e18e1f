"""
금액 문자열 변환

Decimal을 지수 표기 없이 고정 소수점 문자열로 변환.
"1e2"로 입력된 금액도 "100"으로 응답/저장.
"""

from decimal import Decimal


def format_amount(value: Decimal) -> str:
    """Decimal → 고정 소수점 문자열

    Examples:
        >>> format_amount(Decimal("1E+2"))
        '100'
        >>> format_amount(Decimal("1234.50"))
        '1234.50'
    """
    return format(value, "f")
