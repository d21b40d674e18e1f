"""
타임존 유틸리티

내부 저장/표시 모두 UTC 원칙. DB에는 ISO 8601 문자열로 저장.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """datetime을 UTC로 변환

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        UTC 타임존의 datetime
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso(text: str) -> datetime:
    """ISO 8601 문자열을 UTC datetime으로 변환

    Example:
        >>> parse_iso("2026-02-20T16:00:00+00:00")
        datetime(2026, 2, 20, 16, 0, tzinfo=timezone.utc)
    """
    return to_utc(datetime.fromisoformat(text))


def month_key(dt: datetime) -> str:
    """월별 집계 키 (YYYY-MM, UTC 기준)

    Example:
        >>> month_key(datetime(2026, 3, 31, 23, 59, tzinfo=timezone.utc))
        '2026-03'
    """
    return to_utc(dt).strftime("%Y-%m")
