from datetime import datetime
from typing import Any

from django.utils import dateparse

# 월 이름은 로케일과 무관하게 en-US 로 고정
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_datetime(value: Any) -> datetime | None:
    """ISO 8601 문자열(끝의 Z 포함) 또는 datetime 을 datetime 으로 변환"""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return dateparse.parse_datetime(value.strip())
    except ValueError:
        # 형식은 맞지만 존재하지 않는 날짜 (예: 13월)
        return None


def format_short_date(value: Any) -> str:
    """검색 드롭다운용 날짜 포맷 (예: Mar 5)"""
    date = parse_datetime(value)
    if date is None:
        return ""
    return f"{MONTHS[date.month - 1][:3]} {date.day}"


def format_long_date(value: Any) -> str:
    """상세 페이지용 날짜 포맷 (예: March 5, 2024)"""
    date = parse_datetime(value)
    if date is None:
        return ""
    return f"{MONTHS[date.month - 1]} {date.day}, {date.year}"

