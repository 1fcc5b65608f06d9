"""
到期时间换算

到期日以 ISO 日期字符串 (YYYY-MM-DD)、date 对象或剩余天数给出。
"今天" 以美国太平洋时间为准，换算为整日差后再除以 365 得到年化时间。
"""
import math
from datetime import date, datetime
from typing import Optional, Union

import pytz

PACIFIC_TZ = pytz.timezone("America/Los_Angeles")
DAYS_PER_YEAR = 365

ExpiryLike = Union[str, date, int, float]


def today_pacific() -> date:
    """太平洋时间的今日日期"""
    return datetime.now(PACIFIC_TZ).date()


def parse_expiry(expiry: Union[str, date]) -> date:
    """解析到期日，接受 'YYYY-MM-DD' 字符串或 date/datetime"""
    if isinstance(expiry, datetime):
        return expiry.date()
    if isinstance(expiry, date):
        return expiry
    try:
        return date.fromisoformat(expiry.strip()[:10])
    except (AttributeError, ValueError) as e:
        raise ValueError(f"无法解析到期日: {expiry!r}") from e


def days_to_expiry(expiry: ExpiryLike, today: Optional[date] = None) -> float:
    """
    剩余自然日数

    数值输入视为已经给出的剩余天数，原样返回；日期输入按整日差计算，可能为负。
    """
    if isinstance(expiry, bool):
        raise ValueError(f"无法解析到期日: {expiry!r}")
    if isinstance(expiry, (int, float)):
        if math.isnan(expiry):
            raise ValueError("剩余天数不能为 NaN")
        return expiry
    today = today or today_pacific()
    return (parse_expiry(expiry) - today).days


def years_to_expiry(
    expiry: ExpiryLike,
    today: Optional[date] = None,
    days_per_year: int = DAYS_PER_YEAR,
) -> float:
    """年化剩余时间 max(0, days / 365)"""
    return max(0.0, days_to_expiry(expiry, today) / days_per_year)
