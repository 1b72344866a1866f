from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import pytz

from workforce.config import settings


def get_business_timezone(timezone_str: Optional[str] = None) -> pytz.BaseTzInfo:
    """The timezone whose midnight separates one work day from the next."""
    return pytz.timezone(timezone_str or settings.TIMEZONE)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(pytz.UTC)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive values read back from the database."""
    if dt.tzinfo is None:
        return pytz.UTC.localize(dt)
    return dt.astimezone(pytz.UTC)


def business_date(dt: datetime, timezone_str: Optional[str] = None) -> date:
    """Calendar date of ``dt`` in the business timezone."""
    return ensure_utc(dt).astimezone(get_business_timezone(timezone_str)).date()


def get_today(timezone_str: Optional[str] = None, now: Optional[datetime] = None) -> date:
    return business_date(now or utc_now(), timezone_str)


def inclusive_day_count(start_date: date, end_date: date) -> int:
    """Number of calendar days spanned by the range, counting both ends."""
    return (end_date - start_date).days + 1


def hours_between(start_dt: datetime, end_dt: datetime) -> float:
    """Elapsed hours rounded half-up to one decimal place."""
    elapsed = ensure_utc(end_dt) - ensure_utc(start_dt)
    microseconds = Decimal(elapsed // timedelta(microseconds=1))
    hours = microseconds / Decimal(3600 * 10**6)
    return float(hours.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
