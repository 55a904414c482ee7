"""Chrome timestamp codec.

Chrome stores visit times as microseconds since 1601-01-01T00:00:00. Values are
treated as naive date/times throughout; no timezone offset is applied.
"""

from datetime import date, datetime, time, timedelta
from typing import NewType

# Signed microseconds since CHROME_EPOCH, as stored in urls.last_visit_time
EpochMicroseconds = NewType("EpochMicroseconds", int)

CHROME_EPOCH = datetime(1601, 1, 1)

_ONE_MICROSECOND = timedelta(microseconds=1)


def from_datetime(value: datetime) -> EpochMicroseconds:
    """Convert a naive datetime to microseconds since the Chrome epoch."""
    return EpochMicroseconds((value - CHROME_EPOCH) // _ONE_MICROSECOND)


def from_date(value: date) -> EpochMicroseconds:
    """Convert a calendar date (taken at midnight) to a Chrome timestamp."""
    return from_datetime(datetime.combine(value, time.min))


def to_datetime(ts: int) -> datetime:
    """Convert a Chrome timestamp to a naive datetime."""
    return CHROME_EPOCH + timedelta(microseconds=ts)
