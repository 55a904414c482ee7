"""Core: Chrome timestamp codec and error types."""

from historysearch.core.chrome_time import (
    CHROME_EPOCH,
    EpochMicroseconds,
    from_date,
    from_datetime,
    to_datetime,
)
from historysearch.core.errors import (
    HistoryNotFoundError,
    HistorySearchError,
    QueryExecutionError,
    SnapshotError,
)

__all__ = [
    "CHROME_EPOCH",
    "EpochMicroseconds",
    "from_date",
    "from_datetime",
    "to_datetime",
    "HistoryNotFoundError",
    "HistorySearchError",
    "QueryExecutionError",
    "SnapshotError",
]
