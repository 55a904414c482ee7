"""Errors raised by the history I/O layer."""

from pathlib import Path


class HistorySearchError(Exception):
    """Base class for failures that abort a history search."""


class HistoryNotFoundError(HistorySearchError):
    """Raised when the Chrome History file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"History database not found: {path}")
        self.path = path


class SnapshotError(HistorySearchError):
    """Raised when the History file cannot be copied to a snapshot."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not copy history database {path}: {reason}")
        self.path = path


class QueryExecutionError(HistorySearchError):
    """Raised when the snapshot cannot be opened or the query fails."""
