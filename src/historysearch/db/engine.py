"""Read-only SQLite engine over a history snapshot."""

import sqlite3
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import NullPool


def read_only_uri(database_path: Path) -> str:
    """SQLite URI that opens database_path without write access."""
    return f"{database_path.resolve().as_uri()}?mode=ro"


def get_engine(database_path: Path) -> Engine:
    """Create an engine whose connections are opened read-only.

    NullPool closes the file handle as soon as a connection is released, so
    the snapshot can be removed right after use.
    """
    uri = read_only_uri(database_path)
    return create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(uri, uri=True),
        poolclass=NullPool,
    )
