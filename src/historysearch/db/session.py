"""Snapshot and connection management."""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Connection
from sqlalchemy.exc import SQLAlchemyError

from historysearch.core.errors import HistoryNotFoundError, QueryExecutionError, SnapshotError
from historysearch.db.engine import get_engine

logger = logging.getLogger(__name__)

SNAPSHOT_PREFIX = "chrome-history-"
SNAPSHOT_SUFFIX = ".sqlite"


@contextmanager
def history_snapshot(source: Path, directory: Path | None = None) -> Iterator[Path]:
    """Copy the live History file to a temporary snapshot and yield its path.

    Chrome keeps the live database locked while running, so queries always
    go against a copy. The copy is deleted when the context exits.

    Args:
        source: Path to the live History file (only ever read)
        directory: Where to place the snapshot; system temp dir if None

    Raises:
        HistoryNotFoundError: source does not exist
        SnapshotError: the copy could not be made
    """
    if not source.is_file():
        raise HistoryNotFoundError(source)

    try:
        fd, name = tempfile.mkstemp(
            prefix=SNAPSHOT_PREFIX, suffix=SNAPSHOT_SUFFIX, dir=directory
        )
        os.close(fd)
    except OSError as exc:
        raise SnapshotError(source, str(exc)) from exc

    snapshot = Path(name)
    try:
        try:
            shutil.copy2(source, snapshot)
        except OSError as exc:
            raise SnapshotError(source, str(exc)) from exc
        logger.debug("Copied %s to snapshot %s", source, snapshot)
        yield snapshot
    finally:
        snapshot.unlink(missing_ok=True)
        logger.debug("Removed snapshot %s", snapshot)


@contextmanager
def db_connection(database_path: Path) -> Iterator[Connection]:
    """Context manager yielding a read-only Connection to database_path."""
    engine = get_engine(database_path)
    try:
        try:
            connection = engine.connect()
        except SQLAlchemyError as exc:
            raise QueryExecutionError(f"Could not open {database_path}: {exc}") from exc
        with connection:
            yield connection
    finally:
        engine.dispose()
