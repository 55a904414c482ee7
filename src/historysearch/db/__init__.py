"""Database access layer."""

from historysearch.db.engine import get_engine
from historysearch.db.session import db_connection, history_snapshot

__all__ = ["get_engine", "db_connection", "history_snapshot"]
