"""Repository over the Chrome urls table."""

from collections.abc import Iterator

from sqlalchemy import Connection
from sqlalchemy.exc import SQLAlchemyError

from historysearch.core.errors import QueryExecutionError
from historysearch.db.types import QueryPlan, ResultRow


class HistoryRepo:
    """Read-only repository for the urls table."""

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    def search(self, plan: QueryPlan) -> Iterator[ResultRow]:
        """Execute plan and yield one ResultRow per result, in query order.

        The plan's qmark placeholders are bound positionally by the sqlite3
        driver, so the params tuple is passed through unchanged.
        """
        try:
            result = self.connection.exec_driver_sql(plan.query, plan.params)
            for url, title, visit_count, last_visit_time in result:
                yield ResultRow(url, title, visit_count, last_visit_time)
        except SQLAlchemyError as exc:
            raise QueryExecutionError(f"History query failed: {exc}") from exc
