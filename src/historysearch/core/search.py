"""History search service: criteria in, rendered-ready rows out."""

import logging
from collections.abc import Iterator

from historysearch.contracts.models import FilterCriteria
from historysearch.db.queries.history import build_query
from historysearch.db.repos import HistoryRepo
from historysearch.db.session import db_connection, history_snapshot
from historysearch.db.types import ResultRow
from historysearch.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def search_history(
    criteria: FilterCriteria,
    settings: Settings | None = None,
) -> Iterator[ResultRow]:
    """Search a snapshot of the Chrome history and yield matching rows.

    Rows are streamed newest first. The snapshot and connection stay open
    until the generator is exhausted or closed.

    Args:
        criteria: Optional filters; an empty FilterCriteria matches everything
        settings: Settings to use; the cached application settings if None

    Raises:
        HistoryNotFoundError: the History file does not exist
        SnapshotError: the History file could not be copied
        QueryExecutionError: the snapshot could not be opened or queried
    """
    settings = settings or get_settings()
    plan = build_query(criteria, default_limit=settings.default_limit)
    source = settings.resolve_history_path()
    logger.debug("Query: %s params=%s", plan.query, plan.params)

    with history_snapshot(source, settings.snapshot_dir) as snapshot:
        with db_connection(snapshot) as connection:
            count = 0
            for row in HistoryRepo(connection).search(plan):
                count += 1
                yield row
            logger.info("Returned %d rows from %s", count, source)
