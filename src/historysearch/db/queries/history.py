"""Parameterized query construction over the Chrome urls table."""

import logging
from datetime import date, datetime

from historysearch.contracts.models import FilterCriteria
from historysearch.core import chrome_time
from historysearch.db.types import Param, QueryPlan

logger = logging.getLogger(__name__)

BASE_QUERY = "SELECT url, title, visit_count, last_visit_time FROM urls WHERE 1=1"
ORDER_BY = " ORDER BY last_visit_time DESC"

DATE_FORMAT = "%Y-%m-%d"


def parse_date(text: str | None) -> date | None:
    """Parse a YYYY-MM-DD literal, returning None when absent or malformed."""
    if text is None:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        logger.warning("Ignoring date filter, expected YYYY-MM-DD: %r", text)
        return None


def _parse_limit(value: int | str | None) -> int | None:
    if value is None:
        return None
    try:
        limit = int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring limit, expected a positive integer: %r", value)
        return None
    if limit < 1:
        logger.warning("Ignoring limit, expected a positive integer: %r", value)
        return None
    return limit


class QueryBuilder:
    """Accumulates filter predicates and builds one parameterized query.

    Each predicate is stored together with its parameters, so the parameter
    order always follows the order predicates were added. Bad filter input
    never raises; the filter is simply left out.

    Example:
        plan = (
            QueryBuilder()
            .date_range("2024-01-01", "2024-01-31")
            .title_contains("bank")
            .limit(10)
            .build()
        )
    """

    def __init__(self) -> None:
        self.conditions: list[str] = []
        self.params: list[Param] = []
        self.limit_clause: str | None = None

    def _add_condition(self, condition: str, *params: Param) -> None:
        self.conditions.append(condition)
        self.params.extend(params)

    def date_range(self, start: str | None, end: str | None) -> "QueryBuilder":
        """Bound last_visit_time by start (inclusive) and/or end.

        With both bounds the range is BETWEEN start AND end; with only an end
        bound the comparison is exclusive. No start <= end check is made.
        """
        start_date = parse_date(start)
        end_date = parse_date(end)
        if start_date is not None and end_date is not None:
            self._add_condition(
                "last_visit_time BETWEEN ? AND ?",
                chrome_time.from_date(start_date),
                chrome_time.from_date(end_date),
            )
        elif start_date is not None:
            self._add_condition("last_visit_time >= ?", chrome_time.from_date(start_date))
        elif end_date is not None:
            self._add_condition("last_visit_time < ?", chrome_time.from_date(end_date))
        return self

    def title_contains(self, term: str | None) -> "QueryBuilder":
        """Match titles containing term."""
        if term:
            self._add_condition("title LIKE ?", f"%{term}%")
        return self

    def url_contains(self, term: str | None) -> "QueryBuilder":
        """Match URLs containing term."""
        if term:
            self._add_condition("url LIKE ?", f"%{term}%")
        return self

    def limit(self, value: int | str | None) -> "QueryBuilder":
        """Cap the number of rows; None leaves the query unlimited."""
        limit = _parse_limit(value)
        if limit is not None:
            self.limit_clause = f" LIMIT {limit}"
        return self

    def build(self) -> QueryPlan:
        """Assemble the query text and its ordered parameters."""
        query = BASE_QUERY
        for condition in self.conditions:
            query += f" AND {condition}"
        query += ORDER_BY
        if self.limit_clause is not None:
            query += self.limit_clause
        return QueryPlan(query=query, params=tuple(self.params))


def build_query(criteria: FilterCriteria, default_limit: int | None = None) -> QueryPlan:
    """Build the plan for criteria: date range, then title, then URL, then limit.

    Args:
        criteria: Caller's optional filters
        default_limit: Row cap used when criteria.limit is not set

    Returns:
        QueryPlan ready for execution
    """
    limit = criteria.limit if criteria.limit is not None else default_limit
    return (
        QueryBuilder()
        .date_range(criteria.start_date, criteria.end_date)
        .title_contains(criteria.search)
        .url_contains(criteria.url)
        .limit(limit)
        .build()
    )
