"""Type aliases and data structures for the history query layer."""

from dataclasses import dataclass
from datetime import datetime

from historysearch.core import chrome_time
from historysearch.core.chrome_time import EpochMicroseconds

# Bound values are either Chrome timestamps or LIKE patterns
Param = int | str

PLACEHOLDER = "?"

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class QueryPlan:
    """Finished query text and the values bound to its placeholders, in order."""

    query: str
    params: tuple[Param, ...] = ()

    def __post_init__(self) -> None:
        """Validate placeholder/parameter alignment."""
        placeholders = self.query.count(PLACEHOLDER)
        if placeholders != len(self.params):
            raise ValueError(
                f"query has {placeholders} placeholders but {len(self.params)} params"
            )


@dataclass(frozen=True)
class ResultRow:
    """One row of the urls table, in selection order."""

    url: str
    title: str | None
    visit_count: int
    last_visit_time: EpochMicroseconds

    @property
    def visited_at(self) -> datetime:
        """Last visit as a naive datetime."""
        return chrome_time.to_datetime(self.last_visit_time)

    def render(self) -> str:
        """Human-readable two-line block: header, then indented URL."""
        return (
            f"[{self.visited_at.strftime(DISPLAY_FORMAT)}] {self.title or ''} "
            f"({self.visit_count} visits)\n    {self.url}"
        )

    def __str__(self) -> str:
        return self.render()
