"""Pydantic models for search input."""

from pydantic import BaseModel, Field


class BaseContractModel(BaseModel):
    """Base model for all contracts."""

    model_config = {"extra": "forbid", "frozen": True}


class FilterCriteria(BaseContractModel):
    """Optional filters for one history search.

    Dates are kept as text (YYYY-MM-DD); the query builder parses them and
    drops any bound it cannot read.
    """

    start_date: str | None = None
    end_date: str | None = None
    search: str | None = None
    url: str | None = None
    limit: int | None = Field(default=None, ge=1)
