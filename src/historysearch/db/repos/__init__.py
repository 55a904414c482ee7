"""Repositories for the history database."""

from historysearch.db.repos.history import HistoryRepo

__all__ = ["HistoryRepo"]
