"""Input contracts for history searches."""

from historysearch.contracts.models import BaseContractModel, FilterCriteria

__all__ = [
    "BaseContractModel",
    "FilterCriteria",
]
