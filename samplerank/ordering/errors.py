"""Ordering errors."""

from typing import List, Optional, Sequence


class OrderingError(Exception):
    """Base class for ordering failures."""


class ConfigurationError(OrderingError):
    """Configuration cannot be used for ranking."""

    def __init__(self, message: str, issues: Optional[Sequence] = None) -> None:
        super().__init__(message)
        self.issues = list(issues or [])

    @property
    def criterion_ids(self) -> List[str]:
        """Ids of the criteria named by the issues, in order of first appearance."""
        ids: List[str] = []
        for issue in self.issues:
            criterion_id = getattr(issue, "criterion_id", None)
            if criterion_id and criterion_id not in ids:
                ids.append(criterion_id)
        return ids


class NoActiveCriteriaError(ConfigurationError):
    """No criterion is active, so nothing can be scored."""


class InvalidWeightError(ConfigurationError):
    """A weight would make the aggregate undefined."""
