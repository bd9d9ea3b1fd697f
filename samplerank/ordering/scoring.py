"""Direction handling and weighted aggregation."""

from typing import Iterable, Tuple

from .criteria import Criterion
from .errors import InvalidWeightError


def orient(raw_score: float, criterion: Criterion) -> float:
    """Flip the score for ascending criteria so that 100 always ranks first."""
    return raw_score if criterion.direction == "desc" else 100.0 - raw_score


def contribute(raw_score: float, criterion: Criterion) -> float:
    """Weighted, direction-oriented contribution of one criterion."""
    if criterion.weight <= 0:
        raise InvalidWeightError(
            f"Criterion '{criterion.id}' has weight {criterion.weight}; weights must be 1-100"
        )
    return orient(raw_score, criterion) * criterion.weight


def aggregate(contributions: Iterable[Tuple[float, int]]) -> float:
    """
    Weighted average of ``(contribution, weight)`` pairs.

    Dividing by the weight total keeps the result on 0-100 whether or not the
    weights add up to 100.
    """
    total = 0.0
    total_weight = 0
    for contribution, weight in contributions:
        total += contribution
        total_weight += weight

    if total_weight <= 0:
        raise InvalidWeightError(f"Active weights sum to {total_weight}; cannot aggregate")
    return total / total_weight
