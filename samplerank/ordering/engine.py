"""Sample ranker that combines every active criterion into one score."""

import logging
from datetime import datetime
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from .criteria import Criterion, OrderingConfiguration
from .errors import ConfigurationError, InvalidWeightError, NoActiveCriteriaError
from .models import CriterionContribution, RankedResult, ScoredEntity, ValidationIssue
from .normalizers import normalize, reference_time
from .resolver import ABSENT, resolve
from .scoring import aggregate, contribute, orient
from .validator import RECOMMENDED_WEIGHT_SUM, errors, validate, warnings

logger = logging.getLogger(__name__)

ConfigLike = Union[OrderingConfiguration, Mapping[str, Any]]
ProgressCallback = Callable[[int, int], None]


def _raise_for_issues(issues: List[ValidationIssue]) -> None:
    """Raise the most specific error for the blocking issues, if there are any."""
    blocking = errors(issues)
    if not blocking:
        return

    if any(i.code == "no_active_criteria" for i in blocking):
        raise NoActiveCriteriaError("No active criteria: ranking cannot proceed", blocking)

    details = "; ".join(str(i) for i in blocking)
    if any(i.code == "invalid_weight" for i in blocking):
        raise InvalidWeightError(f"Invalid weights: {details}", blocking)
    raise ConfigurationError(f"Invalid ordering configuration: {details}", blocking)


class SampleRanker:
    """Rank entities with one ordering configuration."""

    def __init__(
        self,
        config: ConfigLike,
        now: Optional[datetime] = None,
        weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
    ) -> None:
        """
        Initialize the ranker.

        The configuration is validated here; blocking problems raise before any
        entity is looked at. The configuration is copied, so later changes by
        the caller do not affect this ranker.

        Args:
            config: Ordering configuration (model or raw mapping)
            now: Reference time for date criteria (default: current UTC time)
            weight_sum_target: Recommended total of active weights, for warnings

        Raises:
            NoActiveCriteriaError: No criterion is active
            InvalidWeightError: A weight is outside 1-100
            ConfigurationError: Any other blocking problem
        """
        issues = validate(config, weight_sum_target)
        _raise_for_issues(issues)
        for issue in warnings(issues):
            logger.warning("Ordering configuration: %s", issue)

        if not isinstance(config, OrderingConfiguration):
            config = OrderingConfiguration.model_validate(config)

        self.config = config.model_copy(deep=True)
        self.criteria: List[Criterion] = self.config.active_criteria
        self.now = reference_time(now)

    def _score_criterion(self, entity: Any, criterion: Criterion) -> CriterionContribution:
        value = resolve(entity, criterion.data_path)
        normalized = normalize(value, criterion, self.now)
        return CriterionContribution(
            criterion_id=criterion.id,
            criterion_name=criterion.name,
            raw_value=None if value is ABSENT else value,
            used_default=normalized.used_default,
            normalized_score=normalized.score,
            oriented_score=orient(normalized.score, criterion),
            weight=criterion.weight,
            weighted_contribution=contribute(normalized.score, criterion),
        )

    def _generate_reason(self, breakdown: List[CriterionContribution]) -> str:
        """Generate a human-readable reason for a score."""
        reasons = []
        by_impact = sorted(breakdown, key=lambda c: c.weighted_contribution, reverse=True)

        strong = [c.criterion_name or c.criterion_id for c in by_impact if c.oriented_score >= 80]
        weak = [c.criterion_name or c.criterion_id for c in by_impact if c.oriented_score <= 20]
        defaulted = [c.criterion_name or c.criterion_id for c in breakdown if c.used_default]

        if strong:
            reasons.append("strong on " + ", ".join(strong[:2]))
        if weak:
            reasons.append("weak on " + ", ".join(weak[:2]))
        if defaulted:
            reasons.append("defaults used for " + ", ".join(defaulted))

        if not reasons:
            return "Balanced scoring across criteria"
        reason = "; ".join(reasons)
        return reason[0].upper() + reason[1:]

    def score_entity(self, entity: Any, input_index: int = 0) -> ScoredEntity:
        """Score a single entity against every active criterion."""
        breakdown = [self._score_criterion(entity, c) for c in self.criteria]
        score = aggregate((c.weighted_contribution, c.weight) for c in breakdown)
        return ScoredEntity(
            input_index=input_index,
            entity=entity,
            aggregate_score=score,
            breakdown=breakdown,
            reason=self._generate_reason(breakdown),
        )

    def iter_scores(self, entities: Iterable[Any]) -> Iterator[ScoredEntity]:
        """Yield scored entities one at a time, in input order."""
        for index, entity in enumerate(entities):
            yield self.score_entity(entity, index)

    @staticmethod
    def place(scored: Iterable[ScoredEntity]) -> List[RankedResult]:
        """
        Sort scored entities and assign positions.

        The sort is stable, so entities with equal scores keep their input order.
        """
        ordered = sorted(scored, key=lambda s: s.aggregate_score, reverse=True)
        return [
            RankedResult(
                position=position,
                input_index=item.input_index,
                entity=item.entity,
                aggregate_score=item.aggregate_score,
                breakdown=item.breakdown,
                reason=item.reason,
            )
            for position, item in enumerate(ordered, 1)
        ]

    def rank(self, entities: Iterable[Any]) -> List[RankedResult]:
        """Rank every entity."""
        results = self.place(self.iter_scores(entities))
        logger.info(
            "Ranked %d entities with %d active criteria (configuration %s)",
            len(results), len(self.criteria), self.config.id,
        )
        return results

    def rank_in_batches(
        self,
        entities: Sequence[Any],
        batch_size: int,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[RankedResult]:
        """
        Rank entities chunk by chunk, reporting progress between chunks.

        The result is identical to ``rank``.

        Args:
            entities: Entities to rank
            batch_size: Number of entities scored per chunk
            on_progress: Called with ``(scored_so_far, total)`` after each chunk
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")

        total = len(entities)
        scored: List[ScoredEntity] = []
        for start in range(0, total, batch_size):
            chunk = entities[start:start + batch_size]
            scored.extend(self.score_entity(e, start + i) for i, e in enumerate(chunk))
            if on_progress is not None:
                on_progress(len(scored), total)
        return self.place(scored)


def rank(
    entities: Iterable[Any],
    config: ConfigLike,
    now: Optional[datetime] = None,
    weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
) -> List[RankedResult]:
    """Rank ``entities`` by ``config``. See ``SampleRanker``."""
    return SampleRanker(config, now=now, weight_sum_target=weight_sum_target).rank(entities)


def preview_subset(
    entities: Iterable[Any],
    config: ConfigLike,
    limit: int,
    now: Optional[datetime] = None,
    weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
) -> List[RankedResult]:
    """Rank only the first ``limit`` entities, for quick feedback."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    ranker = SampleRanker(config, now=now, weight_sum_target=weight_sum_target)
    return ranker.rank(islice(entities, limit))


def iter_scores(
    entities: Iterable[Any],
    config: ConfigLike,
    now: Optional[datetime] = None,
    weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
) -> Iterator[ScoredEntity]:
    """Yield unsorted scores as entities are processed."""
    return SampleRanker(config, now=now, weight_sum_target=weight_sum_target).iter_scores(entities)


def rank_in_batches(
    entities: Sequence[Any],
    config: ConfigLike,
    batch_size: int,
    now: Optional[datetime] = None,
    on_progress: Optional[ProgressCallback] = None,
    weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
) -> List[RankedResult]:
    """Rank in chunks of ``batch_size``, calling ``on_progress`` between chunks."""
    ranker = SampleRanker(config, now=now, weight_sum_target=weight_sum_target)
    return ranker.rank_in_batches(entities, batch_size, on_progress)
