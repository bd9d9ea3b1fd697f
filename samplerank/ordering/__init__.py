"""Sample ordering: normalization, weighted scoring and ranking."""

from .criteria import (
    BooleanCriterion,
    Criterion,
    DateCriterion,
    EnumCriterion,
    NumericCriterion,
    OrderingConfiguration,
    OrderingScope,
    parse_criterion,
)
from .defaults import default_configuration, default_criteria
from .engine import SampleRanker, iter_scores, preview_subset, rank, rank_in_batches
from .errors import (
    ConfigurationError,
    InvalidWeightError,
    NoActiveCriteriaError,
    OrderingError,
)
from .models import CriterionContribution, RankedResult, ScoredEntity, ValidationIssue
from .normalizers import normalize
from .resolver import ABSENT, resolve
from .scoring import aggregate, contribute
from .selection import select_configuration
from .validator import has_errors, validate

__all__ = [
    "ABSENT",
    "BooleanCriterion",
    "ConfigurationError",
    "Criterion",
    "CriterionContribution",
    "DateCriterion",
    "EnumCriterion",
    "InvalidWeightError",
    "NoActiveCriteriaError",
    "NumericCriterion",
    "OrderingConfiguration",
    "OrderingError",
    "OrderingScope",
    "RankedResult",
    "SampleRanker",
    "ScoredEntity",
    "ValidationIssue",
    "aggregate",
    "contribute",
    "default_configuration",
    "default_criteria",
    "has_errors",
    "iter_scores",
    "normalize",
    "parse_criterion",
    "preview_subset",
    "rank",
    "rank_in_batches",
    "resolve",
    "select_configuration",
    "validate",
]
