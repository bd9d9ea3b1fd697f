"""Structural and semantic checks for ordering configurations."""

from collections import Counter
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from .criteria import OrderingConfiguration
from .models import ValidationIssue

MIN_WEIGHT = 1
MAX_WEIGHT = 100
RECOMMENDED_WEIGHT_SUM = 100


def _malformed_issues(data: Mapping[str, Any], error: ValidationError) -> List[ValidationIssue]:
    """Turn pydantic errors into issues, naming the criterion where possible."""
    raw_criteria = data.get("criteria") if isinstance(data, Mapping) else None
    issues = []
    for err in error.errors():
        loc = err.get("loc", ())
        criterion_id = None
        if (
            len(loc) >= 2
            and loc[0] == "criteria"
            and isinstance(loc[1], int)
            and isinstance(raw_criteria, list)
            and loc[1] < len(raw_criteria)
            and isinstance(raw_criteria[loc[1]], Mapping)
        ):
            criterion_id = raw_criteria[loc[1]].get("id")
            if criterion_id is not None:
                criterion_id = str(criterion_id)
        location = ".".join(str(part) for part in loc) or "configuration"
        issues.append(
            ValidationIssue(
                code="malformed",
                message=f"{location}: {err.get('msg', 'invalid value')}",
                criterion_id=criterion_id,
            )
        )
    return issues


def validate(
    config: Union[OrderingConfiguration, Mapping[str, Any]],
    weight_sum_target: int = RECOMMENDED_WEIGHT_SUM,
) -> List[ValidationIssue]:
    """
    Check a configuration and report every problem found.

    Checks are independent: a failing check never hides the result of another.
    Raw mappings are first built into an ``OrderingConfiguration``; if that
    fails, the construction errors are returned as ``malformed`` issues.

    Args:
        config: Configuration model or raw mapping
        weight_sum_target: Recommended total of active weights

    Returns:
        Issues in the order the checks ran (may be empty)
    """
    if not isinstance(config, OrderingConfiguration):
        try:
            config = OrderingConfiguration.model_validate(config)
        except ValidationError as e:
            return _malformed_issues(config, e)

    issues: List[ValidationIssue] = []

    if not config.name.strip():
        issues.append(
            ValidationIssue(
                code="missing_name",
                severity="warning",
                message="Configuration has no name",
            )
        )

    active = config.active_criteria
    if not active:
        issues.append(
            ValidationIssue(
                code="no_active_criteria",
                message="At least one criterion must be active",
            )
        )

    for criterion in config.criteria:
        if not MIN_WEIGHT <= criterion.weight <= MAX_WEIGHT:
            issues.append(
                ValidationIssue(
                    code="invalid_weight",
                    message=(
                        f"Weight {criterion.weight} is outside "
                        f"{MIN_WEIGHT}-{MAX_WEIGHT}"
                    ),
                    criterion_id=criterion.id,
                )
            )

        if criterion.is_active and not criterion.data_path.strip():
            issues.append(
                ValidationIssue(
                    code="empty_data_path",
                    message="Active criterion has no data path",
                    criterion_id=criterion.id,
                )
            )

        if criterion.type == "enum":
            if not criterion.options:
                issues.append(
                    ValidationIssue(
                        code="missing_options",
                        message="Enum criterion needs at least one option",
                        criterion_id=criterion.id,
                    )
                )
            repeated = sorted(o for o, n in Counter(criterion.options).items() if n > 1)
            if repeated:
                issues.append(
                    ValidationIssue(
                        code="duplicate_option",
                        severity="warning",
                        message=f"Options listed more than once: {', '.join(repeated)}",
                        criterion_id=criterion.id,
                    )
                )
            default = criterion.normalization_config.default_value
            if not 0 <= default <= 100:
                issues.append(
                    ValidationIssue(
                        code="invalid_range",
                        message=f"Default percentile {default} is outside 0-100",
                        criterion_id=criterion.id,
                    )
                )
        elif criterion.type == "numeric":
            params = criterion.normalization_config
            if params.min > params.max:
                issues.append(
                    ValidationIssue(
                        code="invalid_range",
                        message=f"min ({params.min}) is greater than max ({params.max})",
                        criterion_id=criterion.id,
                    )
                )
        elif criterion.type == "date":
            if criterion.normalization_config.max <= 0:
                issues.append(
                    ValidationIssue(
                        code="invalid_range",
                        message="Recency window must be a positive number of days",
                        criterion_id=criterion.id,
                    )
                )

    counts = Counter(c.id for c in config.criteria)
    for criterion_id, count in counts.items():
        if count > 1:
            issues.append(
                ValidationIssue(
                    code="duplicate_id",
                    message=f"Criterion id used {count} times",
                    criterion_id=criterion_id,
                )
            )

    total = config.total_active_weight
    if active and total != weight_sum_target:
        issues.append(
            ValidationIssue(
                code="weight_sum",
                severity="warning",
                message=(
                    f"Active weights sum to {total}, not {weight_sum_target}; "
                    "scores are still normalized by the actual total"
                ),
            )
        )

    return issues


def errors(issues: List[ValidationIssue]) -> List[ValidationIssue]:
    return [i for i in issues if i.is_error]


def warnings(issues: List[ValidationIssue]) -> List[ValidationIssue]:
    return [i for i in issues if not i.is_error]


def has_errors(issues: List[ValidationIssue]) -> bool:
    return any(i.is_error for i in issues)
