"""Ranking result and validation models."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class CriterionContribution(BaseModel):
    """How one criterion scored one entity."""

    model_config = ConfigDict(frozen=True)

    criterion_id: str = Field(..., description="Criterion identifier")
    criterion_name: str = Field("", description="Criterion display name")
    raw_value: Any = Field(None, description="Value found at the data path, None when absent")
    used_default: bool = Field(False, description="Whether a substitute value was used")
    normalized_score: float = Field(..., description="Magnitude score", ge=0.0, le=100.0)
    oriented_score: float = Field(..., description="Score after direction", ge=0.0, le=100.0)
    weight: int = Field(..., description="Criterion weight")
    weighted_contribution: float = Field(..., description="oriented_score * weight")


class RankedResult(BaseModel):
    """One entity's place in the ranking, with its score breakdown."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(..., description="1-based rank", ge=1)
    input_index: int = Field(..., description="Index of the entity in the input", ge=0)
    entity: Any = Field(..., description="The ranked entity, as supplied")
    aggregate_score: float = Field(..., description="Weighted average score (0-100)")
    breakdown: List[CriterionContribution] = Field(..., description="Per-criterion scores")
    reason: str = Field("", description="Human-readable summary of the score")


class ScoredEntity(BaseModel):
    """An entity scored but not yet placed."""

    model_config = ConfigDict(frozen=True)

    input_index: int
    entity: Any
    aggregate_score: float
    breakdown: List[CriterionContribution]
    reason: str = ""


class ValidationIssue(BaseModel):
    """A single problem found in an ordering configuration."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Machine-readable issue code")
    severity: Literal["error", "warning"] = Field("error", description="error blocks ranking")
    message: str = Field(..., description="Human-readable description")
    criterion_id: Optional[str] = Field(None, description="Offending criterion, if any")

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def __str__(self) -> str:
        if self.criterion_id:
            return f"[{self.code}] {self.criterion_id}: {self.message}"
        return f"[{self.code}] {self.message}"
