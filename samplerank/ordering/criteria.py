"""Ordering configuration and criterion models."""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Union

import pendulum
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

Direction = Literal["asc", "desc"]


class CamelModel(BaseModel):
    """Immutable model that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class NumericNormalization(CamelModel):
    """Linear mapping of ``[min, max]`` onto 0..100."""

    min: float = Field(..., description="Value that scores 0")
    max: float = Field(..., description="Value that scores 100")
    default_value: Optional[float] = Field(
        None, description="Substitute for a missing value (falls back to min)"
    )

    @property
    def fallback(self) -> float:
        return self.min if self.default_value is None else self.default_value


class DateNormalization(CamelModel):
    """Recency window."""

    max: float = Field(..., description="Age in days at which recency stops counting")


class EnumNormalization(CamelModel):
    """Percentile used when the value is not one of the options."""

    default_value: float = Field(0.0, description="Percentile (0-100) for unknown values")


class BooleanNormalization(CamelModel):
    """Substitute for a missing flag."""

    default_value: bool = Field(False, description="Value assumed when absent")


class BaseCriterion(CamelModel):
    """Fields shared by every criterion type."""

    id: str = Field(..., description="Criterion identifier")
    name: str = Field("", description="Display name")
    description: str = Field("", description="What the criterion favours")
    weight: int = Field(..., description="Relative importance (1-100)")
    direction: Direction = Field("desc", description="desc: larger ranks first")
    is_active: bool = Field(True, description="Whether the criterion takes part")
    data_path: str = Field("", description="Dotted path into the entity")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class NumericCriterion(BaseCriterion):
    type: Literal["numeric"] = "numeric"
    normalization_config: NumericNormalization


class DateCriterion(BaseCriterion):
    type: Literal["date"] = "date"
    normalization_config: DateNormalization


class EnumCriterion(BaseCriterion):
    type: Literal["enum"] = "enum"
    options: List[str] = Field(default_factory=list, description="Options, lowest first")
    normalization_config: EnumNormalization = Field(default_factory=EnumNormalization)


class BooleanCriterion(BaseCriterion):
    type: Literal["boolean"] = "boolean"
    normalization_config: BooleanNormalization = Field(default_factory=BooleanNormalization)


Criterion = Annotated[
    Union[NumericCriterion, DateCriterion, EnumCriterion, BooleanCriterion],
    Field(discriminator="type"),
]


class OrderingScope(CamelModel):
    """Restricts a configuration to one kind of session."""

    session_type: Optional[str] = Field(None, description="e.g. routine or extra")

    def matches(self, session_type: Optional[str]) -> bool:
        """Whether a session of ``session_type`` falls inside this scope."""
        return self.session_type is None or self.session_type == session_type


class OrderingConfiguration(CamelModel):
    """A named, ordered set of ranking criteria.

    Instances are frozen. The editing helpers return a new configuration and
    leave the original untouched, so a configuration handed to the engine
    stays the same for the whole run.
    """

    id: str = Field(..., description="Configuration identifier")
    name: str = Field("", description="Display name")
    description: str = Field("", description="Free text description")
    scope: Optional[OrderingScope] = Field(None, description="Optional session filter")
    criteria: List[Criterion] = Field(default_factory=list, description="Ordered criteria")
    is_default: bool = Field(False, description="Fallback configuration flag")
    created_by: Optional[str] = Field(None, description="Author")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")

    @property
    def active_criteria(self) -> List[Criterion]:
        return [c for c in self.criteria if c.is_active]

    @property
    def total_active_weight(self) -> int:
        return sum(c.weight for c in self.active_criteria)

    def get_criterion(self, criterion_id: str) -> Optional[Criterion]:
        for criterion in self.criteria:
            if criterion.id == criterion_id:
                return criterion
        return None

    def with_criterion(
        self, criterion: Union[Criterion, Mapping[str, Any]]
    ) -> "OrderingConfiguration":
        """Return a copy with ``criterion`` appended."""
        if isinstance(criterion, Mapping):
            criterion = parse_criterion(criterion)
        return self._replace_criteria(list(self.criteria) + [criterion])

    def without_criterion(self, criterion_id: str) -> "OrderingConfiguration":
        """Return a copy without the criterion ``criterion_id``."""
        if self.get_criterion(criterion_id) is None:
            raise KeyError(criterion_id)
        return self._replace_criteria([c for c in self.criteria if c.id != criterion_id])

    def update_criterion(self, criterion_id: str, **changes: Any) -> "OrderingConfiguration":
        """
        Return a copy where one criterion has ``changes`` applied.

        The changed criterion is validated again, so changing ``type`` requires
        a matching ``normalization_config``.
        """
        current = self.get_criterion(criterion_id)
        if current is None:
            raise KeyError(criterion_id)

        now = pendulum.now("UTC")
        data: Dict[str, Any] = current.model_dump()
        data.update(changes)
        data["updated_at"] = now
        updated = _CRITERION_ADAPTER.validate_python(data)

        criteria = [updated if c.id == criterion_id else c for c in self.criteria]
        return self._replace_criteria(criteria)

    def _replace_criteria(self, criteria: List[Criterion]) -> "OrderingConfiguration":
        return self.model_copy(
            update={"criteria": criteria, "updated_at": pendulum.now("UTC")}
        )


_CRITERION_ADAPTER = TypeAdapter(Criterion)


def parse_criterion(data: Dict[str, Any]) -> Criterion:
    """Build the right criterion variant from a mapping."""
    return _CRITERION_ADAPTER.validate_python(data)
