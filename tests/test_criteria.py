"""Tests for configuration models, editing helpers, defaults and selection."""

import pytest
from pydantic import ValidationError

from samplerank.ordering import (
    EnumCriterion,
    NumericCriterion,
    OrderingConfiguration,
    OrderingScope,
    default_configuration,
    default_criteria,
    parse_criterion,
    select_configuration,
)

from .conftest import configuration, enum, numeric


class TestCriterionVariants:
    def test_type_selects_variant(self):
        criterion = parse_criterion(
            {
                "id": "p",
                "type": "enum",
                "weight": 20,
                "dataPath": "priority",
                "options": ["baixa", "alta"],
                "normalizationConfig": {"defaultValue": 50},
            }
        )
        assert isinstance(criterion, EnumCriterion)
        assert criterion.data_path == "priority"
        assert criterion.normalization_config.default_value == 50

    def test_snake_case_keys_are_accepted(self):
        criterion = parse_criterion(
            {
                "id": "q",
                "type": "numeric",
                "weight": 25,
                "data_path": "quality.score",
                "normalization_config": {"min": 0, "max": 100, "default_value": 50},
            }
        )
        assert isinstance(criterion, NumericCriterion)
        assert criterion.normalization_config.fallback == 50

    def test_numeric_requires_bounds(self):
        with pytest.raises(ValidationError):
            parse_criterion({"id": "q", "type": "numeric", "weight": 25, "dataPath": "q"})

    def test_date_requires_window(self):
        with pytest.raises(ValidationError):
            parse_criterion(
                {"id": "d", "type": "date", "weight": 25, "normalizationConfig": {}}
            )

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            parse_criterion({"id": "x", "type": "colour", "weight": 10})

    def test_criteria_are_frozen(self):
        criterion = numeric()
        with pytest.raises(ValidationError):
            criterion.weight = 5

    def test_dump_uses_camel_case(self):
        data = numeric(default=10).model_dump(by_alias=True)
        assert data["dataPath"] == "score"
        assert data["isActive"] is True
        assert data["normalizationConfig"]["defaultValue"] == 10


class TestConfigurationEditing:
    def test_active_criteria_and_weight_total(self):
        config = configuration(numeric("a", weight=30), numeric("b", weight=20, active=False))
        assert [c.id for c in config.active_criteria] == ["a"]
        assert config.total_active_weight == 30

    def test_with_criterion_returns_copy(self):
        config = configuration(numeric("a"))
        updated = config.with_criterion(enum("b"))

        assert [c.id for c in config.criteria] == ["a"]
        assert [c.id for c in updated.criteria] == ["a", "b"]
        assert updated.updated_at is not None

    def test_with_criterion_accepts_mapping(self):
        updated = configuration().with_criterion(
            {"id": "u", "type": "boolean", "weight": 10, "dataPath": "urgent"}
        )
        assert updated.criteria[0].type == "boolean"

    def test_without_criterion(self):
        config = configuration(numeric("a"), numeric("b"))
        assert [c.id for c in config.without_criterion("a").criteria] == ["b"]
        with pytest.raises(KeyError):
            config.without_criterion("missing")

    def test_update_criterion_revalidates(self):
        config = configuration(numeric("a", weight=30))
        updated = config.update_criterion("a", weight=45, direction="asc")

        assert config.get_criterion("a").weight == 30
        assert updated.get_criterion("a").weight == 45
        assert updated.get_criterion("a").direction == "asc"

        with pytest.raises(ValidationError):
            config.update_criterion("a", type="enum")

    def test_round_trip_through_camel_case(self):
        config = default_configuration()
        data = config.model_dump(mode="json", by_alias=True)
        assert OrderingConfiguration.model_validate(data) == config


class TestDefaults:
    def test_stock_criteria(self):
        criteria = default_criteria()
        assert [c.type for c in criteria] == ["date", "numeric", "enum", "numeric", "enum"]
        assert [c.weight for c in criteria] == [30, 25, 20, 15, 10]
        assert criteria[3].direction == "asc"
        assert not criteria[4].is_active

    def test_default_configuration_is_flagged(self):
        config = default_configuration(created_by="qa-lead")
        assert config.is_default
        assert config.created_by == "qa-lead"
        assert config.total_active_weight == 85


class TestSelectConfiguration:
    def test_scoped_configuration_wins(self):
        routine = configuration(numeric(), scope=OrderingScope(session_type="routine"))
        fallback = configuration(numeric(), is_default=True)

        assert select_configuration([fallback, routine], "routine") is routine

    def test_falls_back_to_default(self):
        routine = configuration(numeric(), scope=OrderingScope(session_type="routine"))
        fallback = configuration(numeric(), is_default=True)

        assert select_configuration([routine, fallback], "extra") is fallback
        assert select_configuration([routine, fallback]) is fallback

    def test_nothing_applies(self):
        assert select_configuration([configuration(numeric())], "extra") is None
        assert select_configuration([]) is None
