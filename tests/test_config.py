"""Tests for settings and file loading."""

import json

import pytest

from samplerank.config import (
    Config,
    ConfigModel,
    load_config,
    load_entities,
    load_ordering,
    save_config,
    save_ordering,
)
from samplerank.config.loader import default_config_path
from samplerank.ordering import default_configuration


class TestConfigModel:
    def test_defaults(self):
        config = ConfigModel()
        assert config.preview_limit == 10
        assert config.log_level == "WARNING"
        assert config.weight_sum_target == 100

    def test_log_level_is_normalized(self):
        assert ConfigModel(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError):
            ConfigModel(log_level="chatty")


class TestConfigFiles:
    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config(ConfigModel(preview_limit=25), path)
        assert load_config(path).preview_limit == 25

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("preview_limit: [unclosed\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("preview_limit: 0\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == ConfigModel()


class TestConfigManager:
    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        monkeypatch.setenv("SAMPLERANK_CONFIG", str(path))
        assert default_config_path() == path
        assert Config().config_path == path

    def test_defaults_without_file(self, tmp_path):
        config = Config(tmp_path / "absent.yaml")
        assert config.config == ConfigModel()
        assert config.ordering_path is None

    def test_relative_ordering_path(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config(ConfigModel(ordering_path="ordering.yaml"), path)
        assert Config(path).ordering_path == tmp_path / "ordering.yaml"


class TestOrderingFiles:
    def test_save_and_load(self, tmp_path):
        path = tmp_path / "ordering.yaml"
        config = default_configuration()
        save_ordering(config, path)

        text = path.read_text(encoding="utf-8")
        assert "dataPath: quality.score" in text
        assert "Prioridade" in text
        assert load_ordering(path) == config

    def test_json_is_accepted(self, tmp_path):
        path = tmp_path / "ordering.json"
        path.write_text(
            json.dumps(
                {
                    "id": "j",
                    "criteria": [
                        {"id": "u", "type": "boolean", "weight": 100, "dataPath": "urgent"}
                    ],
                }
            )
        )
        assert load_ordering(path).criteria[0].type == "boolean"

    def test_invalid_ordering(self, tmp_path):
        path = tmp_path / "ordering.yaml"
        path.write_text("id: x\ncriteria:\n  - id: a\n    type: colour\n")
        with pytest.raises(ValueError):
            load_ordering(path)

    def test_ordering_must_be_mapping(self, tmp_path):
        path = tmp_path / "ordering.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_ordering(path)


class TestEntityFiles:
    def test_list(self, tmp_path):
        path = tmp_path / "samples.json"
        path.write_text(json.dumps([{"code": "A1"}, {"code": "B2"}]))
        assert load_entities(path) == [{"code": "A1"}, {"code": "B2"}]

    def test_wrapped_list(self, tmp_path):
        path = tmp_path / "samples.yaml"
        path.write_text("entities:\n  - code: A1\n")
        assert load_entities(path) == [{"code": "A1"}]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "samples.yaml"
        path.write_text("")
        assert load_entities(path) == []

    def test_scalar_is_rejected(self, tmp_path):
        path = tmp_path / "samples.yaml"
        path.write_text("42\n")
        with pytest.raises(ValueError):
            load_entities(path)
