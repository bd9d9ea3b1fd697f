"""Configuration loader and ordering file I/O."""

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import ValidationError

from ..ordering.criteria import OrderingConfiguration
from .models import ConfigModel

CONFIG_ENV = "SAMPLERANK_CONFIG"


def default_config_path() -> Path:
    """Settings path, honouring the SAMPLERANK_CONFIG environment variable."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "samplerank" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def ordering_path(self) -> Optional[Path]:
        """Default ordering file, relative paths resolved against the config directory."""
        if not self.config.ordering_path:
            return None
        path = Path(self.config.ordering_path).expanduser()
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path


def _read_yaml(path: Path, kind: str) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {kind.lower()} file: {e}")


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    config_data = _read_yaml(config_path, "Config")
    if config_data is None:
        config_data = {}

    try:
        return ConfigModel(**config_data)
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)


def load_ordering_data(ordering_path: Path) -> Any:
    """Load an ordering configuration file without building the model."""
    data = _read_yaml(ordering_path, "Ordering")
    if not isinstance(data, dict):
        raise ValueError(f"Ordering file must contain a mapping: {ordering_path}")
    return data


def load_ordering(ordering_path: Path) -> OrderingConfiguration:
    """Load an ordering configuration from a YAML or JSON file."""
    data = load_ordering_data(ordering_path)
    try:
        return OrderingConfiguration.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid ordering configuration: {e}")


def save_ordering(config: OrderingConfiguration, ordering_path: Path) -> None:
    """Save an ordering configuration as YAML with camelCase keys."""
    ordering_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
    with open(ordering_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def load_entities(entities_path: Path) -> List[Any]:
    """
    Load entities from a YAML or JSON file.

    The file holds either a list of records or a mapping with an
    ``entities`` list.
    """
    data = _read_yaml(entities_path, "Entities")
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("entities", [])
    if not isinstance(data, list):
        raise ValueError(f"Entities file must contain a list: {entities_path}")
    return data
