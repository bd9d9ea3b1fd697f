"""Configuration management for samplerank."""

from .loader import (
    Config,
    load_config,
    load_entities,
    load_ordering,
    load_ordering_data,
    save_config,
    save_ordering,
)
from .models import ConfigModel

__all__ = [
    "Config",
    "ConfigModel",
    "load_config",
    "load_entities",
    "load_ordering",
    "load_ordering_data",
    "save_config",
    "save_ordering",
]
