"""Run configuration: frozen dataclass, defaults, and JSON serialization."""

from src.config.defaults import DEFAULT_CONFIG
from src.config.settings import RunConfig
from src.config.serialization import config_from_json, config_to_json

__all__ = [
    "RunConfig",
    "DEFAULT_CONFIG",
    "config_to_json",
    "config_from_json",
]
