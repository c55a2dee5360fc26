"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import Config as DaciteConfig
from dacite import from_dict

from src.config.settings import RunConfig


def _int_to_float(value: Any) -> Any:
    """Widen JSON ints to float; bools and strings are left to check_types."""
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


def config_to_json(config: RunConfig) -> str:
    """Serialize a RunConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RunConfig:
    """Deserialize a JSON string to a RunConfig.

    Uses dacite with strict=True to reject unknown keys and an int->float
    hook so "epsilon": 1 style values are accepted. Omitted keys keep their
    defaults.
    """
    data = json.loads(json_str)
    return from_dict(
        data_class=RunConfig,
        data=data,
        config=DaciteConfig(
            type_hooks={float: _int_to_float},
            check_types=True,
            strict=True,
        ),
    )
