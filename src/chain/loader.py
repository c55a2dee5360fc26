"""Chain loading from JSON with typed decoding and validation.

The serialized model is a JSON object with three keys:

    {
      "nodes": {"<id>": {"text": "...", "links": {"<id-or-end>": 0.5}}},
      "start": "<id>",
      "end": "<id not present in nodes>"
    }

Decoding uses dacite with strict=True so unknown keys are rejected, and
an int->float hook so integral weights such as 1 are accepted (strings and
booleans are still rejected).
"""

import json
import logging
from pathlib import Path
from typing import Any

from dacite import Config as DaciteConfig
from dacite import DaciteError, from_dict

from src.chain.types import Chain
from src.chain.validation import DEFAULT_EPSILON, ChainError, validate_chain

log = logging.getLogger(__name__)


def _int_to_float(value: Any) -> Any:
    """Widen JSON ints to float; bools and strings are left to check_types."""
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


_DACITE_CONFIG = DaciteConfig(
    type_hooks={float: _int_to_float},
    check_types=True,
    strict=True,
)


class LoadError(ChainError):
    """Raised when a model cannot be read or decoded into a Chain."""


def chain_from_dict(data: dict[str, Any]) -> Chain:
    """Build a Chain from a decoded JSON object (no validation).

    Raises:
        LoadError: If the object does not have the model's shape or types.
    """
    try:
        return from_dict(data_class=Chain, data=data, config=_DACITE_CONFIG)
    except (DaciteError, TypeError, ValueError) as e:
        raise LoadError(f"malformed chain: {e}") from e


def chain_from_json(
    json_str: str,
    validate: bool = True,
    epsilon: float = DEFAULT_EPSILON,
    require_absorption: bool = False,
) -> Chain:
    """Decode a JSON string into a Chain and validate it.

    Args:
        json_str: Serialized model.
        validate: Run validate_chain on the decoded chain.
        epsilon: Weight-sum tolerance passed to the validator.
        require_absorption: Reject chains with trapped nodes.

    Returns:
        The decoded (and, by default, validated) chain.

    Raises:
        LoadError: If the text is not valid JSON or not a chain.
        ValidationError: If the chain violates an invariant.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise LoadError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(
            f"malformed chain: expected a JSON object, got {type(data).__name__}"
        )

    chain = chain_from_dict(data)
    if validate:
        validate_chain(chain, epsilon, require_absorption)
    return chain


def load_chain(
    path: str | Path,
    validate: bool = True,
    epsilon: float = DEFAULT_EPSILON,
    require_absorption: bool = False,
) -> Chain:
    """Read a model file and return its validated Chain.

    Raises:
        LoadError: If the file cannot be read or decoded.
        ValidationError: If the chain violates an invariant.
    """
    path = Path(path)
    try:
        json_str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read {path}: {e}") from e

    chain = chain_from_json(json_str, validate, epsilon, require_absorption)
    log.info("Chain loaded from %s: %d nodes", path, len(chain))
    return chain


def chain_to_dict(chain: Chain) -> dict[str, Any]:
    """Convert a Chain to plain dicts (read-only views are copied out)."""
    return {
        "nodes": {
            node_id: {"text": node.text, "links": dict(node.links)}
            for node_id, node in chain.nodes.items()
        },
        "start": chain.start,
        "end": chain.end,
    }


def chain_to_json(chain: Chain) -> str:
    """Serialize a Chain with sorted keys and 2-space indent."""
    return json.dumps(chain_to_dict(chain), indent=2, sort_keys=True)
