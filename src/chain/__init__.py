"""Chain module: data model, validation, and JSON loading."""

from src.chain.loader import (
    LoadError,
    chain_from_dict,
    chain_from_json,
    chain_to_dict,
    chain_to_json,
    load_chain,
)
from src.chain.types import Chain, Node
from src.chain.validation import (
    DEFAULT_EPSILON,
    ChainError,
    DanglingLink,
    MissingStartNode,
    NegativeWeight,
    NonFiniteWeight,
    TerminalNodeDefined,
    UnreachableEnd,
    ValidationError,
    Violation,
    WeightsNotNormalized,
    find_trapped_nodes,
    find_violation,
    validate_chain,
)

__all__ = [
    "Chain",
    "ChainError",
    "DEFAULT_EPSILON",
    "DanglingLink",
    "LoadError",
    "MissingStartNode",
    "NegativeWeight",
    "Node",
    "NonFiniteWeight",
    "TerminalNodeDefined",
    "UnreachableEnd",
    "ValidationError",
    "Violation",
    "WeightsNotNormalized",
    "chain_from_dict",
    "chain_from_json",
    "chain_to_dict",
    "chain_to_json",
    "find_trapped_nodes",
    "find_violation",
    "load_chain",
    "validate_chain",
]
