"""Structural and numeric validation for chains.

A chain is usable for walking only when all of the following hold:
1. The start id is a defined node.
2. The end id is NOT a defined node (it is a sentinel).
3. Every link target is the end sentinel or a defined node.
4. Every node's link weights sum to 1.0, within a floating-point tolerance.

Negative and non-finite weights are rejected alongside the dangling-link
check. Chains whose walks can get trapped away from the end sentinel are
permitted unless the caller asks for the absorption check.
"""

import logging
import math
from dataclasses import dataclass

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import breadth_first_order

from src.chain.types import Chain

log = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-6


class ChainError(Exception):
    """Base class for chain loading and validation failures."""


@dataclass(frozen=True, slots=True)
class MissingStartNode:
    """The start id is not a defined node."""

    start: str

    def describe(self) -> str:
        return f"start node {self.start!r} not found"


@dataclass(frozen=True, slots=True)
class TerminalNodeDefined:
    """The end sentinel id is also defined as a node."""

    end: str

    def describe(self) -> str:
        return f"end sentinel {self.end!r} is defined as a node"


@dataclass(frozen=True, slots=True)
class DanglingLink:
    """A link targets an id that is neither a node nor the end sentinel."""

    node: str
    target: str

    def describe(self) -> str:
        return f"link {self.target!r} in node {self.node!r} has no definition"


@dataclass(frozen=True, slots=True)
class NegativeWeight:
    """A link weight is below zero."""

    node: str
    target: str
    weight: float

    def describe(self) -> str:
        return (
            f"link {self.target!r} in node {self.node!r} has negative "
            f"weight {self.weight}"
        )


@dataclass(frozen=True, slots=True)
class NonFiniteWeight:
    """A link weight is NaN or infinite."""

    node: str
    target: str
    weight: float

    def describe(self) -> str:
        return (
            f"link {self.target!r} in node {self.node!r} has non-finite "
            f"weight {self.weight}"
        )


@dataclass(frozen=True, slots=True)
class WeightsNotNormalized:
    """A node's link weights do not sum to 1 within tolerance."""

    node: str
    total: float

    def describe(self) -> str:
        return f"links in node {self.node!r} sum to {self.total}, not 1"


@dataclass(frozen=True, slots=True)
class UnreachableEnd:
    """A node reachable from start can never reach the end sentinel."""

    node: str

    def describe(self) -> str:
        return (
            f"node {self.node!r} is reachable from start but cannot reach "
            f"the end sentinel"
        )


Violation = (
    MissingStartNode
    | TerminalNodeDefined
    | DanglingLink
    | NegativeWeight
    | NonFiniteWeight
    | WeightsNotNormalized
    | UnreachableEnd
)


class ValidationError(ChainError):
    """Raised when a chain breaks one of its invariants."""

    def __init__(self, violation: Violation) -> None:
        super().__init__(violation.describe())
        self.violation = violation


def find_trapped_nodes(chain: Chain) -> list[str]:
    """Find nodes reachable from start from which the end sentinel is unreachable.

    Builds a sparse directed transition matrix over positive-weight links,
    with one extra vertex standing for the end sentinel, then runs two
    breadth-first searches: forward from start and backward (on the
    transpose) from the sentinel. Assumes the structural invariants
    (defined start, no dangling links) already hold.

    Args:
        chain: Chain whose start node and link targets are all defined.

    Returns:
        Sorted list of trapped node ids (empty if every walk can terminate).
    """
    ids = chain.node_ids()
    index = {node_id: i for i, node_id in enumerate(ids)}
    end_idx = len(ids)
    n = len(ids) + 1

    rows: list[int] = []
    cols: list[int] = []
    for node_id in ids:
        for target, weight in chain.node(node_id).ordered_links():
            if weight <= 0.0:
                continue
            rows.append(index[node_id])
            cols.append(end_idx if chain.is_terminal(target) else index[target])

    adj = scipy.sparse.csr_matrix(
        (
            np.ones(len(rows)),
            (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64)),
        ),
        shape=(n, n),
    )

    forward = breadth_first_order(
        adj, index[chain.start], directed=True, return_predecessors=False
    )
    backward = breadth_first_order(
        adj.T.tocsr(), end_idx, directed=True, return_predecessors=False
    )

    trapped = set(forward.tolist()) - set(backward.tolist()) - {end_idx}
    return sorted(ids[i] for i in trapped)


def find_violation(
    chain: Chain,
    epsilon: float = DEFAULT_EPSILON,
    require_absorption: bool = False,
) -> Violation | None:
    """Check a chain's invariants and return the first violation found.

    Check order is deterministic: start node, end sentinel, then a single
    pass over nodes (sorted by id) checking each node's links and its weight
    sum together, then optionally absorption.

    Args:
        chain: Candidate chain.
        epsilon: Tolerance for the per-node weight sum.
        require_absorption: Also reject chains where some node reachable
            from start can never reach the end sentinel.

    Returns:
        The first violation, or None if the chain is valid.
    """
    if chain.start not in chain:
        return MissingStartNode(chain.start)

    if chain.end in chain:
        return TerminalNodeDefined(chain.end)

    for node_id in chain.node_ids():
        node = chain.node(node_id)
        for target, weight in node.ordered_links():
            if not math.isfinite(weight):
                return NonFiniteWeight(node_id, target, weight)
            if weight < 0.0:
                return NegativeWeight(node_id, target, weight)
            if not chain.is_terminal(target) and target not in chain:
                return DanglingLink(node_id, target)

        total = node.total_weight()
        if not abs(total - 1.0) <= epsilon:
            return WeightsNotNormalized(node_id, total)

    if require_absorption:
        trapped = find_trapped_nodes(chain)
        if trapped:
            return UnreachableEnd(trapped[0])

    return None


def validate_chain(
    chain: Chain,
    epsilon: float = DEFAULT_EPSILON,
    require_absorption: bool = False,
) -> Chain:
    """Validate a chain, raising on the first violation.

    Args:
        chain: Candidate chain.
        epsilon: Tolerance for the per-node weight sum.
        require_absorption: Reject chains with trapped nodes.

    Returns:
        The same chain, for chaining calls.

    Raises:
        ValidationError: If any invariant is violated.
    """
    violation = find_violation(chain, epsilon, require_absorption)
    if violation is not None:
        raise ValidationError(violation)

    if not require_absorption:
        trapped = find_trapped_nodes(chain)
        if trapped:
            log.warning(
                "Chain accepted, but %d node(s) cannot reach end %r: %s",
                len(trapped),
                chain.end,
                ", ".join(trapped),
            )

    log.debug(
        "Chain valid: %d nodes, start=%r, end=%r",
        len(chain),
        chain.start,
        chain.end,
    )
    return chain
