"""Chain data structures: text-bearing nodes and weighted links between them."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Node:
    """A single state of the chain.

    Emits `text` when visited and carries a probability distribution over
    outgoing transitions in `links` (target id -> weight). A target may be
    another node's id or the chain's terminal sentinel.
    """

    text: str
    links: dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze links behind a read-only view (uses object.__setattr__ since frozen)."""
        object.__setattr__(self, "links", MappingProxyType(dict(self.links)))

    def ordered_links(self) -> tuple[tuple[str, float], ...]:
        """Links sorted by target id, the enumeration used for transition selection."""
        return tuple(sorted(self.links.items()))

    def total_weight(self) -> float:
        """Sum of outgoing weights, accumulated in stable link order."""
        total = 0.0
        for _, weight in self.ordered_links():
            total += weight
        return total


@dataclass(frozen=True, slots=True)
class Chain:
    """Immutable probabilistic state graph.

    `end` is a sentinel id: it may appear as a link target but must never be
    a key of `nodes`. Construction does not check this or any other
    invariant; run the chain through `validate_chain` before walking it.
    """

    nodes: dict[str, Node]
    start: str
    end: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", MappingProxyType(dict(self.nodes)))

    def node(self, node_id: str) -> Node:
        """Look up a node by id (KeyError if undefined)."""
        return self.nodes[node_id]

    @property
    def start_node(self) -> Node:
        return self.nodes[self.start]

    def is_terminal(self, node_id: str) -> bool:
        return node_id == self.end

    def node_ids(self) -> list[str]:
        """Node ids in sorted order."""
        return sorted(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
