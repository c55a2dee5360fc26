"""Random-walk text generation over a validated chain.

Each walk starts at the chain's start node and repeatedly draws a uniform
value r in [0, 1), picking the first link (in target-id order) whose
cumulative weight reaches r. The walk ends when the chosen target is the
end sentinel; the texts of all visited nodes, concatenated, form one
generated string.

Walkers never modify the chain, so any number of walkers can share one
chain as long as each owns its randomness source.
"""

import logging
from collections.abc import Iterator
from typing import Protocol

from src.chain.types import Chain
from src.walk.types import Walk

log = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything producing uniform floats in [0, 1).

    Satisfied by numpy.random.Generator and random.Random.
    """

    def random(self) -> float: ...


def choose_transition(links: tuple[tuple[str, float], ...], r: float) -> str:
    """Select a link target by cumulative weight.

    Args:
        links: (target, weight) pairs in a stable order.
        r: Uniform draw in [0, 1).

    Returns:
        The first target whose cumulative weight is >= r. Zero-weight links
        are never selected. If rounding leaves r above the final cumulative
        sum, the last positive-weight target is returned.

    Raises:
        ValueError: If no link has positive weight.
    """
    cumulative = 0.0
    last = None
    for target, weight in links:
        if weight <= 0.0:
            continue
        cumulative += weight
        last = target
        if cumulative >= r:
            return target

    if last is None:
        raise ValueError("no link with positive weight")
    return last


class ChainWalker:
    """Infinite iterator of generated strings, one full walk per element.

    Holds a reference to a validated chain plus its own randomness source
    and cursor. Walks always restart at the chain's start node; successive
    walks continue the same randomness stream. A walk has no step limit, so
    chains with trapped nodes can make next() run forever.
    """

    def __init__(self, chain: Chain, rng: RandomSource) -> None:
        self.chain = chain
        self.rng = rng
        self.current = chain.start
        # Stable link order per node, computed once
        self._links = {
            node_id: node.ordered_links() for node_id, node in chain.nodes.items()
        }

    def step(self) -> str | None:
        """Advance the cursor by one transition.

        Returns:
            The id of the node moved to, or None if the end sentinel was
            chosen (the cursor is then reset to the start node).
        """
        r = float(self.rng.random())
        target = choose_transition(self._links[self.current], r)
        if self.chain.is_terminal(target):
            self.current = self.chain.start
            return None
        self.current = target
        return target

    def walk(self) -> Walk:
        """Run one full walk from the start node to the end sentinel."""
        self.current = self.chain.start
        parts = [self.chain.start_node.text]
        path = [self.current]

        while True:
            node_id = self.step()
            if node_id is None:
                break
            parts.append(self.chain.node(node_id).text)
            path.append(node_id)

        log.debug("Walk finished after %d transitions", len(path))
        return Walk(text="".join(parts), path=tuple(path))

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.walk().text


def generate_texts(chain: Chain, count: int, rng: RandomSource) -> list[str]:
    """Generate a fixed number of strings from a validated chain.

    Args:
        chain: Validated chain.
        count: Number of walks to run.
        rng: Randomness source, consumed in order across walks.

    Returns:
        List of `count` generated strings.
    """
    walker = ChainWalker(chain, rng)
    texts = [next(walker) for _ in range(count)]
    log.info("Generated %d strings", len(texts))
    return texts
