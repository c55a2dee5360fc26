"""Walk data structures for chain traversal."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Walk:
    """One full traversal from the start node until absorption at the end sentinel.

    `path` lists the visited node ids in order, starting with the start node.
    The end sentinel is never part of the path and contributes no text.
    """

    text: str
    path: tuple[str, ...]

    @property
    def n_transitions(self) -> int:
        """Number of transitions taken, including the final one into the sentinel."""
        return len(self.path)
