"""Run configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

from src.chain.validation import DEFAULT_EPSILON


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Parameters for one generation run.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    model_path: str = "chain.json"
    count: int = 11  # number of strings to print
    seed: int | None = None  # None draws fresh OS entropy
    epsilon: float = DEFAULT_EPSILON  # weight-sum tolerance
    require_absorption: bool = False  # reject chains with trapped nodes

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")
        if not self.model_path:
            raise ValueError("model_path must not be empty")
