"""Walk generation module: types and random-walk text generation."""

from src.walk.generator import (
    ChainWalker,
    RandomSource,
    choose_transition,
    generate_texts,
)
from src.walk.types import Walk

__all__ = [
    "ChainWalker",
    "RandomSource",
    "Walk",
    "choose_transition",
    "generate_texts",
]
