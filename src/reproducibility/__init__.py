"""Reproducibility infrastructure: seeded randomness sources."""

from src.reproducibility.seed import make_rng, spawn_rngs, verify_seed_determinism

__all__ = [
    "make_rng",
    "spawn_rngs",
    "verify_seed_determinism",
]
