"""Default run configuration."""

from src.config.settings import RunConfig

# Prints 11 strings from chain.json with a fresh seed.
DEFAULT_CONFIG = RunConfig()
