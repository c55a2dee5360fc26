#!/usr/bin/env python3
"""Entry point for generating text from a chain model.

Loads a JSON chain, validates it, and prints one generated string per line.
Failure to load or validate the model is fatal (exit status 1).

Usage:
    python run_generator.py --model chain.json
    python run_generator.py --model chain.json --count 5 --seed 42
    python run_generator.py --config run.json --verbose
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dacite import DaciteError

from src.chain import ChainError, load_chain
from src.config import DEFAULT_CONFIG, RunConfig, config_from_json
from src.reproducibility import make_rng
from src.walk import generate_texts

log = logging.getLogger(__name__)


def run(config: RunConfig) -> list[str]:
    """Load the configured model and generate config.count strings.

    Raises:
        LoadError: If the model cannot be read or decoded.
        ValidationError: If the model violates an invariant.
    """
    chain = load_chain(
        config.model_path,
        epsilon=config.epsilon,
        require_absorption=config.require_absorption,
    )
    log.info(
        "Generating %d strings (seed=%s, start=%r, end=%r)",
        config.count,
        config.seed,
        chain.start,
        chain.end,
    )
    return generate_texts(chain, config.count, make_rng(config.seed))


def build_config(args: argparse.Namespace) -> RunConfig:
    """Merge an optional config file with command-line overrides."""
    config = DEFAULT_CONFIG
    if args.config is not None:
        config = config_from_json(Path(args.config).read_text())

    overrides = {}
    if args.model is not None:
        overrides["model_path"] = args.model
    if args.count is not None:
        overrides["count"] = args.count
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.require_absorption:
        overrides["require_absorption"] = True
    return replace(config, **overrides)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate text by random walks over a chain model"
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Path to chain JSON file (default: chain.json)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to run config JSON file",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of strings to generate",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output",
    )
    parser.add_argument(
        "--require-absorption",
        action="store_true",
        help="Reject models where a walk can get trapped away from the end",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    # Logs go to stderr; stdout carries only generated text
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = build_config(args)
    except (DaciteError, OSError, ValueError) as e:
        print(f"Error: invalid config: {e}", file=sys.stderr)
        return 1

    try:
        texts = run(config)
    except ChainError:
        log.exception("Failed to load model %s", config.model_path)
        return 1

    for text in texts:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
