"""CLI for running headless Grid Snake simulations."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.controls import Key
from grid_snake.world import World

logger = logging.getLogger(__name__)

_KEYS = list(Key)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake simulation tools.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless game with random key presses.",
    )
    sim_p.add_argument("--seconds", type=float, default=30.0)
    sim_p.add_argument("--dt", type=float, default=1 / 60)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument(
        "--press-chance", type=float, default=0.05,
        help="Probability of pressing a random key on each pass.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print the effective configuration.")
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Also write the configuration to this path.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig.load(args.config) if args.config else GameConfig()


def _run_simulate(args: argparse.Namespace) -> int:
    from grid_snake.controller import new_world
    from grid_snake.loop import GameLoop

    if not 0.0 <= args.press_chance <= 1.0:
        logger.error("--press-chance must be between 0 and 1.")
        return 2

    config = _load_config(args)
    rng = np.random.default_rng(args.seed)

    def seed_source() -> int:
        return int(rng.integers(0, 2**32))

    def random_keys(_world: World) -> list[Key]:
        if rng.random() < args.press_chance:
            return [_KEYS[int(rng.integers(0, len(_KEYS)))]]
        return []

    world = new_world(config, seed_source=seed_source)
    GameLoop(world).run(args.seconds, args.dt, inputs=random_keys)
    print(json.dumps(world.to_dict()))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if args.output:
        config.save(args.output)
    print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
