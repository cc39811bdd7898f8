"""Entry point: ``python -m worms``.

Supports two modes:
  - ``python -m worms``            → Launch the FastAPI game server
  - ``python -m worms demo``       → Headless match between scripted worms
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based artillery worms")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI game server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--worms", type=int, default=4)
    srv.add_argument("--scripted", type=int, default=2, help="How many of the worms are computer-controlled")
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless demo ---
    demo = sub.add_parser("demo", help="Play scripted worms against each other")
    demo.add_argument("--seed", type=int, default=42)
    demo.add_argument("--worms", type=int, default=4)
    demo.add_argument("--turns", type=int, default=20)
    demo.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from worms.api.app import create_app
    from worms.config import GameConfig

    config = GameConfig(world_seed=args.seed, worm_count=args.worms, log_level=args.log_level)
    app = create_app(config, scripted=min(args.scripted, args.worms))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_demo(args: argparse.Namespace) -> None:
    from worms.config import GameConfig
    from worms.core.world import World
    from worms.systems.controller import CommandScript
    from worms.systems.rng import DeterministicRNG
    from worms.systems.spawner import WormSpawner
    from worms.systems.terrain_gen import generate_terrain
    from worms.utils.logging import setup_logging

    config = GameConfig(world_seed=args.seed, worm_count=args.worms, log_level=args.log_level)
    setup_logging(config.log_level)

    rng = DeterministicRNG(config.world_seed)
    world = World(generate_terrain(config, rng), config)
    spawner = WormSpawner(rng)
    scripts = (
        ["fall", "turn 0.4", "shoot 70", "move"],
        ["fall", "move", "move", "next_weapon", "shoot 40"],
        ["fall", "turn -0.2", "jump"],
    )
    for i in range(config.worm_count):
        spawner.spawn(world, controller=CommandScript(scripts[i % len(scripts)]))

    if not world.worms:
        logger.warning("No worms could be placed; nothing to play.")
        return

    world.start_game()
    played = world.run_controllers(args.turns)

    logger.info("Played %d turns", played)
    for worm in world.worms:
        logger.info("  %s", worm)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "demo":
        _run_demo(args)


if __name__ == "__main__":
    main()
