"""Command-line launcher for headless Grid Snake sessions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import replace

import numpy as np

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless Grid Snake simulation tools.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Simulate a session and print its state.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--duration-ms", type=_positive_int, default=3_000)
    run_p.add_argument("--frame-ms", type=_positive_int, default=50)
    run_p.add_argument(
        "--moves", type=str, default="",
        help=(
            "Comma-separated directions or key names (up, arrow_left, w, ...) "
            "applied one per movement tick."
        ),
    )
    run_p.add_argument(
        "--render", action="store_true",
        help="Print an ASCII board instead of JSON.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure movement-tick throughput.",
    )
    bench_p.add_argument("--ticks", type=_positive_int, default=10_000)
    bench_p.add_argument("--seed", type=int, default=0)

    return parser


def _parse_moves(raw: str) -> list:
    from grid_snake.controls import intent_from_keys

    moves = []
    for name in raw.split(","):
        if not name.strip():
            continue
        direction = intent_from_keys([name.strip()])
        if direction is None:
            raise ValueError(f"Unknown move: {name.strip()!r}.")
        moves.append(direction)
    return moves


def _run_session(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig
    from grid_snake.engine import GameEngine

    config = GameConfig.load(args.config) if args.config else GameConfig()
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    try:
        moves = _parse_moves(args.moves)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    engine = GameEngine(config)
    remaining = args.duration_ms
    while remaining > 0:
        frame = min(args.frame_ms, remaining)
        move_ticks, food_ticks = engine.schedule.advance(frame)
        # One scripted move per movement tick, however long the frame.
        for _ in range(move_ticks):
            if engine.tick < len(moves):
                engine.apply_input(moves[engine.tick])
            engine.step()
        for _ in range(food_ticks):
            engine.spawn_food()
        remaining -= frame

    if args.render:
        print(engine.render_text())  # noqa: T201
    else:
        print(json.dumps(engine.get_state(), indent=2))  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig
    from grid_snake.engine import GameEngine
    from grid_snake.snake import Direction

    engine = GameEngine(GameConfig(seed=args.seed))
    directions = list(Direction)
    turns = np.random.default_rng(args.seed).integers(0, len(directions), args.ticks)

    start = time.perf_counter()
    for i, turn in enumerate(turns):
        engine.apply_input(directions[turn])
        engine.step()
        if i % 7 == 0:
            engine.spawn_food()
    elapsed = time.perf_counter() - start

    rate = args.ticks / elapsed if elapsed > 0 else float("inf")
    print(  # noqa: T201
        f"Benchmark: {args.ticks} ticks in {elapsed:.3f}s "
        f"({rate:,.0f} ticks/s, {engine.resets} resets)"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_session,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
