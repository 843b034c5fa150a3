#!/usr/bin/env python3
"""
Headless runner driving the Tick Pong pipeline for a fixed number of ticks
"""

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from tick_pong.core.controls import InputState
from tick_pong.core.controls import ScriptedInput
from tick_pong.core.interfaces import InputSource
from tick_pong.core.interfaces import PhysicsBackend
from tick_pong.core.interfaces import RendererProtocol
from tick_pong.core.physics import PhysicsEngine
from tick_pong.core.physics import new_events
from tick_pong.utils.config import GameConfig

logger = logging.getLogger(__name__)

HOLD_CHOICES = {
    "none": InputState(),
    "up": InputState(up=True),
    "down": InputState(down=True),
    "both": InputState(up=True, down=True),
}


def run_simulation(
    engine: PhysicsBackend,
    ticks: int,
    input_source: InputSource,
    renderer: RendererProtocol | None = None,
) -> dict[str, Any]:
    """
    Runs the engine for a number of ticks.

    Input is sampled once per tick before stepping, and the renderer (if
    any) receives the snapshot after each step.

    Returns:
        Summary with the number of ticks run, event counts and final state
    """
    event_counts = {name: 0 for name in new_events()}

    for _ in range(ticks):
        events = engine.step(input_source.poll())
        for name, occurred in events.items():
            event_counts[name] += len(occurred)
        if renderer is not None:
            renderer.render_frame(engine.get_game_state())

    logger.info("Ran %d ticks: %s", ticks, event_counts)
    return {
        "ticks": ticks,
        "events": event_counts,
        "final_state": engine.get_game_state(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a headless Tick Pong simulation")
    parser.add_argument("--ticks", type=int, default=600, help="Number of ticks to simulate")
    parser.add_argument(
        "--hold",
        type=str,
        default="none",
        choices=list(HOLD_CHOICES),
        help="Player input held for the whole run",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument(
        "--opponent",
        type=str,
        default=None,
        choices=["reactive", "dead_zone"],
        help="Opponent policy (overrides the configuration)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.load_from_file(args.config) if args.config else GameConfig()
        if args.opponent is not None:
            config.OPPONENT_POLICY = args.opponent
    except (OSError, TypeError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.ticks < 0:
        logger.error("--ticks must not be negative")
        return 2

    engine = PhysicsEngine(config)
    summary = run_simulation(engine, args.ticks, ScriptedInput([HOLD_CHOICES[args.hold]]))
    print(json.dumps(summary, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
