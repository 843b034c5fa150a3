"""
Physics backend protocol - defines interface for tick pipelines
"""

from typing import Any
from typing import Protocol

from tick_pong.core.controls import InputState
from tick_pong.core.entities import Match


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    One call to step() is exactly one simulation tick; the backend does no
    time accumulation of its own.
    """

    match: Match
    tick_count: int

    def reset_match(self) -> None:
        """
        Reset the match to its initial state.

        Rebuilds walls, paddles and ball, and zeroes the tick counter.
        """
        ...

    def step(self, input_state: InputState) -> dict[str, list]:
        """
        Advance the simulation by one tick.

        Args:
            input_state: Directional input sampled for this tick

        Returns:
            Dictionary with events that occurred:
            {
                "paddle_hits": [...],
                "round_resets": [...],
                "wall_bounces": [...]
            }
        """
        ...

    def get_game_state(self) -> dict[str, Any]:
        """
        Get a read-only snapshot for rendering.

        Returns:
            Dictionary with entities, tick count and field bounds
        """
        ...
