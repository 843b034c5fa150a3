"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any, Protocol


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    A renderer reads the snapshot produced after each tick and never
    mutates simulation state.
    """

    def render_frame(self, state: dict[str, Any]) -> None:
        """
        Render a single frame of the game.

        Args:
            state: Snapshot from PhysicsBackend.get_game_state(), with
                   position, size and color of every entity
        """
        ...
