"""
Input source protocol - defines interface for anything feeding the player paddle
"""

from typing import Protocol

from tick_pong.core.controls import InputState


class InputSource(Protocol):
    """
    Protocol for input sources (keyboard poller, scripted replay, etc.).

    The host samples the source exactly once per tick, before the player
    input stage runs. Sampling never blocks.
    """

    def poll(self) -> InputState:
        """
        Sample the current directional input.

        Returns:
            InputState with the up/down flags held at this instant
        """
        ...
