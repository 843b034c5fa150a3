"""
Player input mapping for Tick Pong
"""

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass

from tick_pong.core.entities import Paddle
from tick_pong.utils.config import KeyboardLayout


@dataclass(frozen=True)
class InputState:
    """Directional signals sampled once per tick"""

    up: bool = False
    down: bool = False

    @classmethod
    def from_keys(cls, keys_pressed: Mapping[int, bool], layout: KeyboardLayout) -> "InputState":
        """Builds the input state from the currently pressed keys"""
        return cls(
            up=bool(keys_pressed.get(layout.keys["up"], False)),
            down=bool(keys_pressed.get(layout.keys["down"], False)),
        )


NEUTRAL_INPUT = InputState()


def apply_player_input(player: Paddle | None, input_state: InputState, speed: float) -> None:
    """
    Sets the player paddle velocity from the input state.

    Velocity is cleared first so nothing carries over between ticks. When
    both directions are held, up wins since it is applied last.
    """
    if player is None:
        return

    player.velocity.x = 0.0
    player.velocity.y = 0.0
    if input_state.down:
        player.velocity.y = -speed
    if input_state.up:
        player.velocity.y = speed


class ScriptedInput:
    """Input source replaying a fixed sequence, then holding its last state"""

    def __init__(self, states: Iterable[InputState]):
        self.states = list(states)
        self.index = 0

    def poll(self) -> InputState:
        if not self.states:
            return NEUTRAL_INPUT
        state = self.states[min(self.index, len(self.states) - 1)]
        self.index += 1
        return state
