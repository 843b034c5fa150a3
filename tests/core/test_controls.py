"""
Unit tests for player input mapping
"""

import pygame
import pytest

from tick_pong.core.controls import NEUTRAL_INPUT, InputState, ScriptedInput, apply_player_input
from tick_pong.core.entities import EntityKind, Paddle, Vector2D
from tick_pong.utils.config import KEYBOARD_LAYOUTS


def make_player() -> Paddle:
    return Paddle(EntityKind.PLAYER, Vector2D(150.0, 0.0), Vector2D(10.0, 50.0))


class TestApplyPlayerInput:
    """Test the velocity written for each input combination"""

    @pytest.mark.parametrize(
        "up,down,expected_vy",
        [
            (False, False, 0.0),
            (True, False, 2.0),
            (False, True, -2.0),
            (True, True, 2.0),  # up is applied last and wins
        ],
    )
    def test_input_combinations(self, up, down, expected_vy):
        """Test vertical velocity for every input combination"""
        player = make_player()
        apply_player_input(player, InputState(up=up, down=down), speed=2.0)

        assert player.velocity.y == expected_vy
        assert player.velocity.x == 0.0

    def test_velocity_does_not_carry_over(self):
        """Test that releasing the keys stops the paddle on the next tick"""
        player = make_player()
        apply_player_input(player, InputState(up=True), speed=2.0)
        apply_player_input(player, NEUTRAL_INPUT, speed=2.0)

        assert player.velocity.to_tuple() == (0.0, 0.0)

    def test_horizontal_velocity_cleared(self):
        """Test that any stray horizontal velocity is reset"""
        player = make_player()
        player.velocity = Vector2D(3.0, 1.0)
        apply_player_input(player, InputState(down=True), speed=2.0)

        assert player.velocity.to_tuple() == (0.0, -2.0)

    def test_missing_player_is_noop(self):
        """Test that an absent player does not raise"""
        apply_player_input(None, InputState(up=True), speed=2.0)


class TestInputStateFromKeys:
    """Test translating raw key state through a layout"""

    def test_arrow_keys(self):
        """Test arrow layout mapping"""
        state = InputState.from_keys({pygame.K_UP: True}, KEYBOARD_LAYOUTS["arrows"])
        assert state == InputState(up=True, down=False)

    def test_azerty_uses_z(self):
        """Test that the AZERTY layout moves up with Z"""
        layout = KEYBOARD_LAYOUTS["azerty"]
        assert InputState.from_keys({pygame.K_z: True}, layout).up
        assert not InputState.from_keys({pygame.K_w: True}, layout).up

    def test_both_keys(self):
        """Test that both flags may be held at once"""
        keys = {pygame.K_w: True, pygame.K_s: True}
        assert InputState.from_keys(keys, KEYBOARD_LAYOUTS["qwerty"]) == InputState(True, True)

    def test_released_keys(self):
        """Test keys reported as not pressed"""
        keys = {pygame.K_UP: False, pygame.K_DOWN: False}
        assert InputState.from_keys(keys, KEYBOARD_LAYOUTS["arrows"]) == NEUTRAL_INPUT


class TestScriptedInput:
    """Test the replaying input source"""

    def test_replays_then_holds_last(self):
        """Test that the last state is held once the script runs out"""
        source = ScriptedInput([InputState(up=True), InputState(down=True)])

        assert source.poll() == InputState(up=True)
        assert source.poll() == InputState(down=True)
        assert source.poll() == InputState(down=True)

    def test_empty_script_is_neutral(self):
        """Test that an empty script never presses anything"""
        assert ScriptedInput([]).poll() == NEUTRAL_INPUT
