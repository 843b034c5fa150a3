"""
Opponent paddle policies for Tick Pong
"""

from typing import Protocol

from tick_pong.core.entities import Ball
from tick_pong.core.entities import Paddle
from tick_pong.utils.config import GameConfig


class OpponentPolicy(Protocol):
    """Decides the opponent paddle vertical velocity"""

    def decide(self, ball_y: float, paddle_y: float) -> float: ...


class ReactiveOpponent:
    """
    Baseline opponent: moves down when the ball is level with or below the
    paddle, up otherwise. No prediction and no smoothing.
    """

    def __init__(self, speed: float = 1.0):
        self.speed = speed

    def decide(self, ball_y: float, paddle_y: float) -> float:
        if ball_y <= paddle_y:
            return -self.speed
        return self.speed


class DeadZoneOpponent:
    """Follows the ball but holds still while it is within a band around the paddle"""

    def __init__(self, speed: float = 1.0, dead_zone: float = 5.0):
        self.speed = speed
        self.dead_zone = dead_zone

    def decide(self, ball_y: float, paddle_y: float) -> float:
        offset = ball_y - paddle_y
        if abs(offset) <= self.dead_zone:
            return 0.0
        return self.speed if offset > 0 else -self.speed


def make_opponent_policy(config: GameConfig) -> OpponentPolicy:
    """Builds the opponent policy selected in the configuration"""
    if config.OPPONENT_POLICY == "dead_zone":
        return DeadZoneOpponent(config.OPPONENT_SPEED, config.OPPONENT_DEAD_ZONE)
    return ReactiveOpponent(config.OPPONENT_SPEED)


def update_opponent(opponent: Paddle | None, ball: Ball | None, policy: OpponentPolicy) -> None:
    """Sets the opponent paddle velocity from the ball's vertical position"""
    if opponent is None or ball is None:
        return

    opponent.velocity.x = 0.0
    opponent.velocity.y = policy.decide(ball.position.y, opponent.y)
