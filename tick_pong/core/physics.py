"""
Fixed-step physics system for Tick Pong

One call to PhysicsEngine.step is one tick. The stages run strictly in
this order: player input, opponent policy, motion integration, paddle
boundary correction, ball interactions.
"""

import logging
from typing import Any

from tick_pong.core.collision import aabb_overlap
from tick_pong.core.controls import InputState
from tick_pong.core.controls import apply_player_input
from tick_pong.core.entities import Ball
from tick_pong.core.entities import Match
from tick_pong.core.entities import Paddle
from tick_pong.core.entities import Vector2D
from tick_pong.core.entities import Wall
from tick_pong.core.opponent import OpponentPolicy
from tick_pong.core.opponent import make_opponent_policy
from tick_pong.core.opponent import update_opponent
from tick_pong.utils.config import GameConfig
from tick_pong.utils.config import game_config

logger = logging.getLogger(__name__)

DEFAULT_BALL_DIRECTION = (1.0, 0.0)


def new_events() -> dict[str, list]:
    """Returns an empty event record for one tick"""
    return {"paddle_hits": [], "round_resets": [], "wall_bounces": []}


def integrate_motion(match: Match) -> None:
    """Advances every moving entity by its velocity"""
    for entity in (match.player, match.opponent, match.ball):
        if entity is not None:
            entity.position += entity.velocity


def enforce_paddle_bounds(
    paddles: list[Paddle],
    top_wall: Wall | None,
    bottom_wall: Wall | None,
    max_y: float,
) -> None:
    """Clamps paddles touching a wall back to the allowed vertical range"""
    for paddle in paddles:
        if bottom_wall is not None and aabb_overlap(
            paddle.position, paddle.size, bottom_wall.position, bottom_wall.size
        ):
            paddle.position.y = -max_y
        if top_wall is not None and aabb_overlap(
            paddle.position, paddle.size, top_wall.position, top_wall.size
        ):
            paddle.position.y = max_y


def _reflect_off_paddle(ball: Ball, paddle: Paddle, nudge: float) -> None:
    """Horizontal bounce, with the paddle motion nudging the vertical speed"""
    ball.velocity.x *= -1
    if paddle.velocity.y > 0:
        ball.velocity.y += nudge
    elif paddle.velocity.y < 0:
        ball.velocity.y -= nudge


def _renormalize(velocity: Vector2D) -> Vector2D:
    """Unit vector in the same direction, or the default direction for a zero vector"""
    if velocity.magnitude() == 0:
        logger.warning(
            "Ball velocity degenerated to zero, serving along %s", DEFAULT_BALL_DIRECTION
        )
        return Vector2D(*DEFAULT_BALL_DIRECTION)
    return velocity.normalize()


def resolve_ball_interactions(
    ball: Ball | None,
    player: Paddle | None,
    opponent: Paddle | None,
    config: GameConfig,
) -> dict[str, list]:
    """
    Applies paddle reflections, round resets and wall bounces to the ball.

    All four checks run every tick, in order, and several may fire in the
    same tick. Only player hits speed the ball up.
    """
    events = new_events()
    if ball is None:
        return events

    if player is not None and aabb_overlap(player.position, player.size, ball.position, ball.size):
        _reflect_off_paddle(ball, player, config.PADDLE_NUDGE)
        ball.velocity *= config.BALL_SPEED_INCREASE
        ball.position.x = player.x - player.size.x
        events["paddle_hits"].append({"paddle": player.kind.value})
        logger.debug("Player hit, ball velocity now %s", ball.velocity.to_tuple())

    if opponent is not None and aabb_overlap(
        opponent.position, opponent.size, ball.position, ball.size
    ):
        _reflect_off_paddle(ball, opponent, config.PADDLE_NUDGE)
        ball.position.x = opponent.x + opponent.size.x
        events["paddle_hits"].append({"paddle": opponent.kind.value})
        logger.debug("Opponent hit, ball velocity now %s", ball.velocity.to_tuple())

    if abs(ball.position.x) > config.BOUNDARY_X:
        side = "right" if ball.position.x > 0 else "left"
        ball.reset_to_center()
        ball.velocity = _renormalize(ball.velocity)
        events["round_resets"].append({"side": side})
        logger.debug("Ball left the field on the %s, round reset", side)

    if abs(ball.position.y) > config.BOUNDARY_Y:
        ball.velocity.y *= -1
        if ball.position.y > config.BOUNDARY_Y:
            ball.position.y = config.BOUNDARY_Y
            events["wall_bounces"].append("top")
        else:
            ball.position.y = -config.BOUNDARY_Y
            events["wall_bounces"].append("bottom")

    return events


class PhysicsEngine:
    """Main physics engine owning one match"""

    def __init__(
        self, config: GameConfig | None = None, opponent_policy: OpponentPolicy | None = None
    ):
        self.config = config if config is not None else game_config
        self.opponent_policy = (
            opponent_policy if opponent_policy is not None else make_opponent_policy(self.config)
        )
        self.match = Match.create(self.config)
        self.tick_count = 0

    def reset_match(self) -> None:
        """Rebuilds the five entities and restarts the tick counter"""
        self.match = Match.create(self.config)
        self.tick_count = 0

    def step(self, input_state: InputState) -> dict[str, list]:
        """Runs one tick of the pipeline and returns its events"""
        match = self.match

        apply_player_input(match.player, input_state, self.config.PLAYER_SPEED)
        update_opponent(match.opponent, match.ball, self.opponent_policy)
        integrate_motion(match)
        enforce_paddle_bounds(
            match.paddles(), match.top_wall, match.bottom_wall, self.config.PADDLE_MAX_Y
        )
        events = resolve_ball_interactions(match.ball, match.player, match.opponent, self.config)

        self.tick_count += 1
        return events

    def get_game_state(self) -> dict[str, Any]:
        """Returns a read-only snapshot of every entity for the renderer"""
        colors = {
            "player": self.config.PADDLE_COLOR,
            "opponent": self.config.PADDLE_COLOR,
            "ball": self.config.BALL_COLOR,
            "wall": self.config.WALL_COLOR,
        }
        entities = []
        for kind, entity in self.match.entities():
            record: dict[str, Any] = {
                "kind": kind.value,
                "position": entity.position.to_tuple(),
                "size": entity.size.to_tuple(),
                "color": colors[kind.value],
            }
            if not isinstance(entity, Wall):
                record["velocity"] = entity.velocity.to_tuple()
            entities.append(record)

        return {
            "entities": entities,
            "tick_count": self.tick_count,
            "field_bounds": (
                -self.config.BOUNDARY_X,
                self.config.BOUNDARY_X,
                -self.config.BOUNDARY_Y,
                self.config.BOUNDARY_Y,
            ),
        }
