"""
Tick Pong game entities: walls, paddles, ball and the match holding them
"""

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np

from tick_pong.utils.config import GameConfig


class EntityKind(Enum):
    """Tag attached to every entity record"""

    PLAYER = "player"
    OPPONENT = "opponent"
    BALL = "ball"
    WALL = "wall"


@dataclass
class Vector2D:
    """Simple 2D vector for positions, sizes and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)


@dataclass(frozen=True)
class Wall:
    """Static wall, only ever a collision target"""

    position: Vector2D
    size: Vector2D
    kind: EntityKind = field(default=EntityKind.WALL, init=False)


@dataclass
class Paddle:
    """Paddle moving along its fixed column"""

    kind: EntityKind
    position: Vector2D
    size: Vector2D
    velocity: Vector2D = field(default_factory=lambda: Vector2D(0.0, 0.0))

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y


@dataclass
class Ball:
    """Game ball"""

    position: Vector2D
    size: Vector2D
    velocity: Vector2D
    kind: EntityKind = field(default=EntityKind.BALL, init=False)

    def reset_to_center(self) -> None:
        """Moves the ball back to the origin, keeping its velocity"""
        self.position = Vector2D(0.0, 0.0)


@dataclass
class Match:
    """
    Complete simulation state: the fixed population of five entities.

    Every field is optional so that partial setups can be represented;
    tick stages skip whatever entity they need and cannot find.
    """

    player: Paddle | None = None
    opponent: Paddle | None = None
    ball: Ball | None = None
    top_wall: Wall | None = None
    bottom_wall: Wall | None = None

    @classmethod
    def create(cls, config: GameConfig) -> "Match":
        """Builds the two walls, the two paddles and the ball of a new match"""
        paddle_size = Vector2D(config.PADDLE_WIDTH, config.PADDLE_HEIGHT)
        wall_size = Vector2D(config.LEVEL_WIDTH, config.WALL_HEIGHT)
        vx, vy = config.BALL_INITIAL_VELOCITY

        return cls(
            player=Paddle(EntityKind.PLAYER, Vector2D(config.PADDLE_X, 0.0), paddle_size),
            opponent=Paddle(
                EntityKind.OPPONENT, Vector2D(-config.PADDLE_X, 0.0), paddle_size.copy()
            ),
            ball=Ball(
                Vector2D(0.0, 0.0),
                Vector2D(config.BALL_SIZE, config.BALL_SIZE),
                Vector2D(vx, vy),
            ),
            top_wall=Wall(Vector2D(0.0, config.WALL_Y), wall_size),
            bottom_wall=Wall(Vector2D(0.0, -config.WALL_Y), wall_size.copy()),
        )

    def paddles(self) -> list[Paddle]:
        """Returns the paddles currently present"""
        return [p for p in (self.player, self.opponent) if p is not None]

    def entities(self) -> Iterator[tuple[EntityKind, Paddle | Ball | Wall]]:
        """Yields (kind, entity) for every present entity"""
        for entity in (self.top_wall, self.bottom_wall, self.player, self.opponent, self.ball):
            if entity is not None:
                yield entity.kind, entity
