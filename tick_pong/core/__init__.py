"""
Core module of Tick Pong
"""

from tick_pong.core.controls import InputState
from tick_pong.core.entities import Ball
from tick_pong.core.entities import EntityKind
from tick_pong.core.entities import Match
from tick_pong.core.entities import Paddle
from tick_pong.core.entities import Vector2D
from tick_pong.core.entities import Wall
from tick_pong.core.physics import PhysicsEngine

__all__ = [
    "Ball",
    "EntityKind",
    "InputState",
    "Match",
    "Paddle",
    "PhysicsEngine",
    "Vector2D",
    "Wall",
]
