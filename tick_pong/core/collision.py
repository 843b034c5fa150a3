"""
Collision detection for Tick Pong

Rectangles are axis-aligned and described by their center and full size.
"""

from enum import Enum

from tick_pong.core.entities import Vector2D


class Collision(Enum):
    """Side of the first rectangle struck by the second one"""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


def collide(
    a_pos: Vector2D, a_size: Vector2D, b_pos: Vector2D, b_size: Vector2D
) -> Collision | None:
    """
    Detects an overlap between rectangle a and rectangle b.

    Returns None when the rectangles do not intersect on both axes, otherwise
    the side of a that b struck, resolved on the axis of least penetration.
    Touching edges do not count as an overlap.
    """
    dx = b_pos.x - a_pos.x
    dy = b_pos.y - a_pos.y
    half_w = (a_size.x + b_size.x) / 2
    half_h = (a_size.y + b_size.y) / 2

    if abs(dx) >= half_w or abs(dy) >= half_h:
        return None

    # b fully contained in a
    if abs(dx) + b_size.x / 2 <= a_size.x / 2 and abs(dy) + b_size.y / 2 <= a_size.y / 2:
        return Collision.INSIDE

    penetration_x = half_w - abs(dx)
    penetration_y = half_h - abs(dy)

    if penetration_x < penetration_y:
        return Collision.RIGHT if dx > 0 else Collision.LEFT
    return Collision.TOP if dy > 0 else Collision.BOTTOM


def aabb_overlap(a_pos: Vector2D, a_size: Vector2D, b_pos: Vector2D, b_size: Vector2D) -> bool:
    """Checks whether two rectangles overlap"""
    return collide(a_pos, a_size, b_pos, b_size) is not None
