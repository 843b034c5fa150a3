"""
Tick Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyboardLayout:
    """Keys driving the player paddle"""

    name: str
    keys: dict[str, int]
    display_names: dict[str, str]


# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "arrows": KeyboardLayout(
        name="Arrows",
        keys={"up": pygame.K_UP, "down": pygame.K_DOWN},
        display_names={"up": "↑", "down": "↓"},
    ),
    "qwerty": KeyboardLayout(
        name="QWERTY",
        keys={"up": pygame.K_w, "down": pygame.K_s},
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        keys={"up": pygame.K_w, "down": pygame.K_s},
        display_names={"up": "W", "down": "S"},
    ),
}

OPPONENT_POLICIES = ("reactive", "dead_zone")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Playfield dimensions (world units, origin at the center)
    LEVEL_WIDTH: float = Field(default=300.0, gt=0, description="Playfield width")
    LEVEL_HEIGHT: float = Field(default=100.0, gt=0, description="Playfield half height")
    WALL_HEIGHT: float = Field(default=10.0, gt=0, description="Wall thickness")
    BOUNDARY_MARGIN: float = Field(default=5.0, ge=0, description="Out-of-play margin")

    # Paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=50.0, gt=0, description="Paddle height")
    PLAYER_SPEED: float = Field(default=2.0, gt=0, description="Player paddle speed per tick")
    OPPONENT_SPEED: float = Field(default=1.0, gt=0, description="Opponent paddle speed per tick")
    OPPONENT_POLICY: str = Field(default="reactive", description="Opponent policy name")
    OPPONENT_DEAD_ZONE: float = Field(default=5.0, ge=0, description="Dead zone policy band")

    # Ball physics
    BALL_SIZE: float = Field(default=10.0, gt=0, description="Ball side length")
    BALL_INITIAL_VELOCITY: tuple[float, float] = Field(
        default=(1.0, 1.0), description="Ball velocity at match start"
    )
    PADDLE_NUDGE: float = Field(default=0.05, ge=0, description="Ball vy nudge on paddle hit")
    BALL_SPEED_INCREASE: float = Field(
        default=1.05, gt=0, description="Speed-up factor on player hits"
    )

    # Controls
    KEYBOARD_LAYOUT: str = Field(default="arrows", description="Keyboard layout name")

    # Display (read by the host, never by the simulation)
    TICK_RATE: int = Field(default=60, gt=0, description="Ticks per second")
    WINDOW_WIDTH: int = Field(default=500, gt=0, description="Window width in pixels")
    WINDOW_HEIGHT: int = Field(default=300, gt=0, description="Window height in pixels")
    WINDOW_TITLE: str = Field(default="My Pong!", description="Window title")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(179, 179, 179), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(179, 0, 179), description="RGB color")
    WALL_COLOR: tuple[int, int, int] = Field(default=(77, 77, 77), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("OPPONENT_POLICY")
    @classmethod
    def validate_opponent_policy(cls, v: str) -> str:
        """Validate opponent policy exists"""
        if v not in OPPONENT_POLICIES:
            raise ValueError(f"Unknown opponent policy '{v}'. Available: {list(OPPONENT_POLICIES)}")
        return v

    @model_validator(mode="after")
    def validate_playfield(self) -> "GameConfig":
        """Validate the playfield can hold the game elements"""
        if self.BALL_INITIAL_VELOCITY == (0.0, 0.0):
            raise ValueError("BALL_INITIAL_VELOCITY must not be the zero vector")

        if self.BALL_SPEED_INCREASE < 1.0:
            raise ValueError(
                f"BALL_SPEED_INCREASE ({self.BALL_SPEED_INCREASE}) must be at least 1.0"
            )

        if self.PADDLE_HEIGHT >= 2 * self.LEVEL_HEIGHT:
            raise ValueError(f"PADDLE_HEIGHT must be less than {2 * self.LEVEL_HEIGHT}")

        # Paddles overlap a wall exactly when they pass PADDLE_MAX_Y
        if self.WALL_HEIGHT / 2 != self.BOUNDARY_MARGIN:
            raise ValueError(
                f"BOUNDARY_MARGIN ({self.BOUNDARY_MARGIN}) must be half of "
                f"WALL_HEIGHT ({self.WALL_HEIGHT})"
            )

        return self

    @property
    def BOUNDARY_X(self) -> float:
        """Horizontal extent beyond which the ball is out of play"""
        return self.LEVEL_WIDTH / 2 + self.BOUNDARY_MARGIN

    @property
    def BOUNDARY_Y(self) -> float:
        """Vertical extent the ball is clamped to"""
        return self.LEVEL_HEIGHT + self.BOUNDARY_MARGIN

    @property
    def PADDLE_MAX_Y(self) -> float:
        """Largest vertical paddle offset allowed after wall correction"""
        return self.LEVEL_HEIGHT - self.PADDLE_HEIGHT / 2 + self.WALL_HEIGHT

    @property
    def PADDLE_X(self) -> float:
        """Horizontal offset of both paddle centers"""
        return self.BOUNDARY_X - self.PADDLE_WIDTH / 2

    @property
    def WALL_Y(self) -> float:
        """Vertical offset of both wall centers"""
        return self.BOUNDARY_Y + self.WALL_HEIGHT

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "tick_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "tick_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _change_values(self, **GameConfig().model_dump())


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "tick_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, keeping defaults", filepath)
        return False
    except (OSError, TypeError, ValueError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    _change_values(game_config, **loaded_config.model_dump())
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values, all or nothing

    The new values are validated together with the untouched ones before any
    of them is applied, so fields constrained by each other can change at once
    and a rejected value leaves ``obj`` as it was.
    """
    old_values = {name: getattr(obj, name) for name in kwargs}
    validated = type(obj).model_validate({**obj.model_dump(), **kwargs})
    for name in kwargs:
        object.__setattr__(obj, name, getattr(validated, name))
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _change_values(game_config, **old_values)
