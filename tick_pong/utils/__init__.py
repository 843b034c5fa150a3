"""
Utility module of Tick Pong
"""

from tick_pong.utils.config import GameConfig
from tick_pong.utils.config import KeyboardLayout
from tick_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "KeyboardLayout"]
