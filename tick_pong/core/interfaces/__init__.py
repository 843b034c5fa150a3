"""
Protocols for the collaborators around the simulation core
"""

from tick_pong.core.interfaces.input import InputSource
from tick_pong.core.interfaces.physics import PhysicsBackend
from tick_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSource", "PhysicsBackend", "RendererProtocol"]
