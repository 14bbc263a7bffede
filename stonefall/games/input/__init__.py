"""
Input abstraction layer for Stonefall games.

Continuous tilt and discrete actions arrive from any thread and are
consumed by the game loop once per tick.
"""

from stonefall.games.input.input_event import InputEvent
from stonefall.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
