"""
Input source implementations.
"""

from stonefall.games.input.sources.base import InputSource
from stonefall.games.input.sources.keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
