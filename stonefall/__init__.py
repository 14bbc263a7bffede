"""
Stonefall

Small arcade framework plus the Stone Shooter game built on it.
See games/StoneShooter for the game itself.
"""

from stonefall.logging import get_logger

__all__ = ['get_logger']
