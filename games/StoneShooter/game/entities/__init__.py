"""StoneShooter game entities."""

from .player import Player
from .bullet import Bullet
from .stone import Stone

__all__ = [
    'Player',
    'Bullet',
    'Stone',
]
