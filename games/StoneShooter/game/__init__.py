"""StoneShooter game components."""

from .entities import Player, Bullet, Stone
from .spawner import StoneSpawner

__all__ = ['Player', 'Bullet', 'Stone', 'StoneSpawner']
