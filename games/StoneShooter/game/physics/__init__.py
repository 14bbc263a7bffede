"""StoneShooter collision detection."""

from .collision import (
    CollisionOutcome,
    check_bullet_stone_collision,
    check_player_stone_collision,
    resolve_collisions,
)

__all__ = [
    'CollisionOutcome',
    'check_bullet_stone_collision',
    'check_player_stone_collision',
    'resolve_collisions',
]
