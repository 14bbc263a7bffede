"""Collision detection for StoneShooter.

Handles bullet-stone and player-stone collisions. Every test is a strict
axis-aligned bounding box overlap.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, TYPE_CHECKING

from ... import config

if TYPE_CHECKING:
    from ..entities.bullet import Bullet
    from ..entities.player import Player
    from ..entities.stone import Stone


@dataclass
class CollisionOutcome:
    """What one collision pass did.

    Attributes:
        spent_bullets: Bullets that hit a stone and must be removed
        bullet_hits: (bullet, stone) pairs in the order they were resolved
        player_hits: Stones that struck the player
        explosion_volumes: One explosion cue volume per sound to play
        lives_lost: Lives taken from the player
    """

    spent_bullets: List['Bullet'] = field(default_factory=list)
    bullet_hits: List[Tuple['Bullet', 'Stone']] = field(default_factory=list)
    player_hits: List['Stone'] = field(default_factory=list)
    explosion_volumes: List[float] = field(default_factory=list)
    lives_lost: int = 0


def check_bullet_stone_collision(bullet: 'Bullet', stone: 'Stone') -> bool:
    """Check if a bullet overlaps a collidable stone.

    Args:
        bullet: Bullet to check
        stone: Stone to check against

    Returns:
        True if the stone is not exploding and the boxes overlap
    """
    if stone.is_exploding:
        return False
    return bullet.collision_rect.intersects(stone.collision_rect)


def check_player_stone_collision(player: 'Player', stone: 'Stone') -> bool:
    """Check if a collidable stone overlaps the player ship."""
    if stone.is_exploding:
        return False
    return player.collision_rect.intersects(stone.collision_rect)


def resolve_collisions(
    player: 'Player',
    bullets: Sequence['Bullet'],
    stones: Sequence['Stone'],
) -> CollisionOutcome:
    """Run one collision pass over the current entities.

    Bullets are resolved first, each hitting at most the first overlapping
    stone in iteration order. Stones are then tested against the player;
    a stone hit by a bullet this pass can still strike the player if it is
    not yet exploding. Neither collection is modified here: the caller
    removes `spent_bullets` afterwards.

    Args:
        player: Player ship (lives are decremented in place)
        bullets: Active bullets
        stones: Active stones (health is decremented in place)

    Returns:
        CollisionOutcome describing hits and sounds
    """
    outcome = CollisionOutcome()

    for bullet in bullets:
        for stone in stones:
            if not check_bullet_stone_collision(bullet, stone):
                continue

            stone.decrease_health()
            outcome.spent_bullets.append(bullet)
            outcome.bullet_hits.append((bullet, stone))
            if stone.health <= 0:
                outcome.explosion_volumes.append(config.BULLET_EXPLOSION_VOLUME)
            # A bullet hits at most one stone
            break

    for stone in stones:
        if not check_player_stone_collision(player, stone):
            continue

        player.decrease_lives()
        stone.decrease_health()
        outcome.player_hits.append(stone)
        outcome.lives_lost += 1
        outcome.explosion_volumes.append(config.IMPACT_EXPLOSION_VOLUME)

    return outcome
