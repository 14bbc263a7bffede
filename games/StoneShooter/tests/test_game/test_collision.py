"""
Unit tests for collision detection and the collision pass.
"""

import pytest

from games.StoneShooter import config
from games.StoneShooter.game.entities import Bullet, Player, Stone
from games.StoneShooter.game.physics import (
    check_bullet_stone_collision,
    check_player_stone_collision,
    resolve_collisions,
)


@pytest.fixture
def player():
    return Player(800, 600)


def stone_on_player(player: Player, health: int = 1) -> Stone:
    """Stone overlapping the ship."""
    return Stone(player.x, player.y, health)


class TestChecks:
    """Test individual collision predicates."""

    def test_bullet_overlapping_stone(self):
        assert check_bullet_stone_collision(Bullet(10, 10), Stone(15, 15, 1, 30, 30))

    def test_touching_edges_do_not_collide(self):
        bullet = Bullet(10, 10)  # [10, 10, 30, 50]
        stone = Stone(30, 10, 1)
        assert not check_bullet_stone_collision(bullet, stone)

    def test_exploding_stone_never_collides(self, player):
        stone = stone_on_player(player)
        stone.force_destroy()
        assert not check_player_stone_collision(player, stone)
        assert not check_bullet_stone_collision(Bullet(stone.x, stone.y), stone)


class TestResolveCollisions:
    """Test the full collision pass."""

    def test_bullet_hit_decrements_health_and_spends_bullet(self, player):
        """Bullet [10,10,30,50] vs stone [15,15,45,45]."""
        bullet = Bullet(10, 10)
        stone = Stone(15, 15, 3, width=30, height=30)

        outcome = resolve_collisions(player, [bullet], [stone])

        assert stone.health == 2
        assert outcome.spent_bullets == [bullet]
        assert outcome.explosion_volumes == []

    def test_killing_hit_reports_explosion(self, player):
        bullet = Bullet(10, 10)
        stone = Stone(15, 15, 1)

        outcome = resolve_collisions(player, [bullet], [stone])

        assert stone.is_exploding
        assert outcome.explosion_volumes == [config.BULLET_EXPLOSION_VOLUME]

    def test_bullet_hits_only_first_stone(self, player):
        bullet = Bullet(10, 10)
        first = Stone(15, 15, 2)
        second = Stone(12, 12, 2)

        resolve_collisions(player, [bullet], [first, second])

        assert first.health == 1
        assert second.health == 2

    def test_second_bullet_skips_stone_exploded_this_pass(self, player):
        stone = Stone(15, 15, 1)
        bullets = [Bullet(10, 10), Bullet(12, 12)]

        outcome = resolve_collisions(player, bullets, [stone])

        assert outcome.spent_bullets == [bullets[0]]
        assert stone.health == 0

    def test_player_hit_costs_one_life(self, player):
        stone = stone_on_player(player)

        outcome = resolve_collisions(player, [], [stone])

        assert player.lives == 2
        assert outcome.lives_lost == 1
        assert outcome.player_hits == [stone]
        assert outcome.explosion_volumes == [config.IMPACT_EXPLOSION_VOLUME]
        assert stone.is_exploding

    def test_one_life_per_overlapping_stone(self, player):
        stones = [stone_on_player(player), Stone(player.x + 5, player.y + 5, 1)]

        outcome = resolve_collisions(player, [], stones)

        assert player.lives == 1
        assert outcome.lives_lost == 2

    def test_bullet_and_player_hit_same_tick(self, player):
        """Bullet pass runs first; the stone can still strike the ship."""
        stone = stone_on_player(player, health=3)
        bullet = Bullet(stone.x, stone.y)

        outcome = resolve_collisions(player, [bullet], [stone])

        assert stone.health == 1
        assert player.lives == 2
        assert outcome.spent_bullets == [bullet]

    def test_collections_untouched(self, player):
        bullets = [Bullet(10, 10)]
        stones = [Stone(15, 15, 1)]

        resolve_collisions(player, bullets, stones)

        assert len(bullets) == 1
        assert len(stones) == 1
