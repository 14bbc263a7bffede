"""
Unit tests for the Player entity.

Tests spawn position, tilt movement, clamping, animation and lives.
"""

import pytest

from games.StoneShooter import config
from games.StoneShooter.game.entities import Player


@pytest.fixture
def player():
    """Player on an 800x600 screen."""
    return Player(800, 600)


class TestPlayerSpawn:
    """Test initial placement."""

    def test_spawns_centered_near_bottom(self, player):
        """Ship is horizontally centered and sits above the bottom margin."""
        assert player.x == 800 / 2 - 50 / 2
        assert player.y == 600 - 50 - 50

    def test_starts_with_three_lives(self, player):
        assert player.lives == 3

    def test_collision_rect_matches_position(self, player):
        rect = player.collision_rect
        assert rect.left == player.x
        assert rect.top == player.y
        assert rect.width == player.width
        assert rect.height == player.height


class TestPlayerMovement:
    """Test tilt-driven horizontal movement."""

    def test_acceleration_is_inverted(self, player):
        """A positive tilt reading moves the ship left."""
        player.set_acceleration(0.5)
        assert player.acceleration == -0.5

        start_x = player.x
        player.update(0.016)
        assert player.x == pytest.approx(start_x - 0.5 * config.PLAYER_SPEED)

    def test_negative_tilt_moves_right(self, player):
        start_x = player.x
        player.set_acceleration(-1.0)
        player.update(0.016)
        assert player.x == pytest.approx(start_x + config.PLAYER_SPEED)

    def test_clamped_to_left_edge(self, player):
        player.set_acceleration(1000.0)
        player.update(0.016)
        assert player.x == 0.0

    def test_clamped_to_right_edge(self, player):
        player.set_acceleration(-1000.0)
        player.update(0.016)
        assert player.x == 800 - player.width

    def test_y_never_changes(self, player):
        start_y = player.y
        player.set_acceleration(3.0)
        for _ in range(10):
            player.update(0.016)
        assert player.y == start_y

    def test_collision_rect_follows_movement(self, player):
        player.set_acceleration(-2.0)
        player.update(0.016)
        assert player.collision_rect.left == player.x
        assert player.collision_rect.right == player.x + player.width

    def test_center_x(self, player):
        assert player.center_x == player.x + player.width / 2


class TestPlayerAnimation:
    """Test frame timer driven by elapsed time."""

    def test_frame_advances_after_frame_length(self, player):
        player.update(config.PLAYER_FRAME_LENGTH + 0.01)
        assert player.frame == 1

    def test_frame_holds_within_frame_length(self, player):
        player.update(config.PLAYER_FRAME_LENGTH / 2)
        assert player.frame == 0

    def test_frame_wraps(self, player):
        for _ in range(config.PLAYER_FRAME_COUNT):
            player.update(config.PLAYER_FRAME_LENGTH + 0.01)
        assert player.frame == 0


class TestPlayerLives:
    """Test lives bookkeeping and reset."""

    def test_decrease_lives(self, player):
        player.decrease_lives()
        assert player.lives == 2

    def test_lives_may_go_negative(self, player):
        for _ in range(4):
            player.decrease_lives()
        assert player.lives == -1

    def test_reset_restores_lives_only(self, player):
        """Reset keeps position and pending acceleration."""
        player.set_acceleration(1.0)
        player.update(0.016)
        x = player.x
        player.decrease_lives()
        player.decrease_lives()

        player.reset()

        assert player.lives == 3
        assert player.x == x
        assert player.acceleration == -1.0

    def test_snapshot(self, player):
        snap = player.snapshot()
        assert snap.x == player.x
        assert snap.y == player.y
        assert snap.lives == 3
        assert snap.frame == 0
