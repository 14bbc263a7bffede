"""
Unit tests for StoneShooter skins.

Rendering targets an off-screen Surface, so no window is opened.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from games.StoneShooter.game.skins import GeometricSkin, StoneShooterSkin
from models import (
    BulletSnapshot,
    FrameSnapshot,
    PlayerSnapshot,
    StoneSnapshot,
    StoneState,
)


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def frame():
    player = PlayerSnapshot(x=375, y=500, width=50, height=50, frame=1, lives=2)
    return FrameSnapshot(
        tick=10,
        player=player,
        bullets=(BulletSnapshot(x=390, y=300, width=20, height=40, frame=2),),
        stones=(
            StoneSnapshot(x=100, y=50, width=40, height=40, frame=3, health=2),
            StoneSnapshot(
                x=200, y=80, width=40, height=40, health=0,
                state=StoneState.EXPLODING, explosion_frame=2,
            ),
        ),
    )


class RecordingSkin(StoneShooterSkin):
    """Skin that records draw calls in order."""

    def __init__(self):
        self.calls = []

    def render_background(self, screen):
        self.calls.append('background')

    def render_player(self, player, screen):
        self.calls.append('player')

    def render_bullet(self, bullet, screen):
        self.calls.append('bullet')

    def render_stone(self, stone, screen):
        self.calls.append('stone')

    def render_hud(self, screen, hud_text):
        self.calls.append(('hud', hud_text))

    def render_game_over(self, screen):
        self.calls.append('game_over')


class TestRenderFrame:
    """Test composition order."""

    def test_draw_order(self, frame):
        skin = RecordingSkin()
        skin.render_frame(frame, MagicMock())
        assert skin.calls == [
            'background', 'stone', 'stone', 'bullet', 'player', ('hud', 'Lives: 2'),
        ]

    def test_game_over_banner_only_when_over(self, frame):
        skin = RecordingSkin()
        over = frame.model_copy(update={'game_over': True})
        skin.render_frame(over, MagicMock())
        assert skin.calls[-1] == 'game_over'


class TestGeometricSkin:
    """Smoke tests drawing onto an off-screen surface."""

    def test_renders_frame(self, pygame_init, frame):
        screen = pygame.Surface((800, 600))
        GeometricSkin(seed=1).render_frame(frame, screen)

    def test_renders_game_over(self, pygame_init, frame):
        screen = pygame.Surface((800, 600))
        over = frame.model_copy(update={'game_over': True})
        GeometricSkin(seed=1).render_frame(over, screen)

    def test_background_is_drawn(self, pygame_init):
        screen = pygame.Surface((200, 200))
        screen.fill((255, 0, 255))
        GeometricSkin(seed=1).render_background(screen)
        assert screen.get_at((0, 0))[:3] != (255, 0, 255)

    def test_starfield_stable_for_same_size(self, pygame_init):
        skin = GeometricSkin(seed=1)
        screen = pygame.Surface((200, 200))
        skin.render_background(screen)
        stars = list(skin._stars)
        skin.render_background(screen)
        assert skin._stars == stars

    def test_bullet_fills_its_bounds(self, pygame_init, frame):
        screen = pygame.Surface((800, 600))
        skin = GeometricSkin(seed=1)
        bullet = frame.bullets[0]
        skin.render_bullet(bullet, screen)
        center = bullet.get_bounds().center
        assert screen.get_at((int(center.x), int(center.y)))[:3] == skin.BULLET_COLOR
        assert screen.get_at((int(bullet.x) - 2, int(center.y)))[:3] == (0, 0, 0)

    def test_stone_drawn_around_bounds_center(self, pygame_init, frame):
        screen = pygame.Surface((800, 600))
        skin = GeometricSkin(seed=1)
        stone = frame.stones[0]
        skin.render_stone(stone, screen)
        center = stone.get_bounds().center
        assert screen.get_at((int(center.x), int(center.y)))[:3] == skin.STONE_COLORS[2]
        assert screen.get_at((int(stone.x) - 2, int(center.y)))[:3] == (0, 0, 0)

    def test_ship_drawn_inside_bounds(self, pygame_init, frame):
        screen = pygame.Surface((800, 600))
        skin = GeometricSkin(seed=1)
        skin.render_player(frame.player, screen)
        x, y, w, h = frame.player.get_bounds().as_tuple()
        assert screen.get_at((int(x + w / 2), int(y + h * 0.6)))[:3] == skin.SHIP_COLOR
        assert screen.get_at((int(x) - 2, int(y + h / 2)))[:3] == (0, 0, 0)
