"""Geometric skin - flat shapes over a starfield."""

import random
from typing import List, Optional, Tuple

import pygame

from models import BulletSnapshot, PlayerSnapshot, StoneSnapshot

from .base import StoneShooterSkin
from ... import config


class GeometricSkin(StoneShooterSkin):
    """Renders the game using simple geometric shapes.

    - Background: Black with a fixed random starfield
    - Player: Triangle ship with a flickering exhaust per animation frame
    - Bullets: Yellow capsules
    - Stones: Grey rocks, darker for tougher stones
    - Explosions: Expanding orange rings
    """

    NAME = "geometric"
    DESCRIPTION = "Simple shapes over a starfield"

    SHIP_COLOR = (100, 150, 255)
    SHIP_OUTLINE = (255, 255, 255)
    EXHAUST_COLORS = [(255, 200, 50), (255, 140, 0), (255, 80, 0)]
    BULLET_COLOR = (255, 230, 80)
    STONE_COLORS = {1: (170, 160, 150), 2: (130, 120, 110), 3: (95, 85, 80)}
    STONE_OUTLINE = (60, 55, 50)
    EXPLOSION_COLORS = [(255, 240, 150), (255, 180, 60), (240, 110, 30), (150, 60, 20)]
    STAR_COLOR = (200, 200, 220)

    def __init__(self, seed: Optional[int] = None):
        """Initialize geometric skin.

        Args:
            seed: Seed for the starfield layout
        """
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None
        self._rng = random.Random(seed)
        self._stars: List[Tuple[float, float, int]] = []
        self._star_size: Optional[Tuple[int, int]] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 48)
            self._big_font = pygame.font.Font(None, 96)

    def _ensure_stars(self, width: int, height: int) -> None:
        """Lay out the starfield for the current screen size."""
        if self._star_size == (width, height):
            return
        self._stars = [
            (self._rng.random() * width, self._rng.random() * height, self._rng.randint(1, 2))
            for _ in range(config.STAR_COUNT)
        ]
        self._star_size = (width, height)

    def render_background(self, screen: pygame.Surface) -> None:
        """Fill black and draw stars."""
        screen.fill(config.BACKGROUND_COLOR)
        self._ensure_stars(screen.get_width(), screen.get_height())
        for x, y, radius in self._stars:
            pygame.draw.circle(screen, self.STAR_COLOR, (int(x), int(y)), radius)

    def render_player(self, player: PlayerSnapshot, screen: pygame.Surface) -> None:
        """Render the ship as a triangle pointing up."""
        x, y, w, h = player.get_bounds().as_tuple()
        points = [
            (x + w / 2, y),
            (x + w, y + h * 0.85),
            (x, y + h * 0.85),
        ]
        pygame.draw.polygon(screen, self.SHIP_COLOR, points)
        pygame.draw.polygon(screen, self.SHIP_OUTLINE, points, 2)

        exhaust = self.EXHAUST_COLORS[player.frame % len(self.EXHAUST_COLORS)]
        flame = h * (0.1 + 0.05 * player.frame)
        pygame.draw.polygon(
            screen,
            exhaust,
            [
                (x + w * 0.35, y + h * 0.85),
                (x + w * 0.65, y + h * 0.85),
                (x + w / 2, y + h * 0.85 + flame),
            ]
        )

    def render_bullet(self, bullet: BulletSnapshot, screen: pygame.Surface) -> None:
        """Render bullet as a rounded rectangle."""
        rect = pygame.Rect(*(int(v) for v in bullet.get_bounds().as_tuple()))
        # Pulse width with the animation frame
        shrink = bullet.frame % 2 * 2
        pygame.draw.rect(screen, self.BULLET_COLOR, rect.inflate(-shrink * 2, 0), border_radius=6)

    def render_stone(self, stone: StoneSnapshot, screen: pygame.Surface) -> None:
        """Render a rock, or an explosion ring once it is exploding."""
        bounds = stone.get_bounds()
        center = (int(bounds.center.x), int(bounds.center.y))
        radius = int(min(bounds.width, bounds.height) / 2)

        if stone.is_exploding:
            frame = min(stone.explosion_frame, len(self.EXPLOSION_COLORS) - 1)
            color = self.EXPLOSION_COLORS[frame]
            ring = radius + frame * 6
            pygame.draw.circle(screen, color, center, ring)
            pygame.draw.circle(screen, config.BACKGROUND_COLOR, center, max(1, ring - 8 - frame * 2))
            return

        health = max(1, min(stone.health, config.STONE_MAX_HEALTH))
        color = self.STONE_COLORS.get(health, self.STONE_COLORS[1])
        pygame.draw.circle(screen, color, center, radius)
        pygame.draw.circle(screen, self.STONE_OUTLINE, center, radius, 2)

        # Crater rotates with the animation frame
        offsets = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
        dx, dy = offsets[stone.frame % len(offsets)]
        crater = (center[0] + dx * radius // 3, center[1] + dy * radius // 3)
        pygame.draw.circle(screen, self.STONE_OUTLINE, crater, max(2, radius // 5))

    def render_hud(self, screen: pygame.Surface, hud_text: str) -> None:
        """Render lives counter at the top left."""
        self._ensure_font()
        if not self._font:
            return
        text = self._font.render(hud_text, True, config.HUD_COLOR)
        screen.blit(text, (20, 20))

    def render_game_over(self, screen: pygame.Surface) -> None:
        """Render centered banner and restart prompt."""
        self._ensure_font()
        if not self._font or not self._big_font:
            return

        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        title = self._big_font.render(config.GAME_OVER_TEXT, True, config.GAME_OVER_COLOR)
        screen.blit(title, title.get_rect(center=(center_x, center_y)))

        prompt = self._font.render(config.RESTART_TEXT, True, config.HUD_COLOR)
        screen.blit(prompt, prompt.get_rect(center=(center_x, center_y + 80)))
