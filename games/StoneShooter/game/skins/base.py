"""Base class for StoneShooter skins.

Skins handle ALL rendering - the game only manages state. A skin only ever
sees immutable snapshots, so it can run on a different thread than the
simulation.
"""

from abc import ABC, abstractmethod

import pygame

from models import BulletSnapshot, FrameSnapshot, PlayerSnapshot, StoneSnapshot


class StoneShooterSkin(ABC):
    """Base class for game skins.

    Subclasses draw individual entities; render_frame() composes them in
    a fixed order: background, stones, bullets, player, HUD, game-over banner.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the screen and draw the backdrop.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_player(self, player: PlayerSnapshot, screen: pygame.Surface) -> None:
        """Render the player ship.

        Args:
            player: Player snapshot
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_bullet(self, bullet: BulletSnapshot, screen: pygame.Surface) -> None:
        """Render one bullet.

        Args:
            bullet: Bullet snapshot
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_stone(self, stone: StoneSnapshot, screen: pygame.Surface) -> None:
        """Render one stone, or its explosion once it is exploding.

        Args:
            stone: Stone snapshot
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, hud_text: str) -> None:
        """Render the lives counter.

        Args:
            screen: Pygame surface to draw on
            hud_text: Text to show, e.g. "Lives: 3"
        """
        pass

    def render_game_over(self, screen: pygame.Surface) -> None:
        """Render the game-over banner and restart prompt."""
        pass

    def render_frame(self, frame: FrameSnapshot, screen: pygame.Surface) -> None:
        """Draw a complete frame from a snapshot.

        Args:
            frame: Snapshot produced by the simulation
            screen: Pygame surface to draw on
        """
        self.render_background(screen)
        for stone in frame.stones:
            self.render_stone(stone, screen)
        for bullet in frame.bullets:
            self.render_bullet(bullet, screen)
        self.render_player(frame.player, screen)
        self.render_hud(screen, frame.hud_text)
        if frame.game_over:
            self.render_game_over(screen)
