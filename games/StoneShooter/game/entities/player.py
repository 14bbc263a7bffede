"""Player ship steered by tilt.

The ship sits at a fixed height near the bottom of the screen and slides
horizontally by acceleration * speed pixels each tick, clamped to the screen.
"""

from typing import Optional

from models import PlayerSnapshot, Rectangle

from ... import config


class Player:
    """Horizontally moving player ship with a lives counter."""

    def __init__(
        self,
        screen_width: float,
        screen_height: float,
        width: float = config.PLAYER_WIDTH,
        height: float = config.PLAYER_HEIGHT,
        speed: float = config.PLAYER_SPEED,
        lives: int = config.STARTING_LIVES,
    ):
        """Initialize player centered near the bottom of the screen.

        Args:
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
            width: Ship width
            height: Ship height
            speed: Pixels per tick per unit of acceleration
            lives: Starting lives
        """
        self._screen_width = screen_width
        self._width = width
        self._height = height
        self._speed = speed
        self._starting_lives = lives
        self._lives = lives
        self._acceleration = 0.0

        self._x = screen_width / 2 - width / 2
        self._y = screen_height - height - config.PLAYER_BOTTOM_MARGIN

        self._frame = 0
        self._frame_elapsed = 0.0

    @property
    def x(self) -> float:
        """Left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Top edge Y (fixed after spawn)."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center_x(self) -> float:
        """Horizontal center of the ship."""
        return self._x + self._width / 2

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def acceleration(self) -> float:
        """Pending horizontal acceleration (already axis-inverted)."""
        return self._acceleration

    @property
    def frame(self) -> int:
        """Current animation frame."""
        return self._frame

    @property
    def collision_rect(self) -> Rectangle:
        """Bounding box at the current position."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def set_acceleration(self, acceleration: float) -> None:
        """Store a raw tilt reading.

        The sensor axis is inverted: a positive reading moves the ship left.
        """
        self._acceleration = -acceleration

    def update(self, dt: float) -> None:
        """Move by acceleration * speed, clamp to screen, advance animation.

        Args:
            dt: Delta time in seconds (drives animation only)
        """
        self._x += self._acceleration * self._speed
        self._x = max(0.0, min(self._screen_width - self._width, self._x))

        self._frame_elapsed += dt
        if self._frame_elapsed > config.PLAYER_FRAME_LENGTH:
            self._frame = (self._frame + 1) % config.PLAYER_FRAME_COUNT
            self._frame_elapsed = 0.0

    def decrease_lives(self) -> None:
        """Lose one life. May go below zero; callers treat <= 0 as game over."""
        self._lives -= 1

    def reset(self, lives: Optional[int] = None) -> None:
        """Restore lives. Position and acceleration are left as they are."""
        self._lives = self._starting_lives if lives is None else lives

    def snapshot(self) -> PlayerSnapshot:
        """Immutable copy for rendering."""
        return PlayerSnapshot(
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            frame=self._frame,
            lives=self._lives,
        )
