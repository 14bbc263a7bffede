"""Bullet fired straight up from the player ship."""

from models import BulletSnapshot, Rectangle

from ... import config


class Bullet:
    """Projectile moving up a fixed number of pixels per tick.

    Bullets never remove themselves; the simulation drops them once
    `y < 0`.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float = config.BULLET_WIDTH,
        height: float = config.BULLET_HEIGHT,
        speed: float = config.BULLET_SPEED,
    ):
        """Initialize bullet.

        Args:
            x: Left edge X (fixed for the bullet's life)
            y: Top edge Y
            width: Bullet width
            height: Bullet height
            speed: Pixels per tick, upward
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._speed = speed
        self._frame = 0
        self._frame_elapsed = 0.0

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def is_off_screen(self) -> bool:
        """True once the bullet's top has passed the top of the screen."""
        return self._y < 0

    @property
    def collision_rect(self) -> Rectangle:
        """Bounding box at the current position."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def update(self, dt: float) -> None:
        """Move up and advance animation.

        Args:
            dt: Delta time in seconds (drives animation only)
        """
        self._y -= self._speed

        self._frame_elapsed += dt
        if self._frame_elapsed > config.BULLET_FRAME_LENGTH:
            self._frame = (self._frame + 1) % config.BULLET_FRAME_COUNT
            self._frame_elapsed = 0.0

    def snapshot(self) -> BulletSnapshot:
        """Immutable copy for rendering."""
        return BulletSnapshot(
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            frame=self._frame,
        )
