"""Falling stone with health and an explosion sub-state.

State machine:
    DESCENDING --(health <= 0)--> EXPLODING --(last frame)--> EXPLOSION_COMPLETE

An exploding stone never moves and never collides. Fall speed is fixed
at construction from the initial health.
"""

from models import Rectangle, StoneSnapshot, StoneState

from ... import config


class Stone:
    """Obstacle that descends until destroyed or missed."""

    def __init__(
        self,
        x: float,
        y: float,
        health: int,
        width: float = config.STONE_WIDTH,
        height: float = config.STONE_HEIGHT,
    ):
        """Initialize stone.

        Args:
            x: Left edge X (fixed for the stone's life)
            y: Top edge Y
            health: Hits needed to destroy (higher health falls slower)
            width: Stone width
            height: Stone height
        """
        self._x = x
        self._y = y
        self._health = health
        self._width = width
        self._height = height
        self._speed = config.stone_speed(health)

        self._frame = 0
        self._frame_elapsed = 0.0

        self._exploding = False
        self._explosion_frame = 0
        self._explosion_elapsed = 0.0
        self._explosion_complete = False

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
    def speed(self) -> float:
        """Pixels per tick while descending."""
        return self._speed

    @property
    def health(self) -> int:
        return self._health

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def explosion_frame(self) -> int:
        return self._explosion_frame

    @property
    def is_exploding(self) -> bool:
        return self._exploding

    @property
    def is_explosion_complete(self) -> bool:
        return self._explosion_complete

    @property
    def state(self) -> StoneState:
        """Current lifecycle state."""
        if not self._exploding:
            return StoneState.DESCENDING
        if self._explosion_complete:
            return StoneState.EXPLOSION_COMPLETE
        return StoneState.EXPLODING

    @property
    def collision_rect(self) -> Rectangle:
        """Bounding box at the current position."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def update(self, dt: float) -> None:
        """Fall and animate, or advance the explosion.

        Args:
            dt: Delta time in seconds (drives animation only)
        """
        if self._exploding:
            if self._explosion_complete:
                return
            self._explosion_elapsed += dt
            if self._explosion_elapsed > config.EXPLOSION_FRAME_LENGTH:
                self._explosion_frame += 1
                self._explosion_elapsed = 0.0
                if self._explosion_frame >= config.EXPLOSION_FRAME_COUNT:
                    self._explosion_frame = config.EXPLOSION_FRAME_COUNT - 1
                    self._explosion_complete = True
            return

        self._y += self._speed

        self._frame_elapsed += dt
        if self._frame_elapsed > config.STONE_FRAME_LENGTH:
            self._frame = (self._frame + 1) % config.STONE_FRAME_COUNT
            self._frame_elapsed = 0.0

    def decrease_health(self) -> None:
        """Take one hit. Starts the explosion the first time health reaches 0."""
        self._health -= 1
        if self._health <= 0 and not self._exploding:
            self._start_explosion()

    def force_destroy(self) -> None:
        """Drop health to 0 and start exploding in one step. Idempotent."""
        if self._health > 0:
            self._health = 0
        if not self._exploding:
            self._start_explosion()

    def _start_explosion(self) -> None:
        self._exploding = True
        self._explosion_frame = 0
        self._explosion_elapsed = 0.0
        self._explosion_complete = False

    def snapshot(self) -> StoneSnapshot:
        """Immutable copy for rendering."""
        return StoneSnapshot(
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            frame=self._frame,
            health=self._health,
            state=self.state,
            explosion_frame=self._explosion_frame,
        )
