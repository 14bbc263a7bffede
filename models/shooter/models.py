"""
Stone Shooter snapshot models.

Immutable per-tick copies of entity state. The simulation builds one
FrameSnapshot per tick; renderers read only snapshots, never live entities.
"""

from typing import Tuple

from pydantic import BaseModel, Field, computed_field, ConfigDict

from ..primitives import Rectangle
from .enums import StoneState


class EntitySnapshot(BaseModel):
    """Position, size and animation frame shared by all entity snapshots."""
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    frame: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    def get_bounds(self) -> Rectangle:
        """Bounding box at the snapshot position."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)


class PlayerSnapshot(EntitySnapshot):
    """Player ship state.

    Attributes:
        lives: Remaining lives (may be <= 0 once the game is over)
    """
    lives: int


class BulletSnapshot(EntitySnapshot):
    """Bullet state."""


class StoneSnapshot(EntitySnapshot):
    """Stone state including its explosion sub-state.

    Attributes:
        health: Remaining health (<= 0 once exploding)
        state: Lifecycle state
        explosion_frame: Current explosion frame (0 while descending)
    """
    health: int
    state: StoneState = StoneState.DESCENDING
    explosion_frame: int = Field(0, ge=0)

    @computed_field
    @property
    def is_exploding(self) -> bool:
        """True once the stone has started exploding."""
        return self.state != StoneState.DESCENDING


class FrameSnapshot(BaseModel):
    """Everything a renderer needs to draw one tick.

    Attributes:
        tick: Simulation tick number
        player: Player ship
        bullets: Active bullets, in spawn order
        stones: Active stones, in spawn order
        game_over: Whether the game-over banner is shown
    """
    tick: int = Field(0, ge=0)
    player: PlayerSnapshot
    bullets: Tuple[BulletSnapshot, ...] = ()
    stones: Tuple[StoneSnapshot, ...] = ()
    game_over: bool = False

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def lives(self) -> int:
        """Player lives, for the HUD."""
        return self.player.lives

    @computed_field
    @property
    def hud_text(self) -> str:
        """Lives counter line."""
        return f"Lives: {self.player.lives}"
