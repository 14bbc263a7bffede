"""
Stone Shooter enumerations.

These enums define the input, audio and entity states used by the game.
"""

from enum import Enum

from stonefall.games.game_state import GameState


class EventType(str, Enum):
    """Types of discrete input events.

    Attributes:
        FIRE: Tap/shoot; restarts the game instead while it is over
        RESTART: Explicit restart request
    """
    FIRE = "fire"
    RESTART = "restart"


class AudioCue(str, Enum):
    """Fire-and-forget sound cues sent to the audio sink."""
    SHOOT = "shoot"
    EXPLOSION = "explosion"
    GAME_OVER = "game_over"


class StoneState(str, Enum):
    """Lifecycle of a stone.

    Attributes:
        DESCENDING: Moving down, collidable
        EXPLODING: Health ran out; immobile, plays explosion frames
        EXPLOSION_COMPLETE: Explosion finished; ready for removal
    """
    DESCENDING = "descending"
    EXPLODING = "exploding"
    EXPLOSION_COMPLETE = "explosion_complete"


class ShooterInternalState(str, Enum):
    """Internal states of the Stone Shooter simulation."""
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"

    def to_game_state(self) -> GameState:
        """Convert internal state to common GameState."""
        mapping = {
            ShooterInternalState.PLAYING: GameState.PLAYING,
            ShooterInternalState.PAUSED: GameState.PAUSED,
            ShooterInternalState.GAME_OVER: GameState.GAME_OVER,
        }
        return mapping[self]
