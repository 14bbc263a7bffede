"""Common GameState enum for all Stonefall games.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states reported by every game.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Game loop stopped (manual pause)
        GAME_OVER: Game ended; input restarts it

    For games with internal states:
        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._internal_state == "dead":
                    return GameState.GAME_OVER
                return GameState.PLAYING
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
