"""
Stonefall Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
- game_loop: Fixed-cadence loop thread with start/stop lifecycle
- input: Input events, sources and the thread-safe input manager
"""

from stonefall.games.game_state import GameState
from stonefall.games.base_game import BaseGame
from stonefall.games.game_loop import GameLoop

__all__ = [
    'GameState',
    'BaseGame',
    'GameLoop',
]
