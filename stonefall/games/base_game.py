"""Base class for Stonefall games.

A game is a simulation the runner can tick and a skin can draw. Metadata
and command-line options are class attributes so launchers can inspect a
game without constructing it.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from stonefall.games.game_state import GameState
from stonefall.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Interface shared by every game.

    Class attributes:
        NAME, DESCRIPTION, VERSION, AUTHOR: Shown by launchers
        ARGUMENTS: argparse option dicts ('name' plus add_argument kwargs)

    Subclasses implement _get_internal_state, handle_input, update and
    render; reset is optional.
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    ARGUMENTS: List[Dict[str, Any]] = []

    # Options every game accepts
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible runs'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Game options followed by base options; first definition of a name wins."""
        merged: Dict[str, Dict[str, Any]] = {}
        for arg in [*cls.ARGUMENTS, *cls._BASE_ARGUMENTS]:
            merged.setdefault(arg['name'], arg)
        return list(merged.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Metadata plus the merged option list."""
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    def __init__(self, **kwargs):
        if kwargs:
            log.debug("%s ignoring unknown options: %s", self.NAME, sorted(kwargs))

    @property
    def state(self) -> GameState:
        """Standard state, derived from _get_internal_state()."""
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Apply a batch of InputEvents."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance one tick; dt is elapsed seconds."""
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        pass

    def reset(self) -> None:
        """Return to the initial state. No-op by default."""
        pass
