"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from stonefall.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends (keyboard, accelerometer bridges) implement this interface.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of InputEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    def get_acceleration(self) -> float:
        """Current horizontal tilt value (0.0 when the source has no tilt)."""
        return 0.0
