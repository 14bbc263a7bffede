"""
Input Event - Represents a single discrete input action.

Uses a frozen dataclass so events can be handed between threads safely.
"""
from dataclasses import dataclass

from models import EventType


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Continuous input (tilt) does not travel as events; it goes through the
    InputManager's acceleration slot instead.

    Attributes:
        event_type: Type of action (FIRE or RESTART)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    event_type: EventType
    timestamp: float = 0.0

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"InputEvent(type={self.event_type.value}, t={self.timestamp:.3f})"
