"""
Keyboard Input Source - Keyboard and mouse stand-in for a tilt sensor.

The arrow keys emulate the accelerometer's x axis: tilting the device left
reads positive, so LEFT yields +TILT and RIGHT yields -TILT.
"""
import time
from typing import List

import pygame

from models import EventType
from stonefall.games.input.input_event import InputEvent
from stonefall.games.input.sources.base import InputSource

TILT = 1.0


class KeyboardInputSource(InputSource):
    """Keyboard/mouse input source for desktop play.

    SPACE or a left click fires, R restarts. Events this source does not
    consume are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self, tilt: float = TILT):
        """Initialize the keyboard input source."""
        self._tilt = tilt
        self._acceleration = 0.0
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def get_acceleration(self) -> float:
        """Tilt value derived from the arrow keys held down."""
        return self._acceleration

    def update(self, dt: float) -> None:
        """Process pygame events and sample held arrow keys."""
        unhandled = []
        for event in pygame.event.get():
            if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                self._queue(EventType.FIRE)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                self._queue(EventType.RESTART)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._queue(EventType.FIRE)
            elif event.type != pygame.MOUSEMOTION:
                unhandled.append(event)

        # Re-post after the loop so get() above does not see them again
        for event in unhandled:
            pygame.event.post(event)

        keys = pygame.key.get_pressed()
        self._acceleration = self.tilt_from_keys(
            keys[pygame.K_LEFT], keys[pygame.K_RIGHT]
        )

    def tilt_from_keys(self, left: bool, right: bool) -> float:
        """Map held arrow keys to an accelerometer-style tilt value."""
        if left and not right:
            return self._tilt
        if right and not left:
            return -self._tilt
        return 0.0

    def _queue(self, event_type: EventType) -> None:
        self._event_queue.append(InputEvent(
            event_type=event_type,
            timestamp=time.monotonic(),
        ))

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
