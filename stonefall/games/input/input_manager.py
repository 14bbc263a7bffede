"""
Input Manager - Hands input from producer threads to the game loop.

Acceleration is a last-writer-wins slot guarded by a lock; discrete events
go through a queue that the loop drains once per tick without blocking.
"""
import queue
import threading
from typing import List, Optional

from stonefall.games.input.input_event import InputEvent
from stonefall.games.input.sources.base import InputSource


class InputManager:
    """Collects input from any thread for consumption on the loop thread.

    An optional InputSource can be attached; update() polls it and feeds its
    events and acceleration into the same slot and queue that external
    producers (sensor callbacks, UI threads) write to directly.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source = source
        self._lock = threading.Lock()
        self._acceleration = 0.0
        self._events: "queue.Queue[InputEvent]" = queue.Queue()

    def set_source(self, source: Optional[InputSource]) -> None:
        """Set the input source."""
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def set_acceleration(self, value: float) -> None:
        """Store the latest raw tilt value, replacing any previous one."""
        with self._lock:
            self._acceleration = float(value)

    def get_acceleration(self) -> float:
        """Most recent tilt value."""
        with self._lock:
            return self._acceleration

    def push_event(self, event: InputEvent) -> None:
        """Queue a discrete event. Safe to call from any thread."""
        self._events.put_nowait(event)

    def update(self, dt: float) -> None:
        """Poll the active source and forward what it produced.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is None:
            return
        self._source.update(dt)
        self.set_acceleration(self._source.get_acceleration())
        for event in self._source.poll_events():
            self.push_event(event)

    def drain_events(self) -> List[InputEvent]:
        """Take every queued event, oldest first. Never blocks."""
        events: List[InputEvent] = []
        while True:
            try:
                events.append(self._events.get_nowait())
            except queue.Empty:
                return events

    def clear_events(self) -> None:
        """Drop any pending events."""
        self.drain_events()
