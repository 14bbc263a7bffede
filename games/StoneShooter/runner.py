"""StoneShooter - Threaded runner.

Drives a StoneShooterMode from a GameLoop thread. Each tick:

    0. drain input (latest acceleration + queued events)
    1. advance the simulation
    2. publish a FrameSnapshot for the render thread

The render thread only ever reads the published snapshot, so it never
touches live entities.
"""
import threading
from typing import Optional

from models import FrameSnapshot
from stonefall.games import GameLoop
from stonefall.games.input import InputManager
from stonefall.logging import get_logger

from . import config
from .game_mode import StoneShooterMode

log = get_logger('runner')


class StoneShooterRunner:
    """Owns the loop thread for one game session."""

    def __init__(
        self,
        mode: StoneShooterMode,
        input_manager: Optional[InputManager] = None,
        fps: int = config.FPS,
        loop: Optional[GameLoop] = None,
    ):
        """Initialize runner.

        Args:
            mode: Simulation to drive
            input_manager: Input hand-off point (a fresh one if None)
            fps: Target tick rate
            loop: Prebuilt loop (tests); must call self.tick
        """
        self.mode = mode
        self.input_manager = input_manager or InputManager()
        self._snapshot_lock = threading.Lock()
        self._snapshot: FrameSnapshot = mode.snapshot()
        self._loop = loop or GameLoop(self.tick, fps=fps, name="StoneShooterLoop")

    @property
    def loop(self) -> GameLoop:
        return self._loop

    @property
    def is_running(self) -> bool:
        return self._loop.is_running

    def tick(self, dt: float) -> None:
        """One loop iteration. Runs on the loop thread."""
        self.mode.set_acceleration(self.input_manager.get_acceleration())
        events = self.input_manager.drain_events()
        if events:
            self.mode.handle_input(events)

        self.mode.update(dt)

        snapshot = self.mode.snapshot()
        with self._snapshot_lock:
            self._snapshot = snapshot

    def step(self, dt: Optional[float] = None) -> FrameSnapshot:
        """Run one tick on the calling thread and return the new snapshot."""
        self._loop.step(dt)
        return self.latest_snapshot()

    def latest_snapshot(self) -> FrameSnapshot:
        """Most recently published frame. Safe from any thread."""
        with self._snapshot_lock:
            return self._snapshot

    def start(self) -> None:
        self._loop.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the loop; returns once the loop thread has exited."""
        self._loop.stop(timeout)

    def pause(self) -> None:
        """Stop ticking. Blocks until the loop thread has exited."""
        if not self._loop.is_running:
            return
        self._loop.stop()
        self.mode.pause()
        self.mode.audio.pause()
        log.info("Paused at tick %d", self.mode.tick_count)

    def resume(self) -> None:
        """Start a fresh loop thread. Events queued while paused are dropped."""
        if self._loop.is_running:
            return
        self.input_manager.clear_events()
        self.mode.resume()
        self.mode.audio.resume()
        self._loop.start()
        log.info("Resumed at tick %d", self.mode.tick_count)
