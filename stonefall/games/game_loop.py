"""Fixed-cadence game loop running on its own thread.

The loop calls a tick callback with the elapsed time since the previous
tick, then sleeps for whatever is left of the frame budget. stop() blocks
until the thread has exited; start() after stop() runs a fresh thread.
"""
import threading
import time
from typing import Callable, Optional

from stonefall.logging import get_logger

log = get_logger('game_loop')

TickCallback = Callable[[float], None]


class GameLoop:
    """Runs `tick(dt)` at a fixed target rate on a background thread.

    Args:
        tick: Callback receiving delta time in seconds
        fps: Target ticks per second
        clock: Monotonic time source (seconds)
        sleep: Sleep function (seconds)
        name: Thread name
    """

    def __init__(
        self,
        tick: TickCallback,
        fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        name: str = "GameLoop",
    ):
        if fps <= 0:
            raise ValueError(f'fps must be positive, got {fps}')
        self._tick = tick
        self._frame_time = 1.0 / fps
        self._clock = clock
        self._sleep = sleep
        self._name = name

        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._last_time: Optional[float] = None
        self._ticks = 0

    @property
    def frame_time(self) -> float:
        """Frame budget in seconds."""
        return self._frame_time

    @property
    def is_running(self) -> bool:
        """True while the loop thread is alive and has not been told to stop."""
        return (
            self._running.is_set()
            and self._thread is not None
            and self._thread.is_alive()
        )

    @property
    def ticks(self) -> int:
        """Number of ticks run since construction."""
        return self._ticks

    def start(self) -> None:
        """Start a fresh loop thread. No-op if already running."""
        if self.is_running:
            log.debug("%s already running", self._name)
            return

        self._running.set()
        self._last_time = self._clock()
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name=self._name,
        )
        self._thread.start()
        log.info("%s started at %.1f fps", self._name, 1.0 / self._frame_time)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the loop to stop and wait for the thread to exit."""
        self._running.clear()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None
        log.info("%s stopped after %d ticks", self._name, self._ticks)

    def step(self, dt: Optional[float] = None) -> None:
        """Run a single tick synchronously on the calling thread.

        Args:
            dt: Elapsed time to report (defaults to one frame budget)
        """
        self._tick(self._frame_time if dt is None else dt)
        self._ticks += 1

    def _run(self) -> None:
        """Thread body: tick, then sleep out the rest of the frame."""
        while self._running.is_set():
            frame_start = self._clock()
            dt = frame_start - self._last_time
            self._last_time = frame_start

            try:
                self._tick(dt)
            except Exception:
                log.exception("%s tick failed, stopping loop", self._name)
                self._running.clear()
                break
            self._ticks += 1

            remaining = self._frame_time - (self._clock() - frame_start)
            if remaining > 0:
                self._sleep(remaining)
