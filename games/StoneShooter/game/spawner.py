"""StoneShooter - Stone spawner.

Spawns one stone every fixed interval of simulated time at a random x
along the top edge with random health.
"""
import random
from typing import Optional, Tuple

from .. import config


class StoneSpawner:
    """Decides when and where stones appear, driven by elapsed simulation time.

    The spawner only picks spawn parameters; the simulation builds the stone.
    """

    def __init__(
        self,
        screen_width: int,
        interval: float = config.STONE_SPAWN_INTERVAL,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the spawner.

        Args:
            screen_width: Screen width (spawn x is in [0, width - margin))
            interval: Seconds between spawns
            rng: Random source; pass a seeded Random for reproducible runs
        """
        self.screen_width = screen_width
        self.interval = interval
        self._rng = rng or random.Random()
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        """Seconds since the last spawn (or reset)."""
        return self._elapsed

    def reset(self) -> None:
        """Restart the spawn timer."""
        self._elapsed = 0.0

    def update(self, dt: float) -> Optional[Tuple[int, int]]:
        """Advance the timer by dt.

        Returns:
            (x, health) when a spawn is due, otherwise None. The timer
            restarts whenever a spawn is reported.
        """
        self._elapsed += dt
        if self._elapsed < self.interval:
            return None
        self._elapsed = 0.0
        return self.roll()

    def roll(self) -> Tuple[int, int]:
        """Pick a random x on the top edge and a random health."""
        upper = max(1, int(self.screen_width) - config.STONE_SPAWN_MARGIN)
        x = self._rng.randrange(0, upper)
        health = self._rng.randint(config.STONE_MIN_HEALTH, config.STONE_MAX_HEALTH)
        return x, health
