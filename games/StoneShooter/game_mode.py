"""StoneShooter - Tilt-steered arcade shooter.

Features:
- Ship slides along the bottom of the screen following tilt input
- Stones fall from the top; tougher stones fall slower and take more hits
- A missed stone or a stone striking the ship costs a life
- Game over at zero lives; tap to restart
"""

import random
from typing import Dict, List, Optional, Union

import pygame

from models import AudioCue, EventType, FrameSnapshot, ShooterInternalState
from stonefall.games import BaseGame, GameState
from stonefall.games.input import InputEvent
from stonefall.logging import emit_record, get_logger

from . import config
from .game.audio import AudioSink, NullAudioSink
from .game.entities import Bullet, Player, Stone
from .game.physics import resolve_collisions
from .game.skins import GeometricSkin, StoneShooterSkin
from .game.spawner import StoneSpawner

log = get_logger('stone_shooter')


class StoneShooterMode(BaseGame):
    """Stone Shooter simulation.

    Owns the player, the active bullets and stones, and the spawn timer.
    All mutation happens inside handle_input() and update(), which the
    runner calls from a single thread.
    """

    # Game metadata
    NAME = "Stone Shooter"
    DESCRIPTION = "Tilt to dodge falling stones, tap to shoot them down."
    VERSION = "1.0.0"
    AUTHOR = "Stonefall Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin (geometric=shapes)'
        },
        {
            'name': '--lives',
            'type': int,
            'default': config.STARTING_LIVES,
            'help': 'Starting lives'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        skin: Union[str, StoneShooterSkin] = 'geometric',
        audio: Optional[AudioSink] = None,
        lives: int = config.STARTING_LIVES,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize Stone Shooter.

        Args:
            width: Screen width
            height: Screen height
            skin: Skin name or skin instance used by render()
            audio: Sink for sound cues (silent if None)
            lives: Starting lives
            seed: Seed for stone spawning (ignored if rng is given)
            rng: Random source for stone spawning
            **kwargs: Base game args
        """
        super().__init__(**kwargs)

        self._screen_width = width
        self._screen_height = height
        self._starting_lives = lives

        if isinstance(skin, StoneShooterSkin):
            self._skin = skin
        else:
            skin_class = self.SKINS.get(skin, GeometricSkin)
            self._skin = skin_class()

        self._audio: AudioSink = audio or NullAudioSink()
        self._rng = rng or random.Random(seed)

        self._player = Player(width, height, lives=lives)
        self._bullets: List[Bullet] = []
        self._stones: List[Stone] = []
        self._spawner = StoneSpawner(width, rng=self._rng)

        self._internal_state = ShooterInternalState.PLAYING
        self._tick_count = 0
        self._stones_destroyed = 0
        self._stones_missed = 0
        self._shots_fired = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def player(self) -> Player:
        return self._player

    @property
    def bullets(self) -> List[Bullet]:
        """Active bullets (a copy; mutate through fire()/update())."""
        return list(self._bullets)

    @property
    def stones(self) -> List[Stone]:
        """Active stones (a copy)."""
        return list(self._stones)

    @property
    def lives(self) -> int:
        return self._player.lives

    @property
    def is_game_over(self) -> bool:
        return self._internal_state == ShooterInternalState.GAME_OVER

    @property
    def tick_count(self) -> int:
        """Number of update() calls since construction."""
        return self._tick_count

    @property
    def internal_state(self) -> ShooterInternalState:
        return self._internal_state

    @property
    def skin(self) -> StoneShooterSkin:
        return self._skin

    @property
    def audio(self) -> AudioSink:
        return self._audio

    @property
    def spawner(self) -> StoneSpawner:
        return self._spawner

    def _get_internal_state(self) -> GameState:
        return self._internal_state.to_game_state()

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply discrete input events in order.

        FIRE shoots while playing and restarts while the game is over.
        RESTART always restarts.
        """
        for event in events:
            if event.event_type == EventType.RESTART:
                self.restart()
            elif event.event_type == EventType.FIRE:
                if self.is_game_over:
                    self.restart()
                else:
                    self.fire()

    def set_acceleration(self, acceleration: float) -> None:
        """Forward a raw tilt reading to the player."""
        self._player.set_acceleration(acceleration)

    def fire(self) -> Optional[Bullet]:
        """Spawn a bullet at the ship's top-center.

        Returns:
            The new bullet, or None while the game is over
        """
        if self.is_game_over:
            return None

        bullet = Bullet(self._player.center_x, self._player.y)
        self._bullets.append(bullet)
        self._shots_fired += 1
        self._audio.play(AudioCue.SHOOT, config.SHOOT_VOLUME)
        return bullet

    def spawn_stone(self, x: float, health: int, y: float = 0) -> Stone:
        """Add a stone at the given position."""
        stone = Stone(x, y, health)
        self._stones.append(stone)
        log.trace("Spawned stone at x=%.0f health=%d", x, health)
        return stone

    # =========================================================================
    # Tick
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance the simulation by one tick.

        Args:
            dt: Elapsed time in seconds since the previous tick
        """
        self._tick_count += 1

        self._player.update(dt)
        self._update_bullets(dt)
        self._update_stones(dt)

        spawn = self._spawner.update(dt)
        if spawn is not None:
            x, health = spawn
            self.spawn_stone(x, health)

        self._handle_collisions()

        if self._player.lives <= 0 and not self.is_game_over:
            self._on_game_over()

    def _update_bullets(self, dt: float) -> None:
        """Move bullets and drop those that left the top of the screen."""
        off_screen = []
        for bullet in self._bullets:
            bullet.update(dt)
            if bullet.is_off_screen:
                off_screen.append(bullet)

        if off_screen:
            self._bullets = [b for b in self._bullets if b not in off_screen]

    def _update_stones(self, dt: float) -> None:
        """Move stones, drop finished explosions and handle misses.

        A stone that passes the bottom edge while descending costs a life and
        is forced to explode; it stays in play until the explosion completes.
        """
        finished = []
        for stone in self._stones:
            stone.update(dt)

            if stone.is_explosion_complete:
                finished.append(stone)
            elif not stone.is_exploding and stone.y > self._screen_height:
                self._player.decrease_lives()
                self._stones_missed += 1
                self._audio.play(AudioCue.EXPLOSION, config.IMPACT_EXPLOSION_VOLUME)
                log.debug("Stone missed, lives=%d", self._player.lives)
                stone.force_destroy()

        if finished:
            self._stones = [s for s in self._stones if s not in finished]

    def _handle_collisions(self) -> None:
        """Run the collision pass and apply its removals and sounds."""
        outcome = resolve_collisions(self._player, self._bullets, self._stones)

        if outcome.spent_bullets:
            self._bullets = [b for b in self._bullets if b not in outcome.spent_bullets]

        for _, stone in outcome.bullet_hits:
            if stone.health <= 0:
                self._stones_destroyed += 1

        for volume in outcome.explosion_volumes:
            self._audio.play(AudioCue.EXPLOSION, volume)

        if outcome.lives_lost:
            log.debug("Ship hit by %d stone(s), lives=%d", outcome.lives_lost, self._player.lives)

    def _on_game_over(self) -> None:
        self._internal_state = ShooterInternalState.GAME_OVER
        self._audio.play(AudioCue.GAME_OVER, config.GAME_OVER_VOLUME)
        log.info("Game over after %d ticks", self._tick_count)
        emit_record('session', {
            'event': 'game_over',
            'tick': self._tick_count,
            'shots_fired': self._shots_fired,
            'stones_destroyed': self._stones_destroyed,
            'stones_missed': self._stones_missed,
        })

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def restart(self) -> None:
        """Clear the field and restore lives.

        The ship keeps its position and pending acceleration.
        """
        self._bullets = []
        self._stones = []
        self._player.reset(self._starting_lives)
        self._spawner.reset()
        self._internal_state = ShooterInternalState.PLAYING
        self._shots_fired = 0
        self._stones_destroyed = 0
        self._stones_missed = 0
        log.info("Restarted")
        emit_record('session', {'event': 'restart', 'tick': self._tick_count})

    def reset(self) -> None:
        """Reset game to initial state."""
        self.restart()

    def pause(self) -> None:
        """Mark a running game as paused. Game over stays game over."""
        if self._internal_state == ShooterInternalState.PLAYING:
            self._internal_state = ShooterInternalState.PAUSED

    def resume(self) -> None:
        if self._internal_state == ShooterInternalState.PAUSED:
            self._internal_state = ShooterInternalState.PLAYING

    # =========================================================================
    # Rendering
    # =========================================================================

    def snapshot(self) -> FrameSnapshot:
        """Immutable copy of everything a renderer needs."""
        return FrameSnapshot(
            tick=self._tick_count,
            player=self._player.snapshot(),
            bullets=tuple(b.snapshot() for b in self._bullets),
            stones=tuple(s.snapshot() for s in self._stones),
            game_over=self.is_game_over,
        )

    def render(self, screen: pygame.Surface) -> None:
        """Render the current state with the active skin."""
        self._skin.render_frame(self.snapshot(), screen)
