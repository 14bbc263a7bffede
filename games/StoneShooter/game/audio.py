"""
Audio sinks for StoneShooter.

The simulation sends fire-and-forget AudioCue requests to an AudioSink.
No sink may raise: missing or broken audio never changes game outcomes.

Classes:
    AudioSink: Port the simulation talks to
    NullAudioSink: Discards every cue
    RecordingAudioSink: Remembers cues (tests, replays)
    PygameAudioSink: Plays procedurally generated tones through pygame.mixer
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from models import AudioCue
from stonefall.logging import get_logger

from .. import config

log = get_logger('audio')

SAMPLE_RATE = 22050


class AudioSink(ABC):
    """Receives sound cue requests from the simulation."""

    @abstractmethod
    def play(self, cue: AudioCue, volume: float = 1.0) -> None:
        """Request a cue. Must not raise and must not block.

        Args:
            cue: Which sound to play
            volume: Volume in [0, 1]
        """
        pass

    def pause(self) -> None:
        """Pause any playing sounds."""
        pass

    def resume(self) -> None:
        """Resume paused sounds."""
        pass

    def close(self) -> None:
        """Release audio resources."""
        pass


class NullAudioSink(AudioSink):
    """Sink used when audio is disabled."""

    def play(self, cue: AudioCue, volume: float = 1.0) -> None:
        pass


class RecordingAudioSink(AudioSink):
    """Keeps every requested cue in order.

    Examples:
        >>> sink = RecordingAudioSink()
        >>> sink.play(AudioCue.SHOOT, 0.5)
        >>> sink.cues
        [<AudioCue.SHOOT: 'shoot'>]
    """

    def __init__(self):
        self.played: List[Tuple[AudioCue, float]] = []

    def play(self, cue: AudioCue, volume: float = 1.0) -> None:
        self.played.append((cue, volume))

    @property
    def cues(self) -> List[AudioCue]:
        """Requested cues without volumes."""
        return [cue for cue, _ in self.played]

    def count(self, cue: AudioCue) -> int:
        """How many times a cue was requested."""
        return sum(1 for played, _ in self.played if played == cue)

    def clear(self) -> None:
        self.played.clear()


class PygameAudioSink(AudioSink):
    """Plays generated tones for each cue through pygame.mixer.

    If the mixer cannot be initialized the sink disables itself and every
    play() becomes a no-op.

    Attributes:
        sounds: Generated sound per cue (None if generation failed)
        audio_enabled: Whether audio is enabled
    """

    def __init__(self, audio_enabled: bool = True, master_volume: float = config.MASTER_VOLUME):
        """Initialize the mixer and generate cue sounds.

        Args:
            audio_enabled: Whether to enable audio at all
            master_volume: Multiplier applied to every cue volume
        """
        self.audio_enabled = audio_enabled and config.AUDIO_ENABLED
        self.master_volume = master_volume
        self.sounds: Dict[AudioCue, Optional[pygame.mixer.Sound]] = {}

        if self.audio_enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        """Initialize pygame mixer and generate the cue sounds."""
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)

            self.sounds[AudioCue.SHOOT] = self._generate_sweep(880.0, 440.0, 0.08, 0.25)
            self.sounds[AudioCue.EXPLOSION] = self._generate_noise_burst(0.35, 0.4)
            self.sounds[AudioCue.GAME_OVER] = self._generate_sweep(392.0, 130.81, 0.9, 0.35)
        except Exception as e:
            log.warning("Audio initialization failed, continuing without sound: %s", e)
            self.audio_enabled = False
            self.sounds = {}

    def _generate_sweep(
        self,
        frequency_start: float,
        frequency_end: float,
        duration: float,
        amplitude: float,
    ) -> Optional[pygame.mixer.Sound]:
        """Generate a sine tone sweeping between two frequencies.

        Returns:
            pygame.mixer.Sound or None if generation fails
        """
        try:
            num_samples = int(SAMPLE_RATE * duration)
            frequencies = np.linspace(frequency_start, frequency_end, num_samples)
            phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
            wave = np.sin(phase)

            # Fade in/out to avoid clicks
            envelope = np.ones(num_samples)
            fade_samples = max(1, int(num_samples * 0.1))
            envelope[:fade_samples] = np.linspace(0, 1, fade_samples)
            envelope[-fade_samples:] = np.linspace(1, 0, fade_samples)
            wave *= envelope

            return self._to_sound(wave, amplitude)
        except Exception as e:
            log.warning("Could not generate tone: %s", e)
            return None

    def _generate_noise_burst(self, duration: float, amplitude: float) -> Optional[pygame.mixer.Sound]:
        """Generate a decaying noise burst for explosions."""
        try:
            num_samples = int(SAMPLE_RATE * duration)
            rng = np.random.default_rng(7)
            noise = rng.uniform(-1.0, 1.0, num_samples)
            envelope = np.exp(-np.linspace(0.0, 6.0, num_samples))
            return self._to_sound(noise * envelope, amplitude)
        except Exception as e:
            log.warning("Could not generate explosion sound: %s", e)
            return None

    @staticmethod
    def _to_sound(wave: np.ndarray, amplitude: float) -> pygame.mixer.Sound:
        """Scale to 16-bit stereo and wrap in a Sound."""
        samples = (wave * 32767 * amplitude).astype(np.int16)
        stereo_wave = np.ascontiguousarray(np.column_stack((samples, samples)))
        return pygame.sndarray.make_sound(stereo_wave)

    def play(self, cue: AudioCue, volume: float = 1.0) -> None:
        """Play a cue at the given volume."""
        if not self.audio_enabled:
            return
        sound = self.sounds.get(cue)
        if sound is None:
            return
        try:
            channel = sound.play()
            if channel is not None:
                channel.set_volume(max(0.0, min(1.0, volume * self.master_volume)))
        except Exception as e:
            log.debug("Could not play %s: %s", cue.value, e)

    def pause(self) -> None:
        if self.audio_enabled:
            try:
                pygame.mixer.pause()
            except pygame.error as e:
                log.debug("Mixer pause failed: %s", e)

    def resume(self) -> None:
        if self.audio_enabled:
            try:
                pygame.mixer.unpause()
            except pygame.error as e:
                log.debug("Mixer resume failed: %s", e)

    def close(self) -> None:
        """Stop all sounds and shut the mixer down."""
        if not self.audio_enabled:
            return
        try:
            pygame.mixer.stop()
            pygame.mixer.quit()
        except pygame.error as e:
            log.debug("Mixer shutdown failed: %s", e)
        self.audio_enabled = False
        self.sounds = {}
