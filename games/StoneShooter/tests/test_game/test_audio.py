"""
Unit tests for the audio sinks.

Actual playback is hard to test, so the pygame mixer is mocked and we check
that cues reach the right sound and that failures never escape.
"""

from unittest.mock import MagicMock, patch

import pygame
import pytest

from games.StoneShooter.game.audio import (
    NullAudioSink,
    PygameAudioSink,
    RecordingAudioSink,
)
from models import AudioCue


@pytest.fixture
def mock_mixer():
    """Mock pygame.mixer and sndarray to prevent real audio initialization."""
    with patch('pygame.mixer.init') as mock_init, \
         patch('pygame.sndarray.make_sound') as mock_make_sound:
        mock_make_sound.side_effect = lambda *_: MagicMock()
        yield {
            'init': mock_init,
            'make_sound': mock_make_sound,
        }


class TestSimpleSinks:
    """Test sinks without a backend."""

    def test_null_sink_accepts_everything(self):
        sink = NullAudioSink()
        sink.play(AudioCue.SHOOT, 0.5)
        sink.pause()
        sink.resume()
        sink.close()

    def test_recording_sink_keeps_order(self):
        sink = RecordingAudioSink()
        sink.play(AudioCue.SHOOT, 0.5)
        sink.play(AudioCue.EXPLOSION, 0.7)
        sink.play(AudioCue.EXPLOSION)

        assert sink.cues == [AudioCue.SHOOT, AudioCue.EXPLOSION, AudioCue.EXPLOSION]
        assert sink.played[1] == (AudioCue.EXPLOSION, 0.7)
        assert sink.count(AudioCue.EXPLOSION) == 2

    def test_recording_sink_clear(self):
        sink = RecordingAudioSink()
        sink.play(AudioCue.GAME_OVER)
        sink.clear()
        assert sink.played == []


class TestPygameAudioSink:
    """Test the pygame-backed sink."""

    def test_disabled_sink_has_no_sounds(self):
        sink = PygameAudioSink(audio_enabled=False)
        assert sink.audio_enabled is False
        assert sink.sounds == {}
        sink.play(AudioCue.SHOOT)

    def test_generates_sound_per_cue(self, mock_mixer):
        sink = PygameAudioSink(audio_enabled=True)
        assert sink.audio_enabled is True
        assert set(sink.sounds) == {AudioCue.SHOOT, AudioCue.EXPLOSION, AudioCue.GAME_OVER}
        mock_mixer['init'].assert_called_once()

    def test_play_sets_channel_volume(self, mock_mixer):
        sink = PygameAudioSink(audio_enabled=True, master_volume=0.5)
        sound = sink.sounds[AudioCue.SHOOT]

        sink.play(AudioCue.SHOOT, 0.5)

        sound.play.assert_called_once()
        sound.play.return_value.set_volume.assert_called_once_with(0.25)

    def test_volume_clamped(self, mock_mixer):
        sink = PygameAudioSink(audio_enabled=True, master_volume=1.0)
        sound = sink.sounds[AudioCue.EXPLOSION]
        sink.play(AudioCue.EXPLOSION, 3.0)
        sound.play.return_value.set_volume.assert_called_once_with(1.0)

    def test_init_failure_disables_audio(self):
        with patch('pygame.mixer.init', side_effect=pygame.error("no device")):
            sink = PygameAudioSink(audio_enabled=True)
        assert sink.audio_enabled is False
        assert sink.sounds == {}
        sink.play(AudioCue.GAME_OVER)

    def test_playback_failure_is_swallowed(self, mock_mixer):
        sink = PygameAudioSink(audio_enabled=True)
        sink.sounds[AudioCue.SHOOT].play.side_effect = pygame.error("busy")
        sink.play(AudioCue.SHOOT)

    def test_close_disables(self, mock_mixer):
        sink = PygameAudioSink(audio_enabled=True)
        with patch('pygame.mixer.stop'), patch('pygame.mixer.quit'):
            sink.close()
        assert sink.audio_enabled is False
        assert sink.sounds == {}
