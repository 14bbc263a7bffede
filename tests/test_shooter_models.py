"""Tests for the shooter enums and snapshot models."""
import pytest
from pydantic import ValidationError

from models import (
    BulletSnapshot, FrameSnapshot, PlayerSnapshot, ShooterInternalState,
    StoneSnapshot, StoneState,
)
from stonefall.games import GameState


@pytest.fixture
def player():
    return PlayerSnapshot(x=375, y=500, width=50, height=50, lives=3)


class TestShooterInternalState:

    @pytest.mark.parametrize("internal,expected", [
        (ShooterInternalState.PLAYING, GameState.PLAYING),
        (ShooterInternalState.PAUSED, GameState.PAUSED),
        (ShooterInternalState.GAME_OVER, GameState.GAME_OVER),
    ])
    def test_to_game_state(self, internal, expected):
        assert internal.to_game_state() == expected


class TestSnapshots:
    """Tests for render snapshots."""

    def test_negative_frame_rejected(self):
        with pytest.raises(ValidationError):
            BulletSnapshot(x=0, y=0, width=20, height=40, frame=-1)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            BulletSnapshot(x=0, y=0, width=0, height=40)

    def test_frozen(self, player):
        with pytest.raises(ValidationError):
            player.lives = 1

    def test_bounds(self):
        snap = StoneSnapshot(x=15, y=15, width=30, height=30, health=1)
        assert snap.get_bounds().as_tuple() == (15, 15, 30, 30)

    def test_stone_exploding_flag(self):
        descending = StoneSnapshot(x=0, y=0, width=40, height=40, health=2)
        exploding = StoneSnapshot(
            x=0, y=0, width=40, height=40, health=0, state=StoneState.EXPLODING,
        )
        assert not descending.is_exploding
        assert exploding.is_exploding

    def test_frame_hud(self, player):
        frame = FrameSnapshot(tick=5, player=player)
        assert frame.hud_text == "Lives: 3"
        assert frame.lives == 3
        assert frame.bullets == ()
        assert not frame.game_over

    def test_frame_negative_tick_rejected(self, player):
        with pytest.raises(ValidationError):
            FrameSnapshot(tick=-1, player=player)
