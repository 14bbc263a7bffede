"""Tests for the BaseGame interface."""
import pytest

from stonefall.games import BaseGame, GameState


class DummyGame(BaseGame):
    NAME = "Dummy"
    ARGUMENTS = [
        {'name': '--speed', 'type': float, 'default': 1.0, 'help': 'Speed'},
        {'name': '--seed', 'type': int, 'default': 7, 'help': 'Overridden seed'},
    ]

    def _get_internal_state(self):
        return GameState.PLAYING

    def handle_input(self, events):
        pass

    def update(self, dt):
        pass

    def render(self, screen):
        pass


class TestBaseGame:

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            BaseGame()  # type: ignore

    def test_game_arguments_take_precedence(self):
        args = DummyGame.get_arguments()
        assert [a['name'] for a in args] == ['--speed', '--seed']
        assert args[1]['default'] == 7

    def test_base_arguments_appended(self):
        class Bare(DummyGame):
            ARGUMENTS = []

        assert [a['name'] for a in Bare.get_arguments()] == ['--seed']

    def test_info(self):
        info = DummyGame.get_info()
        assert info['name'] == "Dummy"
        assert info['version'] == "1.0.0"

    def test_state_and_unknown_options(self):
        game = DummyGame(unused=True)
        assert game.state == GameState.PLAYING
        game.reset()
