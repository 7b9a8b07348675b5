import pygame
import pytest

from cantina.constants import HEIGHT, WIDTH
from cantina.duck_game import GAME_SECONDS, DuckGame
from cantina.ducks import NB_MAX_JARJAR


@pytest.fixture
def game():
    return DuckGame(pygame.Surface((WIDTH, HEIGHT)))


def test_initial_state(game):
    assert game.remaining == GAME_SECONDS
    assert game.selected is None
    assert len(game.ducks) == NB_MAX_JARJAR
    assert all(not duck.active for duck in game.ducks)
    assert game.boat.score == 0


def test_grab_selects_duck_under_cursor(game):
    duck = game.ducks[2]
    duck.x, duck.y = 300, 200
    assert game.grab(310, 215) == 2
    assert game.offset == (10, 15)


def test_grab_miss_leaves_selection(game):
    assert game.grab(WIDTH - 1, HEIGHT - 1) is None


def test_release_clears_selection(game):
    duck = game.ducks[0]
    duck.x, duck.y = 300, 200
    game.grab(305, 205)
    game.release()
    assert game.selected is None


def test_tick_drags_selected_duck(game):
    duck = game.ducks[1]
    duck.x, duck.y = 300, 200
    duck.active = True
    game.grab(310, 210)
    game.tick(410, 260)
    assert (duck.x, duck.y) == (400, 250)
    assert game.cane == (410 - 20, 260 - 20)


def test_drop_on_boat_scores(game):
    duck = game.ducks[0]
    duck.x, duck.y = 300, 200
    duck.active = True
    game.grab(300, 200)
    scored = game.tick(game.boat.x + 1, game.boat.y + 1)
    assert scored is True
    assert game.boat.score == 1
    assert game.selected is None


def test_tick_spawns_and_keeps_ducks_on_screen(game):
    game.tick(0, 0)
    for duck in game.ducks:
        assert duck.active
        assert 0 <= duck.x <= WIDTH - duck.width
        assert 0 <= duck.y <= HEIGHT - duck.height


def test_time_runs_out_after_game_length(game):
    results = [game.second_elapsed() for _ in range(GAME_SECONDS)]
    assert results[-1] is True
    assert not any(results[:-1])
    assert game.remaining == 0