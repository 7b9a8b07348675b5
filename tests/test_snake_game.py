import pygame
import pytest

from cantina.constants import BOARD_X, BOARD_Y, HEIGHT, NB_SQUARE, WIDTH
from cantina.snake import Board
from cantina.snake_game import DARK_SQUARE, LIGHT_SQUARE, STAR_COLOR, draw_board, draw_stars

BLACK = (0, 0, 0)


@pytest.fixture
def surface():
    return pygame.Surface((WIDTH, HEIGHT))


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_board_first_squares_alternate(surface):
    board = Board()
    draw_board(surface, board)
    assert _rgb(surface, (BOARD_X, BOARD_Y)) == DARK_SQUARE
    assert _rgb(surface, (BOARD_X + board.square_width, BOARD_Y)) == LIGHT_SQUARE


def test_board_alternation_carries_into_next_row(surface):
    board = Board()
    draw_board(surface, board)
    last_of_first_row = (BOARD_X + (NB_SQUARE - 1) * board.square_width, BOARD_Y)
    first_of_second_row = (BOARD_X, BOARD_Y + board.square_height)
    assert _rgb(surface, last_of_first_row) == DARK_SQUARE
    assert _rgb(surface, first_of_second_row) == LIGHT_SQUARE


def test_board_leaves_outside_untouched(surface):
    board = Board()
    draw_board(surface, board)
    assert _rgb(surface, (BOARD_X - 1, BOARD_Y)) == BLACK
    assert _rgb(surface, (BOARD_X + NB_SQUARE * board.square_width, BOARD_Y)) == BLACK
    assert _rgb(surface, (BOARD_X, BOARD_Y + NB_SQUARE * board.square_height)) == BLACK


def test_star_has_white_center_and_black_corners(surface):
    draw_stars(surface, [(100, 100)])
    assert _rgb(surface, (100, 100)) == STAR_COLOR
    assert _rgb(surface, (98, 98)) == BLACK
    assert _rgb(surface, (102, 102)) == BLACK
    assert _rgb(surface, (10, 10)) == BLACK


def test_no_stars_leaves_surface_black(surface):
    draw_stars(surface, [])
    assert _rgb(surface, (100, 100)) == BLACK


def test_several_stars_all_drawn(surface):
    stars = [(50, 60), (400, 300), (1000, 500)]
    draw_stars(surface, stars)
    assert all(_rgb(surface, star) == STAR_COLOR for star in stars)