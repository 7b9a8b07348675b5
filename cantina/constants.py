"""Shared dimensions, timings and identifiers used across the cantina games."""

from enum import Enum, IntEnum

FPS_MAP = 30.0

WIDTH = 1200
HEIGHT = 600

START_X = WIDTH // 2
START_Y = HEIGHT // 2

NB_TICKET = 5

BG_X = -400
BG_Y = -575
SPEED_BG = 5

COLLISION_WIDTH = 87
COLLISION_HEIGHT = 70
CELL_SIZE = 13.8

ENTER_BAR = 150
ENTER_TOILET = 130
ENTER_SHIP = 150

MAX_NAME = 10
NB_GAME = 4

# Snake board layout.
NB_SQUARE = 15
GAME_WIDTH = 600
GAME_HEIGHT = 500
BOARD_X = 300
BOARD_Y = 50
SNAKE_START_X = 300
SNAKE_START_Y = 45


class Key(IntEnum):
    """Movement and action keys tracked on the map."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    ENTER = 4


class Activity(Enum):
    """Things a player can start by pressing Enter on a map cell."""

    FISHING = 1
    SNAKE = 2
    SHIPS = 3
    RHYTHM = 4
    JACKPOT = 5
    RACE = 6
    BARMAN = 7
    STATS = 8