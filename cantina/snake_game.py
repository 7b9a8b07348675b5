"""Drawing and event loop of one player's snake round."""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Iterable

import pygame

from .character import Player
from .constants import BOARD_X, BOARD_Y, Key
from .snake import Board, SnakeRound, random_stars

FPS = 6
ASSET_DIR = Path("Snake")

TEXT_COLOR = (255, 239, 56)
DARK_SQUARE = (96, 96, 96)
LIGHT_SQUARE = (113, 106, 105)
STAR_COLOR = (255, 255, 255)
BLACK = (0, 0, 0)
STAR_SIZE = 2

HEAD_IMAGES = {
    Key.UP: "vadorh.png",
    Key.RIGHT: "vadorr.png",
    Key.DOWN: "vadorb.png",
    Key.LEFT: "vadorl.png",
}
BODY_IMAGE = "strooperhead.png"
APPLE_IMAGE = "apple.png"
MUSIC = "snakesample.wav"

_ARROWS = {
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
}

_log = logging.getLogger(__name__)


def draw_board(surface: pygame.Surface, board: Board) -> None:
    """Draw the checkerboard, alternating colours square after square."""
    colors = itertools.cycle((DARK_SQUARE, LIGHT_SQUARE))
    for row in range(board.count):
        for column in range(board.count):
            rect = pygame.Rect(
                BOARD_X + column * board.square_width,
                BOARD_Y + row * board.square_height,
                board.square_width,
                board.square_height,
            )
            pygame.draw.rect(surface, next(colors), rect)


def draw_stars(surface: pygame.Surface, stars: Iterable[tuple[int, int]]) -> None:
    """Draw each star as a white dot trimmed by four black dots."""
    for cx, cy in stars:
        pygame.draw.circle(surface, STAR_COLOR, (cx, cy), STAR_SIZE)
        for dx, dy in ((-1, -1), (1, -1), (-1, 1), (1, 1)):
            pygame.draw.circle(
                surface, BLACK, (cx + dx * STAR_SIZE, cy + dy * STAR_SIZE), STAR_SIZE
            )


def _load_image(name: str, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.image.load(str(ASSET_DIR / name)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        _log.warning("failed to load image %s", name)
        placeholder = pygame.Surface(size)
        placeholder.fill(TEXT_COLOR)
        return placeholder


def _start_music() -> pygame.mixer.Sound | None:
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(ASSET_DIR / MUSIC))
    except (pygame.error, FileNotFoundError):
        _log.warning("failed to load sound %s", MUSIC)
        return None
    sound.play(loops=-1)
    return sound


def _countdown(screen, font, player: Player, stars) -> None:
    for number in (3, 2, 1):
        screen.fill(BLACK)
        draw_stars(screen, stars)
        screen.blit(font.render(f"c'est au tour de {player.name}", True, TEXT_COLOR), (500, 300))
        screen.blit(font.render(str(number), True, TEXT_COLOR), (600, 350))
        pygame.display.flip()
        pygame.time.wait(1000)


def _draw_round(screen, round_: SnakeRound, heads, body_image, apple_image) -> None:
    snake = round_.snake
    screen.blit(heads[snake.head.direction], (snake.head.x, snake.head.y))
    for part in snake.body:
        screen.blit(body_image, (part.x, part.y))
    screen.blit(apple_image, (round_.apple.x, round_.apple.y))


def play_snake(screen: pygame.Surface, player: Player, font: pygame.font.Font) -> int:
    """Play one round for a player; stores and returns the number of apples eaten."""
    round_ = SnakeRound(stars=random_stars())
    square = (round_.board.square_width, round_.board.square_height)
    heads = {direction: _load_image(name, square) for direction, name in HEAD_IMAGES.items()}
    body_image = _load_image(BODY_IMAGE, square)
    apple_image = _load_image(APPLE_IMAGE, square)
    music = _start_music()

    _countdown(screen, font, player, round_.stars)
    pygame.event.clear()

    clock = pygame.time.Clock()
    over = False
    while not over:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                over = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    over = True
                elif event.key in _ARROWS and round_.turn_allowed:
                    if round_.snake.turn(_ARROWS[event.key]):
                        round_.turn_allowed = False
        if over:
            break
        clock.tick(FPS)
        screen.fill(BLACK)
        draw_stars(screen, round_.stars)
        screen.blit(font.render(f"score : {round_.score}", True, TEXT_COLOR), (50, 250))
        draw_board(screen, round_.board)
        over = round_.step()
        if not over:
            _draw_round(screen, round_, heads, body_image, apple_image)
        pygame.display.flip()

    if music is not None:
        music.stop()
    player.score = round_.score
    return round_.score