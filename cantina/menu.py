"""Title screen: choose a side, enter both names and open the cantina."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pygame

from .character import Player, Side
from .constants import FPS_MAP, HEIGHT, MAX_NAME, WIDTH
from .world import play_world

MENU_DIR = Path("Menu")
FONT_FILE = Path("Map") / "star_jedi" / "starjedi" / "Starjedi.ttf"
TEXT_COLOR = (255, 239, 56)
BLACK = (0, 0, 0)
LOGO_POSITION = (50, 500)
TOUCH_POSITION = (50, 150)
BACKSPACE = "\b"

_log = logging.getLogger(__name__)


def edit_name(name: str, char: str) -> str:
    """Apply a typed character to a name: printable ASCII up to 'z', or backspace."""
    if len(char) != 1:
        return name
    code = ord(char)
    if char == BACKSPACE:
        return name[:-1]
    if 32 <= code <= 122 and len(name) < MAX_NAME:
        return name + char
    return name


def side_from_mouse(x: int) -> Side:
    """The side the first player picks while hovering at column x."""
    if x > HEIGHT - 100:
        return Side.LIGHT
    return Side.DARK


def _load_image(path: Path, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, OSError):
        _log.warning("failed to load image %s", path)
        image = pygame.Surface(size)
        image.fill(TEXT_COLOR)
        return image


def _load_font() -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_FILE), 23)
    except (pygame.error, OSError):
        _log.warning("failed to load font %s", FONT_FILE)
        return pygame.font.Font(None, 23)


def _draw_selection(screen, background, luke, vader, side: Side | None) -> None:
    screen.blit(background, (0, 0))
    screen.blit(vader, (200, 150))
    screen.blit(luke, (800, 150))
    if side is Side.LIGHT:
        pygame.draw.rect(screen, BLACK, pygame.Rect(0, 0, WIDTH // 2, HEIGHT))
    elif side is Side.DARK:
        pygame.draw.rect(screen, BLACK, pygame.Rect(WIDTH // 2, 0, WIDTH // 2, HEIGHT))
    pygame.display.flip()


def _select_side(screen, luke, vader) -> Side | None:
    background = _load_image(MENU_DIR / "lukevadorselect.jpg", (WIDTH, HEIGHT))
    _draw_selection(screen, background, luke, vader, None)
    side: Side | None = None
    clock = pygame.time.Clock()
    while True:
        redraw = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.MOUSEMOTION:
                hovered = side_from_mouse(event.pos[0])
                if hovered is not side:
                    side = hovered
                    redraw = True
            elif event.type == pygame.MOUSEBUTTONDOWN and side is not None:
                return side
        if redraw:
            _draw_selection(screen, background, luke, vader, side)
        clock.tick(FPS_MAP)


def _ask_name(screen, font, image, label: str) -> str | None:
    name = ""
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_RETURN:
                    return name
                name = edit_name(name, event.unicode)
        screen.fill(BLACK)
        screen.blit(image, (50, 50))
        screen.blit(font.render(label, True, TEXT_COLOR), (130, 70))
        screen.blit(font.render("entrez votre nom : ", True, TEXT_COLOR), (WIDTH // 4 - 100, HEIGHT // 2))
        screen.blit(font.render(name + "=", True, TEXT_COLOR), (WIDTH // 2, HEIGHT // 2))
        screen.blit(
            font.render("appuyez sur entree pour valider", True, TEXT_COLOR),
            (WIDTH // 3, HEIGHT // 2 + 50),
        )
        pygame.display.flip()
        clock.tick(60)


def _wait_for_key() -> bool:
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return True


def _choose_players(screen, font, luke, vader) -> tuple[Player, Player] | None:
    side = _select_side(screen, luke, vader)
    if side is None:
        return None
    if side is Side.DARK:
        steps = ((vader, "joueur 1 du cote obscur"), (luke, "joueur 2 du cote lumineux"))
    else:
        steps = ((luke, "joueur 1 du cote lumineux"), (vader, "joueur 2 du cote obscur"))
    names = []
    for image, label in steps:
        name = _ask_name(screen, font, image, label)
        if name is None:
            return None
        names.append(name)
    other = Side.LIGHT if side is Side.DARK else Side.DARK
    return Player(name=names[0], side=side), Player(name=names[1], side=other)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window, run the title screen, then the cantina."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Title")
        background = _load_image(MENU_DIR / "menubackground.jpg", (WIDTH, HEIGHT))
        logo = _load_image(MENU_DIR / "logogame.png", (200, 80))
        touch = _load_image(MENU_DIR / "logotouch2.png", (200, 80))
        luke = _load_image(MENU_DIR / "luke2.png", (32, 48))
        vader = _load_image(MENU_DIR / "Vador1.png", (32, 48))
        font = _load_font()

        music = None
        if pygame.mixer.get_init():
            try:
                music = pygame.mixer.Sound(str(MENU_DIR / "menumusic.wav"))
                music.play(loops=-1)
            except (pygame.error, OSError):
                _log.warning("failed to load the menu music")

        screen.blit(background, (0, 0))
        screen.blit(logo, LOGO_POSITION)
        screen.blit(touch, TOUCH_POSITION)
        pygame.display.flip()

        if not _wait_for_key():
            return 0
        screen.fill(BLACK)
        players = _choose_players(screen, font, luke, vader)
        pygame.event.clear()
        if players is None:
            return 0
        if music is not None:
            music.stop()
        play_world(screen, *players)
        return 0
    finally:
        pygame.quit()