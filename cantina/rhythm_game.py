"""Menu, countdown, music and main loop of the rhythm game."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .beatmap import BEATMAP_DIR, load_beatmap, scale_to_screen
from .character import Player
from .rhythm import ScoreKeeper, VisibleNotes, cursor_on_target

ASSET_DIR = Path("osu")
DESIGN_DIR = ASSET_DIR / "design"
MUSIC_DIR = ASSET_DIR / "musics"

MENU_ITEMS = (
    "Choose your difficulty !!! exponential",
    "1-Meco, Star Wars Theme",
    "2-Luke Theme",
    "3-Cantina Band",
    "4-Meco Insane",
    "5-Don't even try",
)
MENU_SPACING = 30
CLICKABLE_ITEMS = 5

YELLOW = (253, 245, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

LOOKAHEAD = 300
MISS_DELAY = 500

_MUSIC_FILES = {
    1: "music1.wav",
    2: "music2.wav",
    3: "music3.wav",
    4: "music4.wav",
    5: "music10.wav",
}

_log = logging.getLogger(__name__)


def music_file(difficulty: int) -> str:
    """File name of the music played with a difficulty."""
    try:
        return _MUSIC_FILES[difficulty]
    except KeyError:
        raise ValueError(f"invalid difficulty level: {difficulty}") from None


def menu_choice(selected: int, key: int) -> tuple[int, bool]:
    """Apply a key to the menu: arrows move with wrap-around, Enter confirms."""
    last = len(MENU_ITEMS) - 1
    if key == pygame.K_UP:
        selected = last if selected - 1 < 0 else selected - 1
    elif key == pygame.K_DOWN:
        selected = 0 if selected + 1 > last else selected + 1
    elif key == pygame.K_RETURN:
        return selected, True
    return selected, False


def _load_image(path: Path, size: tuple[int, int]) -> pygame.Surface:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        _log.warning("failed to load image %s", path)
        placeholder = pygame.Surface(size)
        placeholder.fill(YELLOW)
        return placeholder


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(DESIGN_DIR / "space_font.ttf"), size)
    except (pygame.error, FileNotFoundError, OSError):
        _log.warning("failed to load font, using the default one")
        return pygame.font.Font(None, size)


def _draw_background(screen: pygame.Surface, background: pygame.Surface) -> None:
    screen.fill(BLACK)
    screen.blit(pygame.transform.scale(background, screen.get_size()), (0, 0))


def _draw_menu(screen, font, selected: int, background) -> None:
    _draw_background(screen, background)
    width, height = screen.get_size()
    start_y = (height - MENU_SPACING * len(MENU_ITEMS)) // 2
    for index, text in enumerate(MENU_ITEMS):
        color = WHITE if index == selected else YELLOW
        surface = font.render(text, True, color)
        screen.blit(surface, ((width - surface.get_width()) // 2, start_y + index * MENU_SPACING))
    pygame.display.flip()


def _clicked_item(screen, font, pos: tuple[int, int]) -> int | None:
    mouse_x, mouse_y = pos
    width = screen.get_width()
    for index, text in enumerate(MENU_ITEMS[:CLICKABLE_ITEMS]):
        y = 100 + index * MENU_SPACING
        text_width = font.size(text)[0]
        x = (width - text_width) // 2
        if x <= mouse_x <= x + text_width and y - 15 <= mouse_y <= y + 15:
            return index
    return None


def _run_menu(screen, font, background) -> int:
    selected = 0
    _draw_menu(screen, font, selected, background)
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            pygame.quit()
            raise SystemExit(0)
        if event.type == pygame.KEYDOWN:
            selected, chosen = menu_choice(selected, event.key)
            if chosen:
                return selected
            _draw_menu(screen, font, selected, background)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            clicked = _clicked_item(screen, font, event.pos)
            if clicked is not None:
                _draw_menu(screen, font, clicked, background)
                _log.info("selected item: %d", clicked)
                return clicked


def _wait_for_ready(screen, font, background, name: str) -> None:
    width, height = screen.get_size()
    line_height = font.get_linesize()
    _draw_background(screen, background)
    name_surface = font.render(name, True, YELLOW)
    center_x = width // 2 - name_surface.get_width() // 2
    center_y = height // 2 - line_height // 2
    screen.blit(name_surface, (center_x, center_y))
    ready = font.render("Are you ready? Press Enter", True, YELLOW)
    screen.blit(ready, (center_x, center_y + line_height))
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            return


def _countdown(screen, font) -> None:
    width, height = screen.get_size()
    text_width = font.size("3")[0]
    text_height = font.get_linesize()
    position = ((width - text_width) // 2, (height - text_height) // 2)
    for number in (3, 2, 1):
        screen.fill(BLACK)
        screen.blit(font.render(str(number), True, WHITE), position)
        pygame.display.flip()
        pygame.time.wait(1000)


def _start_music(difficulty: int) -> pygame.mixer.Channel | None:
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(MUSIC_DIR / music_file(difficulty)))
    except (pygame.error, FileNotFoundError, ValueError):
        _log.error("failed to load the music for difficulty %d", difficulty)
        return None
    return sound.play()


def _set_cursor() -> None:
    try:
        image = pygame.image.load(str(DESIGN_DIR / "cursor.png")).convert_alpha()
        pygame.mouse.set_cursor(pygame.cursors.Cursor((0, 0), image))
    except (pygame.error, FileNotFoundError):
        _log.warning("failed to set the cursor image")


def play_rhythm(screen: pygame.Surface, player: Player) -> int:
    """Play one rhythm round for a player; stores and returns the score."""
    font = _load_font(24)
    circle = _load_image(DESIGN_DIR / "circle.png", (64, 64))
    background = _load_image(DESIGN_DIR / "osubg.png", screen.get_size())
    _set_cursor()
    screen.fill(BLACK)
    pygame.display.flip()

    difficulty = 0
    while difficulty <= 0:
        difficulty = _run_menu(screen, font, background)
    _wait_for_ready(screen, font, background, player.name)
    points = load_beatmap(difficulty, BEATMAP_DIR)
    _countdown(screen, font)
    points = scale_to_screen(points)

    channel = _start_music(difficulty)
    notes = VisibleNotes()
    keeper = ScoreKeeper()
    next_index = 0
    current = 0
    offset = pygame.time.get_ticks()
    playing = channel is not None

    while playing:
        elapsed = pygame.time.get_ticks() - offset
        while next_index < len(points) and points[next_index].timing <= elapsed + LOOKAHEAD:
            notes.push(points[next_index])
            next_index += 1
            screen.fill(BLACK)
            if current < len(points) and points[current].timing < elapsed - MISS_DELAY:
                keeper.miss()
                current += 1

        for note in notes.active():
            screen.blit(circle, (note.x, note.y))
        screen.blit(font.render(f"Score: {keeper.score}", True, YELLOW), (150, 20))
        pygame.display.flip()
        notes.prune(pygame.time.get_ticks())

        for event in pygame.event.get():
            if event.type != pygame.KEYDOWN:
                continue
            mouse_x, mouse_y = pygame.mouse.get_pos()
            pygame.draw.circle(screen, RED, (mouse_x + 10, mouse_y + 10), 4)
            if current < len(points) and cursor_on_target(points[current], mouse_x, mouse_y):
                keeper.register_hit(points[current], pygame.time.get_ticks(), offset)
            else:
                keeper.miss()

        if not channel.get_busy():
            playing = False

    player.score = keeper.score
    return keeper.score