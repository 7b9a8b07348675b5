"""Fishing game: drag Jar Jar ducks onto the boat before time runs out."""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pygame

from .character import Player
from .constants import HEIGHT, WIDTH
from .ducks import (
    BLACK,
    BLUE,
    BOAT_IMAGE,
    BTN_LEFT,
    CANE_IMAGE,
    DUCK_IMAGES,
    FPS_COIN,
    WATER_IMAGE,
    YELLOW,
    Boat,
    Duck,
    clamp_ducks,
    create_ducks,
    move_ducks,
    spawn_ducks,
)

GAME_SECONDS = 60
CANE_OFFSET = 20
FONT_DIR = Path("JarJar") / "Fonts"
MUSIC = Path("JarJar") / "Audio" / "AcrosstheStars.ogg"

_DUCK_SIZE = (80, 60)
_BOAT_SIZE = (150, 80)
_CANE_SIZE = (40, 40)

_log = logging.getLogger(__name__)


def _load_image(path: str | Path, size: tuple[int, int]) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        _log.warning("failed to load image %s", path)
        image = pygame.Surface(size)
        image.fill(YELLOW)
        return image
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_font(name: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_DIR / name), size)
    except (pygame.error, OSError):
        _log.warning("failed to load font %s", name)
        return pygame.font.Font(None, size)


class DuckGame:
    """One player's fishing round: ducks, boat, rod and the countdown."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        frames = [_load_image(path, _DUCK_SIZE) for path in DUCK_IMAGES]
        self.duck_frames = [pygame.transform.flip(frame, True, False) for frame in frames]
        self.boat_image = pygame.transform.flip(_load_image(BOAT_IMAGE, _BOAT_SIZE), True, False)
        self.cane_image = _load_image(CANE_IMAGE, _CANE_SIZE)
        self.water = _load_image(WATER_IMAGE, (WIDTH, HEIGHT))
        self.boat = Boat(width=self.boat_image.get_width(), height=self.boat_image.get_height())
        self.ducks: list[Duck] = create_ducks(
            frames[0].get_width(), frames[-1].get_height(), self._rng()
        )
        self.cane = (0, 0)
        self.remaining = GAME_SECONDS
        self.selected: int | None = None
        self.offset = (0, 0)
        self.paused = False

    @staticmethod
    def _rng() -> random.Random:
        return random.Random()

    def grab(self, x: int, y: int) -> int | None:
        """Pick the last duck under the point; returns its index."""
        for index, duck in enumerate(self.ducks):
            if duck.contains(x, y):
                self.selected = index
                self.offset = (x - duck.x, y - duck.y)
        return self.selected

    def release(self) -> None:
        self.selected = None

    def tick(self, mouse_x: int, mouse_y: int) -> bool:
        """Follow the mouse, score a duck dropped on the boat; returns whether one scored."""
        self.cane = (mouse_x - CANE_OFFSET, mouse_y - CANE_OFFSET)
        scored = False
        if self.selected is not None:
            duck = self.ducks[self.selected]
            duck.x = mouse_x - self.offset[0]
            duck.y = mouse_y - self.offset[1]
            if duck.on_boat(self.boat) and not duck.counted:
                self.boat.score += 1
                duck.active = False
                self.selected = None
                scored = True
        spawn_ducks(self.ducks)
        clamp_ducks(self.ducks)
        return scored

    def second_elapsed(self) -> bool:
        """Count down one second; returns True when time is up."""
        self.remaining -= 1
        return self.remaining == 0

    def _draw(self, fonts) -> None:
        score_font, time_font, _ = fonts
        screen = self.screen
        screen.fill(BLUE)
        screen.blit(self.water, (0, 0))
        screen.blit(score_font.render(f"Score: {self.boat.score}", True, BLACK), (50, 50))
        screen.blit(time_font.render(f"temps: {self.remaining}", True, BLACK), (50, 550))
        screen.blit(self.boat_image, (self.boat.x, self.boat.y))
        for duck in self.ducks:
            if duck.active:
                screen.blit(self.duck_frames[duck.advance_frame()], (duck.x, duck.y))
        screen.blit(self.cane_image, self.cane)

    def _show_pause(self, fonts) -> None:
        score_font, _, title_font = fonts
        for font, text, y in (
            (title_font, "Game Paused", HEIGHT // 4),
            (score_font, "press P to resume", HEIGHT // 2),
        ):
            surface = font.render(text, True, YELLOW)
            self.screen.blit(surface, (WIDTH // 2 - surface.get_width() // 2, y))
        pygame.display.flip()

    def run(self, player: Player) -> int:
        """Play until time is up or the player quits; stores and returns the score."""
        pygame.display.set_caption("JarJar le filou")
        fonts = (
            _load_font("Starjedi.ttf", 30),
            _load_font("Starjout.ttf", 30),
            _load_font("Starjhol.ttf", 50),
        )
        music = None
        if pygame.mixer.get_init():
            try:
                music = pygame.mixer.Sound(str(MUSIC))
                music.play(loops=-1)
            except (pygame.error, OSError):
                _log.warning("failed to load sound %s", MUSIC)
        pygame.mouse.set_visible(False)
        clock = pygame.time.Clock()
        elapsed = 0
        over = False
        while not over:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    over = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_p:
                        self.paused = not self.paused
                        if self.paused:
                            self._show_pause(fonts)
                    elif event.key == pygame.K_ESCAPE:
                        over = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == BTN_LEFT:
                    self.grab(*event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == BTN_LEFT:
                    self.release()
            if over:
                break
            delta = clock.tick(FPS_COIN)
            if self.paused:
                continue
            elapsed += delta
            while elapsed >= 1000 and not over:
                elapsed -= 1000
                over = self.second_elapsed()
            if over:
                break
            self.tick(*pygame.mouse.get_pos())
            self._draw(fonts)
            move_ducks(self.ducks)
            pygame.display.flip()
        if music is not None:
            music.stop()
        player.score = self.boat.score
        return self.boat.score