"""Turret game: each player in turn shoots down the whole fleet as fast as possible."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .character import Player
from .constants import HEIGHT, WIDTH
from .ships import (
    NB_SHIPS,
    PICTURE_DIR,
    Ship,
    create_ships,
    destroyed_count,
    move_ships,
    shoot,
    spawn_ships,
)

FPS = 60
TURRET_Y = 159
YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)

PICTURES = Path(PICTURE_DIR)
TURRET_IMAGE = PICTURES / "POV_Ship.png"
BACKGROUND_IMAGE = PICTURES / "background.png"
CROSSHAIR_IMAGE = PICTURES / "crosshair.png"
FONT_FILE = PICTURES / "Starjedi.ttf"
MUSIC = Path("Ships") / "themeship.wav"

_log = logging.getLogger(__name__)


def _initial_scores() -> list[int]:
    return [0, 0]


@dataclass
class ShipsMatch:
    """Seconds spent by each player to destroy the fleet; fewer is better."""

    scores: list[int] = field(default_factory=_initial_scores)
    first_turn: bool = True
    over: bool = False

    @property
    def current(self) -> int:
        """Index of the player currently shooting."""
        return 0 if self.first_turn else 1

    def tick_second(self) -> None:
        """One more second for the player currently shooting."""
        if not self.over:
            self.scores[self.current] += 1

    def finish_turn(self, player1: Player, player2: Player) -> bool:
        """Record the current player's time; returns True once both have played."""
        if self.first_turn:
            player1.score = self.scores[0]
            self.first_turn = False
            return False
        player2.score = self.scores[1]
        self.over = True
        return True

    def settle(self, player1: Player, player2: Player) -> str:
        """Take a ticket from the slower player (both on a tie); returns the message."""
        if not self.over:
            raise RuntimeError("the match is not over")
        first, second = self.scores
        if first < second:
            player2.ticket -= 1
            return f"{player1.name} wins"
        if first > second:
            player1.ticket -= 1
            return f"{player2.name} wins"
        player1.ticket -= 1
        player2.ticket -= 1
        return "draw"


def _load_image(path: Path, size: tuple[int, int]) -> pygame.Surface:
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


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_FILE), size)
    except (pygame.error, OSError):
        _log.warning("failed to load font %s", FONT_FILE)
        return pygame.font.Font(None, size)


def _start_music() -> pygame.mixer.Sound | None:
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(MUSIC))
    except (pygame.error, OSError):
        _log.warning("failed to load sound %s", MUSIC)
        return None
    sound.play(loops=-1)
    return sound


def _draw_view(screen, background, turret) -> None:
    screen.fill(BLACK)
    screen.blit(background, (0, 0))
    screen.blit(turret, (0, TURRET_Y))


def _draw_centered(screen, font, text: str) -> None:
    surface = font.render(text, True, YELLOW)
    x = WIDTH // 2 - surface.get_width() // 2
    y = HEIGHT // 2 - font.get_ascent()
    screen.blit(surface, (x, y))


def _announce(screen, background, turret, font, text: str, seconds: float) -> None:
    _draw_view(screen, background, turret)
    _draw_centered(screen, font, text)
    pygame.display.flip()
    pygame.time.wait(int(seconds * 1000))


def _start_turn(screen, background, turret, font, big_font, name: str) -> None:
    _announce(screen, background, turret, font, f"c'est au tour de {name}", 2)
    for text in ("3", "2", "1", "game start !"):
        _announce(screen, background, turret, big_font, text, 1)


def play_ships(screen: pygame.Surface, player1: Player, player2: Player) -> ShipsMatch:
    """Play both turns of the turret game and settle the tickets."""
    font = _load_font(18)
    big_font = _load_font(35)
    turret = _load_image(TURRET_IMAGE, (WIDTH, HEIGHT - TURRET_Y))
    background = _load_image(BACKGROUND_IMAGE, screen.get_size())
    crosshair = _load_image(CROSSHAIR_IMAGE, (38, 38))
    sprites: dict[str, pygame.Surface] = {}

    def sprite(path: str, ship: Ship) -> pygame.Surface:
        if path not in sprites:
            sprites[path] = _load_image(Path(path), (ship.width, ship.length))
        return sprites[path]

    music = _start_music()
    pygame.mouse.set_visible(False)
    _draw_view(screen, background, turret)
    _draw_centered(screen, big_font, "press space to start")
    pygame.display.flip()

    match = ShipsMatch()
    players = (player1, player2)
    ships: list[Ship] = []
    aim = (0, 0)
    started = in_game = paused = False
    frames = 0
    running = True
    clock = pygame.time.Clock()

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                aim = event.pos
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for ship in shoot(ships, *aim):
                    screen.blit(sprite(ship.explosion_path, ship), (ship.x, ship.y))
            elif event.type == pygame.KEYDOWN and not paused:
                if event.key == pygame.K_p:
                    paused = True
                elif event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    screen.fill(BLACK)
                    started = True
            elif event.type == pygame.KEYUP and event.key == pygame.K_p:
                paused = False
        if not running:
            break
        clock.tick(FPS)
        if paused:
            _draw_centered(screen, font, "pause")
            pygame.display.flip()
            continue
        if not started:
            pygame.display.flip()
            continue

        frames += 1
        if not in_game:
            _start_turn(screen, background, turret, font, big_font, players[match.current].name)
            ships = create_ships()
            spawn_ships(ships)
            pygame.event.clear()
            in_game = True

        _draw_view(screen, background, turret)
        for ship in ships:
            if ship.visible():
                screen.blit(sprite(ship.image_path, ship), (ship.x, ship.y))
        move_ships(ships)
        screen.blit(crosshair, aim)
        destroyed = destroyed_count(ships)
        lines = (
            (f"score joueur 1: {match.scores[0]}", (30, 520)),
            (f"score joueur 2: {match.scores[1]}", (30, 545)),
            (f"vaisseaux détruits : {destroyed}", (940, 525)),
        )
        for text, (x, y) in lines:
            screen.blit(font.render(text, True, YELLOW), (x, y - font.get_ascent()))
        pygame.display.flip()

        if destroyed == NB_SHIPS:
            if match.finish_turn(player1, player2):
                message = match.settle(player1, player2)
                _announce(screen, background, turret, font, message, 2)
                running = False
            else:
                in_game = False
        if frames % FPS == 0:
            match.tick_second()

    if music is not None:
        music.stop()
    return match