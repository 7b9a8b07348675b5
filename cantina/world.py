"""The cantina map: walking around, talking to characters and launching mini-games."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import pygame

from .character import Player, Pose, Side, sprite_paths
from .collision import Background, load_collision_grid, map_position
from .constants import FPS_MAP, HEIGHT, NB_GAME, WIDTH, Activity, Key
from .dialog_view import DialogClosed, run_dialog
from .duck_game import DuckGame
from .rhythm_game import play_rhythm
from .scores import read_scores, write_scores
from .ships_game import play_ships
from .snake_game import play_snake
from .tournament import Outcome, check_win, compare_scores, record_best

MAP_DIR = Path("Map")
BACKGROUND_IMAGE = MAP_DIR / "mapv2large.png"
COLLISION_FILE = MAP_DIR / "collision.txt"
SCORE_FILE = MAP_DIR / "bestscore.txt"
TICKET_IMAGE = MAP_DIR / "money.png"
MUSIC = MAP_DIR / "cantina.wav"
FONT_FILE = MAP_DIR / "star_jedi" / "starjedi" / "Starjedi.ttf"
FONT_SIZE = 23

TEXT_COLOR = (255, 239, 56)
TICKET_COLOR = (255, 236, 59)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

ANIMATION_PERIOD = 3
END_DELAY_MS = 3000

# Index of each game in the best-score file.
SNAKE_RECORD = 0
RHYTHM_RECORD = 1
FISHING_RECORD = 2
SHIPS_RECORD = 3

_ARROWS = {
    pygame.K_UP: (Key.UP, Pose.UP),
    pygame.K_LEFT: (Key.LEFT, Pose.LEFT),
    pygame.K_RIGHT: (Key.RIGHT, Pose.RIGHT),
    pygame.K_DOWN: (Key.DOWN, Pose.DOWN),
}
_STANDING = {Key.UP: Pose.UP, Key.LEFT: Pose.LEFT, Key.RIGHT: Pose.RIGHT, Key.DOWN: Pose.DOWN}
_RELEASE_CHAIN = (Key.LEFT, Key.RIGHT, Key.DOWN)
_MATCHES = frozenset({Activity.FISHING, Activity.SNAKE, Activity.SHIPS, Activity.RHYTHM})

_log = logging.getLogger(__name__)


def rules_lines() -> list[str]:
    """The barman's explanation of how the cantina works."""
    return [
        "bonjour bienvenue dans la cantina !",
        "ici tu pourras trouver toutes sortes de mini jeux jouable à deux joueurs",
        "tu as un nombre limité de tickets une défaite te fait perdre un ticket ",
        "alors qu'une victoire ne t'en fait perdre aucun",
        "le perdant est celui qui n'a plus de ticket",
        "toute les interactions sur la map se font avec la touche entrée",
        "appuyez sur la touche entrée pour quitter...",
    ]


def score_lines(scores: Sequence[int]) -> list[str]:
    """The statistics screen listing the best score of each game."""
    if len(scores) < NB_GAME:
        raise ValueError(f"expected {NB_GAME} scores, got {len(scores)}")
    return [
        "voici les meilleurs scores sur chaque jeux :",
        f"snake : {scores[SNAKE_RECORD]}",
        f"osu : {scores[RHYTHM_RECORD]} ",
        f"peche au canard :  {scores[FISHING_RECORD]}",
        f"vaisseaux : {scores[SHIPS_RECORD]}",
        "appuyez sur la touche entrée pour quitter...",
    ]


def winner_message(player1: Player, player2: Player) -> str | None:
    """The closing message once a player is out of tickets, None while the match goes on."""
    outcome = check_win(player1, player2)
    if outcome is Outcome.SECOND_WINS:
        return f"{player2.name} a gagné la partie !!!"
    if outcome is Outcome.FIRST_WINS:
        return f"{player1.name} a gagné la partie !!!"
    if outcome is Outcome.NO_WINNER:
        return "Il n'y a pas de gagnant...."
    return None


def _load_image(path: str | Path, size: tuple[int, int]) -> pygame.Surface:
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        _log.warning("failed to load image %s", path)
        image = pygame.Surface(size)
        image.fill(TEXT_COLOR)
        return image
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_font() -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_FILE), FONT_SIZE)
    except (pygame.error, OSError):
        _log.warning("police %s doesn't load", FONT_FILE)
        return pygame.font.Font(None, FONT_SIZE)


def _start_music() -> pygame.mixer.Sound | None:
    if not pygame.mixer.get_init():
        return None
    try:
        sound = pygame.mixer.Sound(str(MUSIC))
    except (pygame.error, OSError):
        _log.warning("music %s doesn't load", MUSIC)
        return None
    sound.play(loops=-1)
    return sound


def _release(keys: set[Key], player: Player, key: Key) -> None:
    if key is Key.UP:
        if Key.UP in keys:
            keys.discard(Key.UP)
            player.image = Pose.UP
        return
    if key is not Key.ENTER:
        for held in _RELEASE_CHAIN[_RELEASE_CHAIN.index(key):]:
            if held in keys:
                keys.discard(held)
                player.image = _STANDING[held]
                return
    keys.discard(Key.ENTER)


def _draw_tickets(screen, font, player1: Player, player2: Player, ticket) -> None:
    for left, player in ((800, player1), (1000, player2)):
        box = pygame.Rect(left, 0, 200, 50)
        pygame.draw.rect(screen, BLACK, box)
        pygame.draw.rect(screen, WHITE, box, 1)
        screen.blit(font.render(player.name, True, TICKET_COLOR), (left + 10, 10))
        screen.blit(font.render(str(player.ticket), True, TICKET_COLOR), (left + 180, 10))
        screen.blit(ticket, (left + 150, 18))


def _show_lines(screen, font, lines: list[str], x: int, ys: Sequence[int]) -> bool:
    """Show a full-screen text until Enter; returns False when the window is closed."""
    screen.fill(BLACK)
    pygame.draw.rect(screen, WHITE, pygame.Rect(0, 0, WIDTH, HEIGHT), 2)
    for text, y in zip(lines, ys):
        screen.blit(font.render(text, True, TEXT_COLOR), (x, y))
    pygame.display.flip()
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            return True


def _play_match(screen, font, activity: Activity, active, other, player1, player2, scores) -> None:
    if activity is Activity.FISHING:
        DuckGame(screen).run(active)
        pygame.event.clear()
        DuckGame(screen).run(other)
        pygame.event.clear()
        compare_scores(player1, player2)
        if record_best(scores, FISHING_RECORD, player1, player2, True):
            write_scores(scores, SCORE_FILE)
    elif activity is Activity.SNAKE:
        play_snake(screen, active, font)
        pygame.event.clear()
        play_snake(screen, other, font)
        pygame.event.clear()
        compare_scores(player1, player2)
        if record_best(scores, SNAKE_RECORD, player1, player2, True):
            write_scores(scores, SCORE_FILE)
    elif activity is Activity.SHIPS:
        play_ships(screen, active, other)
        pygame.event.clear()
        if record_best(scores, SHIPS_RECORD, player1, player2, False):
            write_scores(scores, SCORE_FILE)
        pygame.mouse.set_visible(True)
    elif activity is Activity.RHYTHM:
        play_rhythm(screen, active)
        pygame.event.clear()
        play_rhythm(screen, other)
        compare_scores(player1, player2)
        if record_best(scores, RHYTHM_RECORD, player1, player2, True):
            write_scores(scores, SCORE_FILE)
        pygame.mouse.set_visible(True)


def play_world(screen: pygame.Surface, player1: Player, player2: Player) -> Outcome:
    """Run the cantina until a player runs out of tickets or the window closes."""
    player1.reset()
    player2.reset()
    player2.side = Side.DARK if player1.side is Side.LIGHT else Side.LIGHT
    side_images = {
        side: {pose: _load_image(path, (32, 48)) for pose, path in sprite_paths(side).items()}
        for side in Side
    }

    background = Background()
    background_image = _load_image(BACKGROUND_IMAGE, (WIDTH, HEIGHT))
    scores = read_scores(SCORE_FILE)
    grid = load_collision_grid(COLLISION_FILE)
    position = map_position(background)
    font = _load_font()
    ticket = _load_image(TICKET_IMAGE, (20, 20))
    music = _start_music()

    players = [player1, player2]
    keys: set[Key] = set()
    clock = pygame.time.Clock()
    frame = 0

    def draw_scene(surface: pygame.Surface) -> None:
        active = players[0]
        surface.blit(background_image, (background.x, background.y))
        surface.blit(side_images[active.side][active.image], (active.x, active.y))

    running = True
    while running:
        active = players[0]
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in _ARROWS:
                    key, pose = _ARROWS[event.key]
                    keys.clear()
                    keys.add(key)
                    active.direction = pose
                elif event.key == pygame.K_RETURN:
                    keys.add(Key.ENTER)
            elif event.type == pygame.KEYUP:
                if event.key in _ARROWS:
                    _release(keys, active, _ARROWS[event.key][0])
                elif event.key == pygame.K_RETURN:
                    _release(keys, active, Key.ENTER)
        if not running:
            break
        clock.tick(FPS_MAP)
        frame += 1
        if grid.blocked(active, position, keys):
            continue

        activity = grid.event_at(active, position, background, keys)
        screen.fill(BLACK)
        screen.blit(background_image, (background.x, background.y))
        _draw_tickets(screen, font, player1, player2, ticket)
        if frame % ANIMATION_PERIOD == 0:
            active.animate(keys)
        position = map_position(background)
        background.move(keys)
        screen.blit(side_images[active.side][active.image], (active.x, active.y))

        chosen = None
        if activity:
            try:
                chosen = run_dialog(screen, font, activity, draw_scene)
            except DialogClosed:
                running = False
                break
            keys.discard(Key.ENTER)

        if chosen is Activity.JACKPOT or chosen is Activity.RACE:
            chosen = None
        elif chosen is Activity.BARMAN:
            running = _show_lines(screen, font, rules_lines(), 10, (10, 30, 50, 70, 90, 110, 150))
            pygame.event.clear()
            chosen = None
        elif chosen is Activity.STATS:
            scores = read_scores(SCORE_FILE)
            running = _show_lines(screen, font, score_lines(scores), 20, (10, 50, 90, 130, 170, 210))
            chosen = None

        if chosen in _MATCHES:
            if music is not None:
                music.stop()
            _play_match(screen, font, chosen, players[0], players[1], player1, player2, scores)
            players.reverse()
            keys.clear()
            music = _start_music()
            message = winner_message(player1, player2)
            if message is not None:
                screen.fill(BLACK)
                screen.blit(font.render(message, True, TEXT_COLOR), (450, 300))
                pygame.display.flip()
                pygame.time.wait(END_DELAY_MS)
                running = False
        pygame.display.flip()

    if music is not None:
        music.stop()
    return check_win(player1, player2)