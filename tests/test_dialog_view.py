import os

import pygame
import pytest

from cantina.constants import HEIGHT, WIDTH, Activity
from cantina.dialog import BB8_SIZE, CHOICE_Y, SIZE_BOX, TEXT_SIZE, Chooser
from cantina.dialog_view import DialogClosed, draw_dialog, run_dialog

RED = (200, 0, 0)
GREEN = (0, 200, 0)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, TEXT_SIZE)


@pytest.fixture
def surface():
    canvas = pygame.Surface((WIDTH, HEIGHT))
    canvas.fill(RED)
    return canvas


@pytest.fixture
def bb8():
    image = pygame.Surface((BB8_SIZE, BB8_SIZE))
    image.fill(GREEN)
    return image


@pytest.fixture
def screen():
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.font.init()
    display = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.event.clear()
    yield display
    pygame.display.quit()


def color_at(canvas, x, y):
    return tuple(canvas.get_at((x, y)))[:3]


def test_box_drawn_at_bottom(surface, font, bb8):
    draw_dialog(surface, font, Chooser(), Activity.SHIPS, bb8)
    assert color_at(surface, 0, HEIGHT - SIZE_BOX - 1) == RED
    assert color_at(surface, 0, HEIGHT - SIZE_BOX) == (255, 255, 255)
    assert color_at(surface, WIDTH // 2, HEIGHT - 5) == (0, 0, 0)


def test_droid_shown_next_to_yes(surface, font, bb8):
    chooser = Chooser()
    draw_dialog(surface, font, chooser, Activity.FISHING, bb8)
    assert color_at(surface, chooser.x + 5, CHOICE_Y + 5) == GREEN


def test_droid_follows_no(surface, font, bb8):
    chooser = Chooser()
    chooser.right()
    draw_dialog(surface, font, chooser, Activity.STATS, bb8)
    assert color_at(surface, chooser.x + 5, CHOICE_Y + 5) == GREEN
    assert color_at(surface, Chooser().x + 5, CHOICE_Y + 5) != GREEN


def test_text_only_prompt_has_no_droid(surface, font, bb8):
    chooser = Chooser()
    draw_dialog(surface, font, chooser, Activity.JACKPOT, bb8)
    assert color_at(surface, chooser.x + 5, CHOICE_Y + 5) == (0, 0, 0)


def post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_enter_confirms_yes(screen):
    font = pygame.font.Font(None, TEXT_SIZE)
    post_key(pygame.K_RETURN)
    assert run_dialog(screen, font, Activity.SHIPS, lambda s: None) is Activity.SHIPS


def test_right_then_enter_declines(screen):
    font = pygame.font.Font(None, TEXT_SIZE)
    post_key(pygame.K_RIGHT)
    post_key(pygame.K_RETURN)
    assert run_dialog(screen, font, Activity.SNAKE, lambda s: None) is None


def test_escape_declines(screen):
    font = pygame.font.Font(None, TEXT_SIZE)
    post_key(pygame.K_ESCAPE)
    assert run_dialog(screen, font, Activity.RHYTHM, lambda s: None) is None


def test_close_raises(screen):
    font = pygame.font.Font(None, TEXT_SIZE)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(DialogClosed):
        run_dialog(screen, font, Activity.BARMAN, lambda s: None)