"""Drawing of the map dialog box and the loop waiting for the player's answer."""

from __future__ import annotations

import logging
from typing import Callable

import pygame

from .constants import FPS_MAP, HEIGHT, WIDTH, Activity
from .dialog import (
    BB8_SIZE,
    CHOICE_Y,
    NO_X,
    SIZE_BOX,
    TEXT_X,
    YES_X,
    Chooser,
    prompt_for,
)

BB8_IMAGE = "Map/bb8.png"
TEXT_COLOR = (255, 239, 56)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

_log = logging.getLogger(__name__)


class DialogClosed(Exception):
    """The window was closed while a dialog was open."""


def draw_dialog(
    surface: pygame.Surface,
    font: pygame.font.Font,
    chooser: Chooser,
    activity: Activity,
    bb8_image: pygame.Surface,
) -> None:
    """Draw the text box of an activity, with the yes/no choice when it has one."""
    text, with_choice = prompt_for(activity)
    box = pygame.Rect(0, HEIGHT - SIZE_BOX, WIDTH, SIZE_BOX)
    pygame.draw.rect(surface, BLACK, box)
    pygame.draw.rect(surface, WHITE, box, 2)
    surface.blit(font.render(text, True, TEXT_COLOR), (TEXT_X, HEIGHT - SIZE_BOX))
    if with_choice:
        surface.blit(font.render("oui", True, TEXT_COLOR), (YES_X, CHOICE_Y))
        surface.blit(font.render("non", True, TEXT_COLOR), (NO_X, CHOICE_Y))
        surface.blit(bb8_image, (chooser.x, CHOICE_Y))


def _load_bb8() -> pygame.Surface:
    try:
        image = pygame.image.load(BB8_IMAGE)
    except (pygame.error, OSError):
        _log.warning("failed to load image %s", BB8_IMAGE)
        image = pygame.Surface((BB8_SIZE, BB8_SIZE))
        image.fill(WHITE)
        return image
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def run_dialog(
    screen: pygame.Surface,
    font: pygame.font.Font,
    activity: Activity,
    redraw: Callable[[pygame.Surface], None],
) -> Activity | None:
    """Ask the question of an activity until Enter or Escape.

    ``redraw`` paints the scene behind the box. Returns the activity when
    "oui" is confirmed, None otherwise; raises DialogClosed on window close.
    """
    chooser = Chooser()
    bb8_image = _load_bb8()
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise DialogClosed
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return None
            if event.key == pygame.K_RETURN:
                return chooser.confirm(activity)
            if event.key == pygame.K_RIGHT:
                chooser.right()
            elif event.key == pygame.K_LEFT:
                chooser.left()
        clock.tick(FPS_MAP)
        screen.fill(BLACK)
        redraw(screen)
        draw_dialog(screen, font, chooser, activity, bb8_image)
        pygame.display.flip()