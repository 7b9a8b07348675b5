"""Jar Jar ducks drifting across the water, and the boat they must be dropped on."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable

from .constants import HEIGHT, WIDTH

NB_MAX_JARJAR = 5
BTN_LEFT = 1
HEIGHT_MAX = 500
FPS_COIN = 60.0
FRAME_TICKS = 20
FRAME_COUNT = 4

BLUE = (128, 197, 222)
BLACK = (0, 0, 0)
YELLOW = (255, 232, 31)

IMAGE_DIR = "JarJar/Images"
DUCK_IMAGES = tuple(f"{IMAGE_DIR}/JarJar{number}.png" for number in range(1, FRAME_COUNT + 1))
BOAT_IMAGE = f"{IMAGE_DIR}/pixelBoat.png"
CANE_IMAGE = f"{IMAGE_DIR}/fishingRod.png"
WATER_IMAGE = f"{IMAGE_DIR}/pixelWater.jpg"


def _source(rng: random.Random | None):
    return rng if rng is not None else random


@dataclass
class Boat:
    """The boat docked at the bottom centre; it keeps the score."""

    width: int
    height: int
    x: int | None = None
    y: int | None = None
    score: int = 0

    def __post_init__(self) -> None:
        if self.x is None:
            self.x = WIDTH // 2
        if self.y is None:
            self.y = HEIGHT - self.height


@dataclass
class Duck:
    """A duck swimming leftwards; ``active`` ducks are on the water."""

    width: int
    height: int
    speed: int
    x: int = 0
    y: int = 0
    active: bool = False
    counted: bool = False
    frame: int = 0
    ticks: int = 0

    def contains(self, x: int, y: int) -> bool:
        """True when a point lies on the duck, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def on_boat(self, boat: Boat) -> bool:
        """True when the duck's top-left corner is over the boat."""
        return boat.x <= self.x <= boat.x + boat.width and boat.y <= self.y <= boat.y + boat.height

    def advance_frame(self) -> int:
        """Count one drawn tick and return the animation frame to draw.

        The frame changes every FRAME_TICKS ticks; the last frame is shown
        once and the animation starts over.
        """
        self.ticks += 1
        if self.ticks >= FRAME_TICKS:
            self.frame += 1
            self.ticks = 0
        drawn = self.frame
        if self.frame == FRAME_COUNT - 1:
            self.frame = 0
        return drawn


def create_ducks(width: int, height: int, rng: random.Random | None = None) -> list[Duck]:
    """Inactive ducks of the given sprite size, with speeds from 3 to 12."""
    source = _source(rng)
    return [
        Duck(width=width, height=height, speed=3 + source.randrange(10))
        for _ in range(NB_MAX_JARJAR)
    ]


def move_ducks(ducks: Iterable[Duck]) -> None:
    """Move active ducks left; those leaving the screen become inactive."""
    for duck in ducks:
        if duck.active:
            duck.x -= duck.speed
            if duck.x < 0:
                duck.active = False


def spawn_ducks(ducks: Iterable[Duck], rng: random.Random | None = None) -> None:
    """Bring every inactive duck back at the right edge, at a random height."""
    source = _source(rng)
    for duck in ducks:
        if duck.active:
            continue
        span = HEIGHT_MAX - duck.height * 2
        if span <= 0:
            raise ValueError(f"duck height {duck.height} leaves no room to spawn")
        duck.x = WIDTH - duck.width
        duck.y = duck.height + source.randrange(span)
        duck.active = True


def clamp_ducks(ducks: Iterable[Duck]) -> None:
    """Keep every duck inside the window."""
    for duck in ducks:
        if duck.x < 0:
            duck.x = 0
        if duck.y < 0:
            duck.y = 0
        if duck.x + duck.width > WIDTH:
            duck.x = WIDTH - duck.width
        if duck.y + duck.height > HEIGHT:
            duck.y = HEIGHT - duck.height