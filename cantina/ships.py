"""Enemy ships of the turret game: spawning, wandering across the bands, being shot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Sequence

NB_SHIPS = 25
PICTURE_DIR = "Ships/Pictures"

# Crosshair images are 38 pixels wide; the shot lands in their centre.
CROSSHAIR_CENTER = 19

# Ships fly in three horizontal bands of the view, each narrower than the one above.
TOP = 10
BAND1_BOTTOM = 185
BAND2_BOTTOM = 335
BAND3_BOTTOM = 410
BAND1_LEFT, BAND1_RIGHT = 65, 1135
BAND2_LEFT, BAND2_RIGHT = 250, 950
BAND3_LEFT, BAND3_RIGHT = 350, 850
SPAWN_HEIGHT = 400
SPAWN_WIDTH = 1200

_DIMENSIONS = {1: 100, 2: 75, 3: 50}
_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _source(rng: random.Random | None):
    return rng if rng is not None else random


@dataclass
class Ship:
    """A square ship; ``size`` 1, 2 or 3 picks a 100, 75 or 50 pixel sprite."""

    size: int
    speed: int
    x: int = 0
    y: int = 0
    destroyed: bool = False

    def __post_init__(self) -> None:
        if self.size not in _DIMENSIONS:
            raise ValueError(f"invalid ship size: {self.size}")

    @property
    def width(self) -> int:
        return _DIMENSIONS[self.size]

    @property
    def length(self) -> int:
        return _DIMENSIONS[self.size]

    @property
    def image_path(self) -> str:
        return f"{PICTURE_DIR}/ship{self.width}.png"

    @property
    def explosion_path(self) -> str:
        return f"{PICTURE_DIR}/explosion{self.width}.png"

    def visible(self) -> bool:
        """True when an intact ship lies inside one of the three bands."""
        if self.destroyed:
            return False
        x, y, w = self.x, self.y, self.width
        if TOP <= y and y + w <= BAND1_BOTTOM and x >= BAND1_LEFT and x + w <= BAND1_RIGHT:
            return True
        if (
            BAND1_BOTTOM < y + w <= BAND2_BOTTOM
            and BAND2_LEFT <= x + w <= BAND2_RIGHT
        ):
            return True
        return (
            y + w > BAND2_BOTTOM
            and y + self.length <= BAND3_BOTTOM
            and BAND3_LEFT <= x + w <= BAND3_RIGHT
        )


def create_ships(rng: random.Random | None = None) -> list[Ship]:
    """A fresh fleet with random speeds from 1 to 4 and random sizes."""
    source = _source(rng)
    ships = []
    for _ in range(NB_SHIPS):
        speed = 1 + source.randrange(4)
        size = source.randrange(3) + 1
        ships.append(Ship(size=size, speed=speed))
    return ships


def spawn_ships(ships: Iterable[Ship], rng: random.Random | None = None) -> None:
    """Place every intact ship at a random spot of the band its height falls in."""
    source = _source(rng)
    for ship in ships:
        if ship.destroyed:
            continue
        ship.y = TOP + source.randrange(SPAWN_HEIGHT - ship.length)
        if TOP <= ship.y <= BAND1_BOTTOM:
            left = BAND1_LEFT
        elif BAND1_BOTTOM < ship.y <= BAND2_BOTTOM:
            left = BAND2_LEFT
        elif BAND2_BOTTOM < ship.y <= BAND3_BOTTOM:
            left = BAND3_LEFT
        else:
            continue
        ship.x = left + source.randrange(SPAWN_WIDTH - (left + ship.width))


def _wrap(ship: Ship) -> None:
    x, y, w = ship.x, ship.y, ship.width
    right = x + w
    in_band1 = TOP < y < BAND1_BOTTOM
    in_band2 = BAND1_BOTTOM < y < BAND2_BOTTOM
    in_band3 = BAND2_BOTTOM < y < BAND3_BOTTOM
    if x < BAND1_LEFT and in_band1:
        ship.x = BAND1_RIGHT - w
    elif right > BAND1_RIGHT and in_band1:
        ship.x = BAND1_LEFT
    elif x < BAND2_LEFT and in_band2:
        ship.x = BAND2_RIGHT - w
    elif right > BAND2_RIGHT and in_band2:
        ship.x = BAND2_LEFT
    elif x < BAND3_LEFT and in_band3:
        ship.x = BAND3_RIGHT - w
    elif right > BAND3_RIGHT and in_band3:
        ship.x = BAND3_LEFT
    elif y < TOP:
        if BAND1_LEFT < x < BAND2_LEFT or BAND2_RIGHT < right < BAND1_RIGHT:
            ship.y = BAND1_BOTTOM
        elif BAND2_LEFT < x < BAND3_LEFT or BAND3_RIGHT < right < BAND2_RIGHT:
            ship.y = BAND2_BOTTOM
        elif BAND3_LEFT < x < BAND3_RIGHT:
            ship.y = BAND3_BOTTOM
    elif y > BAND1_BOTTOM and (
        BAND1_LEFT < x < BAND2_LEFT or BAND2_RIGHT < right < BAND1_RIGHT
    ):
        ship.y = TOP
    elif y > BAND2_BOTTOM and (
        BAND2_LEFT < x < BAND3_LEFT or BAND3_RIGHT < right < BAND2_RIGHT
    ):
        ship.y = TOP
    elif y > BAND3_BOTTOM and BAND3_LEFT < x < BAND3_RIGHT:
        ship.y = TOP


def move_ships(ships: Iterable[Ship], rng: random.Random | None = None) -> None:
    """Step every intact ship in a random direction, wrapping at the band edges."""
    source = _source(rng)
    for ship in ships:
        if ship.destroyed:
            continue
        dx, dy = _STEPS[source.randrange(4)]
        ship.x += dx * ship.speed
        ship.y += dy * ship.speed
        _wrap(ship)


def shoot(ships: Sequence[Ship], x: int, y: int) -> list[Ship]:
    """Fire with the crosshair's top-left corner at (x, y); returns the ships hit."""
    aim_x = x + CROSSHAIR_CENTER
    aim_y = y + CROSSHAIR_CENTER
    hit = []
    for ship in ships:
        if ship.destroyed:
            continue
        if ship.x <= aim_x <= ship.x + ship.width and ship.y <= aim_y <= ship.y + ship.length:
            ship.destroyed = True
            hit.append(ship)
    return hit


def destroyed_count(ships: Iterable[Ship]) -> int:
    return sum(1 for ship in ships if ship.destroyed)