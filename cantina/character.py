"""The two playable characters walking around the cantina map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Collection

from .constants import NB_TICKET, START_X, START_Y, Key


class Pose(IntEnum):
    """Sprite frames: a standing pose and two walking steps per direction."""

    DOWN = 0
    DOWN_STEP1 = 1
    DOWN_STEP2 = 2
    LEFT = 3
    LEFT_STEP1 = 4
    LEFT_STEP2 = 5
    RIGHT = 6
    RIGHT_STEP1 = 7
    RIGHT_STEP2 = 8
    UP = 9
    UP_STEP1 = 10
    UP_STEP2 = 11


class Side(IntEnum):
    """Light side plays Luke, dark side plays Vader."""

    LIGHT = 0
    DARK = 1


_LUKE_FILES = (2, 1, 3, 5, 4, 6, 8, 7, 9, 11, 10, 12)


def sprite_paths(side: Side) -> dict[Pose, str]:
    """Relative image path of every pose for a side."""
    if side is Side.LIGHT:
        return {pose: f"sprites/Luke/luke{number}.png" for pose, number in zip(Pose, _LUKE_FILES)}
    return {pose: f"sprites/Vador/Vador{pose.value + 1}.png" for pose in Pose}


_WALK_STEPS = (
    (Key.UP, Pose.UP_STEP1, Pose.UP_STEP2),
    (Key.LEFT, Pose.LEFT_STEP1, Pose.LEFT_STEP2),
    (Key.RIGHT, Pose.RIGHT_STEP1, Pose.RIGHT_STEP2),
    (Key.DOWN, Pose.DOWN_STEP1, Pose.DOWN_STEP2),
)


@dataclass
class Player:
    """A player: name, side, position on screen, tickets and last score."""

    name: str = ""
    side: Side = Side.LIGHT
    x: int = START_X
    y: int = START_Y
    direction: Pose = Pose.DOWN
    state: int = 0
    ticket: int = NB_TICKET
    score: int = 0
    image: Pose = field(default=Pose.DOWN)

    def reset(self) -> None:
        """Put the player back at the start with full tickets."""
        self.x = START_X
        self.y = START_Y
        self.direction = Pose.DOWN
        self.state = 0
        self.score = 0
        self.image = Pose.DOWN
        self.ticket = NB_TICKET

    def animate(self, keys: Collection[Key]) -> None:
        """Alternate between the two walking frames of the pressed direction."""
        for key, first, second in _WALK_STEPS:
            if key in keys:
                break
        else:
            return
        if self.state == 0:
            self.image = first
            self.state = 1
        else:
            self.image = second
            self.state = 0