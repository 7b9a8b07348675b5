"""Scrolling map background and the character grid of walls and doors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Collection

from .character import Player, Pose
from .constants import (
    BG_X,
    BG_Y,
    CELL_SIZE,
    COLLISION_HEIGHT,
    COLLISION_WIDTH,
    ENTER_BAR,
    ENTER_SHIP,
    ENTER_TOILET,
    SPEED_BG,
    START_X,
    START_Y,
    Activity,
    Key,
)

BACKGROUND_IMAGE = "Map/mapv2large.png"
WALL = "0"

# (cell, facing direction, vertical shift of the background)
_DOORS = (
    ("2", Pose.DOWN, -ENTER_BAR),
    ("3", Pose.UP, ENTER_BAR),
    ("4", Pose.UP, ENTER_SHIP),
    ("5", Pose.DOWN, -ENTER_SHIP),
    ("6", Pose.UP, ENTER_TOILET),
    ("7", Pose.DOWN, -ENTER_TOILET),
)

_ACTIVITIES = {
    "8": Activity.FISHING,
    "S": Activity.SNAKE,
    "C": Activity.SHIPS,
    "M": Activity.RHYTHM,
    "Y": Activity.JACKPOT,
    "9": Activity.RACE,
    "W": Activity.BARMAN,
    "P": Activity.STATS,
}

_NEIGHBOURS = {
    Pose.DOWN: (Key.DOWN, 0, 1),
    Pose.UP: (Key.UP, 0, -1),
    Pose.RIGHT: (Key.RIGHT, 1, 0),
    Pose.LEFT: (Key.LEFT, -1, 0),
}


@dataclass
class Background:
    """Offset of the map image; it scrolls opposite to the player."""

    x: int = BG_X
    y: int = BG_Y

    def move(self, keys: Collection[Key]) -> None:
        if Key.RIGHT in keys:
            self.x -= SPEED_BG
        if Key.LEFT in keys:
            self.x += SPEED_BG
        if Key.UP in keys:
            self.y += SPEED_BG
        if Key.DOWN in keys:
            self.y -= SPEED_BG


def map_position(background: Background) -> tuple[int, int]:
    """Grid cell (column, row) under the player for a background offset."""
    column = int(abs(background.x - START_X) / CELL_SIZE)
    row = int(abs(background.y - START_Y) / CELL_SIZE)
    return column, row


@dataclass(frozen=True)
class CollisionGrid:
    """Rows of single-character cells; an empty string marks a missing cell."""

    rows: tuple[str, ...]

    def cell(self, column: int, row: int) -> str:
        if not 0 <= row < len(self.rows):
            return ""
        line = self.rows[row]
        if not 0 <= column < len(line):
            return ""
        return line[column]

    def blocked(self, player: Player, position: tuple[int, int], keys: Collection[Key]) -> bool:
        """True when the player walks into a wall cell next to him."""
        neighbour = _NEIGHBOURS.get(player.direction)
        if neighbour is None:
            return False
        key, dx, dy = neighbour
        column, row = position
        return key in keys and self.cell(column + dx, row + dy) == WALL

    def event_at(
        self,
        player: Player,
        position: tuple[int, int],
        background: Background,
        keys: Collection[Key],
    ) -> Activity | None:
        """Handle Enter on the current cell: go through a door or return an activity."""
        if Key.ENTER not in keys:
            return None
        here = self.cell(*position)
        for cell, facing, shift in _DOORS:
            if here == cell and player.direction is facing:
                background.y += shift
                return None
        return _ACTIVITIES.get(here)


def load_collision_grid(path: str | Path) -> CollisionGrid:
    """Read the grid as a flat character stream, line breaks included."""
    text = Path(path).read_text(encoding="latin-1")
    size = COLLISION_WIDTH * COLLISION_HEIGHT
    text = text[:size]
    rows = tuple(
        text[start:start + COLLISION_WIDTH]
        for start in range(0, COLLISION_WIDTH * COLLISION_HEIGHT, COLLISION_WIDTH)
    )
    return CollisionGrid(rows)