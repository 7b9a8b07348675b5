"""Reading hit objects out of rhythm-game beatmap files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

MAX_HIT_OBJECTS = 5000
BEATMAP_DIR = Path("osu") / "beatmaps"
SECTION = "[HitObjects]"

_BEATMAP_FILES = {
    1: "1meco.osu",
    2: "2Luke.osu",
    3: "3cantina_band.osu",
    4: "4mecoInsane.osu",
    5: "10galaxy_collapse_dont_even_try_you_hear_me.osu",
}

_HIT_OBJECT = re.compile(r"\s*([+-]?\d+),\s*([+-]?\d+),\s*([+-]?\d+)")


@dataclass(frozen=True)
class HitPoint:
    """A circle to click: position and time in milliseconds; timing 0 marks an empty slot."""

    x: int
    y: int
    timing: int


def beatmap_filename(difficulty: int) -> str:
    """File name of the beatmap for a difficulty from 1 to 5."""
    try:
        return _BEATMAP_FILES[difficulty]
    except KeyError:
        raise ValueError(f"invalid difficulty level: {difficulty}") from None


def parse_hit_objects(lines: Iterable[str]) -> list[HitPoint]:
    """Collect x, y and time of each hit object.

    Everything up to the line holding the section header is ignored, and so is
    the first line after it. Lines without three leading integers are skipped.
    At most MAX_HIT_OBJECTS points are kept.
    """
    stream = iter(lines)
    for line in stream:
        if SECTION in line:
            break
    else:
        return []
    next(stream, None)
    points: list[HitPoint] = []
    for line in stream:
        match = _HIT_OBJECT.match(line)
        if match is None:
            continue
        x, y, timing = (int(group) for group in match.groups())
        points.append(HitPoint(x, y, timing))
        if len(points) == MAX_HIT_OBJECTS:
            break
    return points


def load_beatmap(difficulty: int, directory: str | Path = BEATMAP_DIR) -> list[HitPoint]:
    """Read the hit objects of the beatmap for a difficulty."""
    path = Path(directory) / beatmap_filename(difficulty)
    with path.open(encoding="utf-8", errors="replace") as handle:
        return parse_hit_objects(handle)


def _half(value: int) -> int:
    return int(value / 2)


def scale_to_screen(points: Iterable[HitPoint]) -> list[HitPoint]:
    """Halve the playfield coordinates and shift them into the window."""
    return [HitPoint(300 + _half(p.x), 150 + _half(p.y), p.timing) for p in points]