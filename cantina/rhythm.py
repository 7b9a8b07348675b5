"""Notes on screen and scoring of the rhythm game."""

from __future__ import annotations

from dataclasses import dataclass, field

from .beatmap import HitPoint

WINDOW_SIZE = 20
EXPIRY = 500
EMPTY = HitPoint(0, 0, 0)

_TARGET_BEFORE = 54
_TARGET_AFTER = 74


def _empty_slots() -> list[HitPoint]:
    return [EMPTY] * WINDOW_SIZE


@dataclass
class VisibleNotes:
    """A fixed window of slots holding the circles currently shown."""

    slots: list[HitPoint] = field(default_factory=_empty_slots)

    def push(self, point: HitPoint) -> None:
        """Put a note in the last slot, then shift everything one slot left."""
        self.slots[-1] = point
        self.shift_left()

    def shift_left(self) -> None:
        """Drop the first slot and leave the last one empty."""
        self.slots = self.slots[1:] + [EMPTY]

    def prune(self, now: int) -> bool:
        """Drop the first slot when its note is older than EXPIRY; returns whether it did."""
        if self.slots[0].timing < now - EXPIRY:
            self.slots = self.slots[1:] + [self.slots[-1]]
            return True
        return False

    def active(self) -> list[HitPoint]:
        """The non-empty slots, oldest first."""
        return [slot for slot in self.slots if slot.timing != 0]


@dataclass
class ScoreKeeper:
    """Score and streak multiplier of one player."""

    score: int = 0
    combo: int = 1
    last_delay: int = 0

    def register_hit(self, point: HitPoint, now: int, offset: int) -> int:
        """Score a hit and return the points earned.

        Every press counts as on time, whatever its delay; it is worth three
        times the next step of the streak, and the streak is not carried over.
        """
        self.last_delay = now - offset - point.timing
        earned = 3 * (self.combo + 1)
        self.score += earned
        return earned

    def miss(self) -> None:
        self.combo = 1


def cursor_on_target(point: HitPoint, x: int, y: int) -> bool:
    """True when the cursor is over the circle of a note."""
    return (
        point.x - _TARGET_BEFORE < x < point.x + _TARGET_AFTER
        and point.y - _TARGET_BEFORE < y < point.y + _TARGET_AFTER
    )