"""Snake on a checkerboard: the head steers, body segments follow recorded turns."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .constants import (
    BOARD_X,
    GAME_HEIGHT,
    GAME_WIDTH,
    HEIGHT,
    NB_SQUARE,
    SNAKE_START_X,
    SNAKE_START_Y,
    WIDTH,
    Key,
)

NB_STAR = 250

_VERTICAL = frozenset({Key.UP, Key.DOWN})
_STEP = {
    Key.UP: (0, -1),
    Key.RIGHT: (1, 0),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
}


@dataclass(frozen=True)
class Board:
    """Size of one square of the playing grid and the number of squares per side."""

    square_width: int = GAME_WIDTH // NB_SQUARE
    square_height: int = GAME_HEIGHT // NB_SQUARE
    count: int = NB_SQUARE


@dataclass(frozen=True)
class Turn:
    """A place where the head changed direction, replayed by the body."""

    x: int
    y: int
    direction: Key


@dataclass
class Segment:
    """One part of the snake; ``pending`` indexes the next turn it must take."""

    x: int
    y: int
    direction: Key
    pending: int | None = None

    def move(self, board: Board) -> None:
        dx, dy = _STEP[self.direction]
        self.x += dx * board.square_width
        self.y += dy * board.square_height


@dataclass
class Apple:
    """Food the snake eats to grow."""

    x: int
    y: int

    @classmethod
    def centered(cls, board: Board) -> Apple:
        """An apple in the middle square of the board."""
        center = board.count // 2
        return cls(
            SNAKE_START_X + board.square_width * center,
            SNAKE_START_Y + board.square_height * center,
        )

    def relocate(self, board: Board, rng: random.Random | None = None) -> None:
        """Move to a random square of the board."""
        source = rng if rng is not None else random
        column = source.randrange(board.count)
        row = source.randrange(board.count)
        self.x = SNAKE_START_X + board.square_width * column
        self.y = SNAKE_START_Y + board.square_height * row


def _start_segments() -> list[Segment]:
    return [Segment(SNAKE_START_X, SNAKE_START_Y, Key.DOWN)]


@dataclass
class Snake:
    """The head first, then the body; turns are shared by all body segments."""

    segments: list[Segment] = field(default_factory=_start_segments)
    turns: list[Turn] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("a snake needs at least a head")

    @property
    def head(self) -> Segment:
        return self.segments[0]

    @property
    def body(self) -> list[Segment]:
        return self.segments[1:]

    def __len__(self) -> int:
        return len(self.segments)

    def turn(self, direction: Key) -> bool:
        """Steer the head across its current axis; returns whether it turned."""
        direction = Key(direction)
        if (direction in _VERTICAL) == (self.head.direction in _VERTICAL):
            return False
        self.head.direction = direction
        if len(self.segments) > 1:
            index = len(self.turns)
            self.turns.append(Turn(self.head.x, self.head.y, direction))
            for segment in self.body:
                if segment.pending is not None:
                    break
                segment.pending = index
        return True

    def can_move(self, board: Board) -> bool:
        """False when the head would leave the board."""
        head = self.head
        if head.direction is Key.UP:
            return head.y - board.square_height >= SNAKE_START_Y
        if head.direction is Key.RIGHT:
            return head.x + board.square_width < GAME_WIDTH + BOARD_X
        if head.direction is Key.DOWN:
            return head.y <= GAME_HEIGHT
        return head.x - board.square_width >= SNAKE_START_X

    def advance(self, board: Board) -> None:
        """Move every segment one square; body segments turn where the head did."""
        self.head.move(board)
        for segment in self.body:
            segment.move(board)
            if segment.pending is None:
                continue
            turn = self.turns[segment.pending]
            if (segment.x, segment.y) == (turn.x, turn.y):
                segment.direction = turn.direction
                following = segment.pending + 1
                segment.pending = following if following < len(self.turns) else None

    def grow(self, board: Board) -> None:
        """Add a segment behind the tail, heading the same way."""
        tail = self.segments[-1]
        dx, dy = _STEP[tail.direction]
        self.segments.append(
            Segment(
                tail.x - dx * board.square_width,
                tail.y - dy * board.square_height,
                tail.direction,
                tail.pending,
            )
        )

    def bites_itself(self) -> bool:
        head = self.head
        return any((part.x, part.y) == (head.x, head.y) for part in self.body)

    def occupies(self, x: int, y: int) -> bool:
        return any((part.x, part.y) == (x, y) for part in self.segments)

    def eats(self, apple: Apple) -> bool:
        return (self.head.x, self.head.y) == (apple.x, apple.y)


def random_stars(
    count: int = NB_STAR, rng: random.Random | None = None
) -> list[tuple[int, int]]:
    """Random star positions over the whole screen."""
    source = rng if rng is not None else random
    stars = []
    for _ in range(count):
        x = source.randrange(WIDTH)
        y = source.randrange(HEIGHT)
        stars.append((x, y))
    return stars


@dataclass
class SnakeRound:
    """State of one player's snake round."""

    board: Board = field(default_factory=Board)
    snake: Snake = field(default_factory=Snake)
    apple: Apple | None = None
    stars: list[tuple[int, int]] = field(default_factory=list)
    score: int = 0
    turn_allowed: bool = True

    def __post_init__(self) -> None:
        if self.apple is None:
            self.apple = Apple.centered(self.board)

    def step(self, rng: random.Random | None = None) -> bool:
        """Advance one tick; returns True when the round is over."""
        self.turn_allowed = True
        if not self.snake.can_move(self.board):
            return True
        self.snake.advance(self.board)
        if self.snake.eats(self.apple):
            self.score += 1
            while True:
                self.apple.relocate(self.board, rng)
                if not self.snake.occupies(self.apple.x, self.apple.y):
                    break
            self.snake.grow(self.board)
        return len(self.snake) > 1 and self.snake.bites_itself()