"""Ticket bookkeeping between the two players and best-score records."""

from __future__ import annotations

from enum import Enum
from typing import MutableSequence

from .character import Player


class Outcome(Enum):
    """State of the match once tickets are counted."""

    ONGOING = 0
    SECOND_WINS = 1
    FIRST_WINS = 2
    NO_WINNER = 3


def compare_scores(player1: Player, player2: Player) -> None:
    """The loser of a round gives up a ticket; a tie costs both one."""
    if player1.score > player2.score:
        player2.ticket -= 1
    elif player2.score > player1.score:
        player1.ticket -= 1
    else:
        player1.ticket -= 1
        player2.ticket -= 1


def check_win(player1: Player, player2: Player) -> Outcome:
    """A player with no ticket left loses the match."""
    if player1.ticket == 0 and player2.ticket == 0:
        return Outcome.NO_WINNER
    if player1.ticket == 0:
        return Outcome.SECOND_WINS
    if player2.ticket == 0:
        return Outcome.FIRST_WINS
    return Outcome.ONGOING


def record_best(
    scores: MutableSequence[int],
    index: int,
    player1: Player,
    player2: Player,
    higher_is_better: bool,
) -> bool:
    """Store a new record for a game; the first player is checked first.

    Returns True when the record changed.
    """
    best = scores[index]
    for player in (player1, player2):
        better = player.score > best if higher_is_better else player.score < best
        if better:
            scores[index] = player.score
            return True
    return False