"""Persistence of the best score of each mini-game."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .constants import NB_GAME

DEFAULT_SCORE_FILE = Path("bestscore.txt")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_log = logging.getLogger(__name__)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_scores(path: str | Path = DEFAULT_SCORE_FILE) -> list[int]:
    """Read one score per line; a missing file gives zeros.

    Each line contributes its leading integer (0 when there is none).
    The result always holds exactly NB_GAME entries.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        _log.warning("score file %s not found", path)
        return [0] * NB_GAME
    values = [_leading_int(line) for line in text.splitlines()][:NB_GAME]
    return values + [0] * (NB_GAME - len(values))


def write_scores(scores: Iterable[int], path: str | Path = DEFAULT_SCORE_FILE) -> None:
    """Write the first NB_GAME scores, one per line."""
    values = list(scores)[:NB_GAME]
    if len(values) < NB_GAME:
        raise ValueError(f"expected {NB_GAME} scores, got {len(values)}")
    Path(path).write_text("".join(f"{value}\n" for value in values), encoding="utf-8")