"""Questions asked by the characters of the map and the yes/no choice."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import HEIGHT, Activity

TEXT_SIZE = 23
SIZE_BOX = 100
TEXT_X = 25
YES_X = 250
NO_X = 750
CHOICE_Y = HEIGHT - TEXT_SIZE * 2
BB8_SIZE = 20
BB8_YES_X = YES_X - BB8_SIZE
BB8_NO_X = NO_X - BB8_SIZE

_PROMPTS = {
    Activity.FISHING: ("veux tu atttaper jarjar pour explorer naboo?", True),
    Activity.SNAKE: (
        "matricule fn-2187 au rapport, un alien n'est pas loin souhaité le neutraliser ?",
        True,
    ),
    Activity.SHIPS: ("grrrrr un petit tour dans le vaisseau ?", True),
    Activity.RHYTHM: ("salut ! un peu de musique avec nous ca te dirait ?", True),
    Activity.JACKPOT: ("que la force soit avec toi jeune padawan...(appuyez sur entrée)", False),
    Activity.RACE: ("si tu vois han solo reviens vers moi (appuyez sur entrée)", False),
    Activity.BARMAN: ("bonjour, souhaites tu savoir comment marche ce lieu ?", True),
    Activity.STATS: ("moi c'est c3p0 souhaites tu accéder au statistiques ?", True),
}


def prompt_for(activity: Activity) -> tuple[str, bool]:
    """Text said for an activity, and whether the yes/no choice is shown."""
    return _PROMPTS[Activity(activity)]


@dataclass
class Chooser:
    """The droid cursor sitting next to "oui" or "non"."""

    x: int = BB8_YES_X

    def left(self) -> None:
        self.x = BB8_YES_X

    def right(self) -> None:
        self.x = BB8_NO_X

    def confirm(self, activity: Activity) -> Activity | None:
        """The activity when "oui" is chosen, None for "non"."""
        return activity if self.x == BB8_YES_X else None