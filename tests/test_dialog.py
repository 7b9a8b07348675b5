import pytest

from cantina.constants import Activity
from cantina.dialog import BB8_NO_X, BB8_YES_X, Chooser, prompt_for


def test_chooser_starts_on_yes():
    chooser = Chooser()
    assert chooser.x == BB8_YES_X
    assert chooser.confirm(Activity.SNAKE) is Activity.SNAKE


def test_right_selects_no():
    chooser = Chooser()
    chooser.right()
    assert chooser.x == BB8_NO_X
    assert chooser.confirm(Activity.SHIPS) is None


def test_right_then_left_returns_to_yes():
    chooser = Chooser()
    chooser.right()
    chooser.left()
    assert chooser.confirm(Activity.FISHING) is Activity.FISHING


def test_ships_prompt_text():
    assert prompt_for(Activity.SHIPS) == ("grrrrr un petit tour dans le vaisseau ?", True)


@pytest.mark.parametrize("activity", [Activity.JACKPOT, Activity.RACE])
def test_statements_offer_no_choice(activity):
    text, asks = prompt_for(activity)
    assert asks is False
    assert "entrée" in text


@pytest.mark.parametrize("activity", list(Activity))
def test_every_activity_has_a_prompt(activity):
    text, _ = prompt_for(activity)
    assert text.strip()