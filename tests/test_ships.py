import random

import pytest

from cantina.ships import (
    BAND1_LEFT,
    BAND1_RIGHT,
    BAND2_LEFT,
    BAND3_LEFT,
    CROSSHAIR_CENTER,
    NB_SHIPS,
    SPAWN_WIDTH,
    TOP,
    Ship,
    create_ships,
    destroyed_count,
    move_ships,
    shoot,
    spawn_ships,
)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def test_create_ships_ranges():
    ships = create_ships(random.Random(3))
    assert len(ships) == NB_SHIPS
    assert all(1 <= ship.speed <= 4 for ship in ships)
    assert all(ship.size in (1, 2, 3) for ship in ships)
    assert not any(ship.destroyed for ship in ships)


def test_ship_dimensions_follow_size():
    assert Ship(size=1, speed=1).width == 100
    assert Ship(size=2, speed=1).length == 75
    assert Ship(size=3, speed=1).width == 50
    assert Ship(size=1, speed=1).image_path.endswith("ship100.png")


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Ship(size=4, speed=1)


def test_spawn_places_ships_in_bands():
    ships = create_ships(random.Random(7))
    spawn_ships(ships, random.Random(8))
    for ship in ships:
        assert TOP <= ship.y < TOP + 400 - ship.length
        assert BAND1_LEFT <= ship.x
        assert ship.x + ship.width <= SPAWN_WIDTH
        if ship.y > 185:
            assert ship.x >= BAND2_LEFT
        if ship.y > 335:
            assert ship.x >= BAND3_LEFT


def test_spawn_skips_destroyed():
    ship = Ship(size=3, speed=1, x=5, y=5, destroyed=True)
    spawn_ships([ship], random.Random(1))
    assert (ship.x, ship.y) == (5, 5)


def test_visible():
    assert Ship(size=3, speed=1, x=100, y=20).visible()
    assert not Ship(size=3, speed=1, x=0, y=20).visible()
    assert not Ship(size=3, speed=1, x=100, y=20, destroyed=True).visible()


def test_move_down():
    ship = Ship(size=3, speed=2, x=500, y=100)
    move_ships([ship], FixedRandom(1))
    assert (ship.x, ship.y) == (500, 102)


def test_move_left_wraps_to_right_edge():
    ship = Ship(size=3, speed=4, x=66, y=100)
    move_ships([ship], FixedRandom(2))
    assert ship.x == BAND1_RIGHT - ship.width
    assert ship.y == 100


def test_move_right_wraps_to_left_edge():
    ship = Ship(size=3, speed=4, x=BAND1_RIGHT - 51, y=100)
    move_ships([ship], FixedRandom(3))
    assert ship.x == BAND1_LEFT


def test_destroyed_ship_does_not_move():
    ship = Ship(size=3, speed=4, x=500, y=100, destroyed=True)
    move_ships([ship], FixedRandom(0))
    assert (ship.x, ship.y) == (500, 100)


def test_shoot_hits_and_counts():
    target = Ship(size=1, speed=1, x=100, y=100)
    other = Ship(size=1, speed=1, x=600, y=100)
    hit = shoot([target, other], 100, 100)
    assert hit == [target]
    assert target.destroyed and not other.destroyed
    assert destroyed_count([target, other]) == 1


def test_shoot_edge_inclusive():
    ship = Ship(size=1, speed=1, x=100, y=100)
    hit = shoot([ship], 200 - CROSSHAIR_CENTER, 200 - CROSSHAIR_CENTER)
    assert hit == [ship]


def test_shoot_miss_and_no_double_hit():
    ship = Ship(size=2, speed=1, x=100, y=100)
    assert shoot([ship], 400, 400) == []
    assert not ship.destroyed
    shoot([ship], 100, 100)
    assert shoot([ship], 100, 100) == []
    assert destroyed_count([ship]) == 1