import pytest

from cantina.character import Player, Pose
from cantina.collision import (
    Background,
    CollisionGrid,
    load_collision_grid,
    map_position,
)
from cantina.constants import (
    BG_X,
    BG_Y,
    COLLISION_HEIGHT,
    COLLISION_WIDTH,
    ENTER_BAR,
    SPEED_BG,
    START_X,
    START_Y,
    Activity,
    Key,
)


def test_background_defaults_and_move():
    bg = Background()
    assert (bg.x, bg.y) == (BG_X, BG_Y)
    bg.move({Key.RIGHT})
    assert bg.x == BG_X - SPEED_BG
    bg.move({Key.LEFT})
    assert bg.x == BG_X
    bg.move({Key.UP})
    assert bg.y == BG_Y + SPEED_BG
    bg.move({Key.DOWN})
    assert bg.y == BG_Y


def test_map_position_at_origin():
    assert map_position(Background(START_X, START_Y)) == (0, 0)


def test_map_position_is_symmetric():
    left = map_position(Background(START_X - 100, START_Y - 50))
    right = map_position(Background(START_X + 100, START_Y + 50))
    assert left == right


def test_cell_out_of_range_is_empty():
    grid = CollisionGrid(("ab",))
    assert grid.cell(1, 0) == "b"
    assert grid.cell(-1, 0) == ""
    assert grid.cell(0, 5) == ""


def test_blocked_by_wall_when_moving():
    grid = CollisionGrid(("111", "101", "111"))
    player = Player(direction=Pose.UP)
    assert grid.blocked(player, (1, 2), {Key.UP}) is True
    assert grid.blocked(player, (1, 2), set()) is False
    player.direction = Pose.LEFT
    assert grid.blocked(player, (2, 1), {Key.LEFT}) is True
    assert grid.blocked(player, (1, 0), {Key.LEFT}) is False


def test_event_needs_enter():
    grid = CollisionGrid(("S",))
    assert grid.event_at(Player(), (0, 0), Background(), set()) is None
    assert grid.event_at(Player(), (0, 0), Background(), {Key.ENTER}) is Activity.SNAKE


@pytest.mark.parametrize(
    "cell,activity",
    [("8", Activity.FISHING), ("C", Activity.SHIPS), ("M", Activity.RHYTHM),
     ("Y", Activity.JACKPOT), ("9", Activity.RACE), ("W", Activity.BARMAN),
     ("P", Activity.STATS)],
)
def test_activity_cells(cell, activity):
    grid = CollisionGrid((cell,))
    assert grid.event_at(Player(), (0, 0), Background(), {Key.ENTER}) is activity


def test_door_shifts_background_when_facing():
    grid = CollisionGrid(("2",))
    bg = Background()
    result = grid.event_at(Player(direction=Pose.DOWN), (0, 0), bg, {Key.ENTER})
    assert result is None
    assert bg.y == BG_Y - ENTER_BAR


def test_door_ignored_when_facing_wrong_way():
    grid = CollisionGrid(("2",))
    bg = Background()
    grid.event_at(Player(direction=Pose.UP), (0, 0), bg, {Key.ENTER})
    assert bg.y == BG_Y


def test_load_counts_line_breaks_as_cells(tmp_path):
    path = tmp_path / "collision.txt"
    path.write_text("ab\ncd")
    grid = load_collision_grid(path)
    assert grid.cell(0, 0) == "a"
    assert grid.cell(2, 0) == "\n"
    assert grid.cell(3, 0) == "c"
    assert grid.cell(0, 1) == ""


def test_load_full_grid_shape(tmp_path):
    path = tmp_path / "collision.txt"
    path.write_text("0" * (COLLISION_WIDTH * COLLISION_HEIGHT + 10))
    grid = load_collision_grid(path)
    assert len(grid.rows) == COLLISION_HEIGHT
    assert all(len(row) == COLLISION_WIDTH for row in grid.rows)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_collision_grid(tmp_path / "none.txt")