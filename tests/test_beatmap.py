import pytest

from cantina.beatmap import (
    MAX_HIT_OBJECTS,
    HitPoint,
    beatmap_filename,
    load_beatmap,
    parse_hit_objects,
    scale_to_screen,
)


def test_beatmap_filenames_fixed_by_difficulty():
    assert beatmap_filename(1) == "1meco.osu"
    assert beatmap_filename(5) == "10galaxy_collapse_dont_even_try_you_hear_me.osu"


@pytest.mark.parametrize("difficulty", [0, 6, -1])
def test_invalid_difficulty_raises(difficulty):
    with pytest.raises(ValueError):
        beatmap_filename(difficulty)


def test_parse_skips_header_and_first_line_after_section():
    lines = [
        "osu file format v14\n",
        "[General]\n",
        "AudioFilename: a.mp3\n",
        "[HitObjects]\n",
        "1,2,3,1,0\n",
        "100,200,300,1,0,0:0:0:0:\n",
        "10,20,30,5,0\n",
    ]
    assert parse_hit_objects(lines) == [HitPoint(100, 200, 300), HitPoint(10, 20, 30)]


def test_parse_without_section_gives_nothing():
    assert parse_hit_objects(["[General]\n", "1,2,3\n"]) == []


def test_parse_skips_malformed_lines():
    lines = ["[HitObjects]", "skipped", "", "garbage", "7,8,9"]
    assert parse_hit_objects(lines) == [HitPoint(7, 8, 9)]


def test_parse_keeps_at_most_the_capacity():
    lines = ["[HitObjects]", "skip"] + [f"{i},{i},{i + 1}" for i in range(MAX_HIT_OBJECTS + 100)]
    points = parse_hit_objects(lines)
    assert len(points) == MAX_HIT_OBJECTS
    assert points[-1] == HitPoint(MAX_HIT_OBJECTS - 1, MAX_HIT_OBJECTS - 1, MAX_HIT_OBJECTS)


def test_load_beatmap_reads_file(tmp_path):
    (tmp_path / beatmap_filename(2)).write_text(
        "[HitObjects]\nfirst\n64,32,1000,1,0\n", encoding="utf-8"
    )
    assert load_beatmap(2, tmp_path) == [HitPoint(64, 32, 1000)]


def test_load_missing_beatmap_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_beatmap(3, tmp_path)


def test_scale_origin_lands_on_window_offset():
    assert scale_to_screen([HitPoint(0, 0, 5)]) == [HitPoint(300, 150, 5)]


@pytest.mark.parametrize("half", [1, 17, 256])
def test_scale_halves_distances(half):
    origin, moved = scale_to_screen([HitPoint(0, 0, 1), HitPoint(2 * half, 2 * half, 1)])
    assert moved.x - origin.x == half
    assert moved.y - origin.y == half
    assert moved.timing == origin.timing