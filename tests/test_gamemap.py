from collections import Counter

import pytest

from catsworld.gamemap import (
    GameMap,
    MapError,
    check_after,
    check_chars,
    check_limits,
    count_tiles,
    find_tile,
    flood_fill,
    is_map_char,
    measure_length,
    read_map_lines,
    validate_paths,
)

VALID = [
    "111111\n",
    "1P0C01\n",
    "10M0E1\n",
    "111111\n",
]

BLOCKED = [
    "111111\n",
    "1P1CE1\n",
    "111111\n",
]


def _grid(lines):
    return [list(line.rstrip("\n")) for line in lines]


@pytest.mark.parametrize("c", list("10PECM"))
def test_map_chars_accepted(c):
    assert is_map_char(c) is True


@pytest.mark.parametrize("c", ["2", "X", " ", "\n", "p"])
def test_other_chars_rejected(c):
    assert is_map_char(c) is False


def test_measure_length_excludes_newline():
    assert measure_length(VALID) == len(VALID[0]) - 1


def test_measure_length_minimum_width():
    assert measure_length(["1111\n"]) == 4
    with pytest.raises(MapError):
        measure_length(["111\n"])


def test_measure_length_rejects_ragged_rows():
    with pytest.raises(MapError):
        measure_length(["11111\n", "1111\n"])


def test_measure_length_rejects_missing_final_newline():
    with pytest.raises(MapError):
        measure_length(["11111\n", "11111"])


def test_measure_length_rejects_empty():
    with pytest.raises(MapError):
        measure_length([])


def test_check_chars_returns_height():
    assert check_chars(VALID) == len(VALID)


def test_check_chars_rejects_forbidden():
    with pytest.raises(MapError):
        check_chars(["11111\n", "1PX01\n"])


def test_count_tiles_totals_cells():
    grid = _grid(VALID)
    counts = count_tiles(grid)
    assert counts["P"] == 1
    assert counts["C"] == 1
    assert sum(counts.values()) == len(grid) * len(grid[0])


def test_find_tile():
    grid = _grid(VALID)
    assert find_tile(grid, "P") == (1, 1)
    assert find_tile(grid, "E") == (2, 4)
    assert find_tile(grid, "X") is None


def test_flood_fill_marks_reachable_and_keeps_input():
    grid = _grid(VALID)
    original = [row[:] for row in grid]
    filled = flood_fill(grid, 1, 1)
    assert grid == original
    assert check_after(filled) is True
    assert all(cell == "1" for cell in filled[0])


def test_flood_fill_stops_at_walls():
    grid = _grid(BLOCKED)
    filled = flood_fill(grid, 1, 1)
    assert filled[1][1] == "3"
    assert filled[1][3] == "C"
    assert check_after(filled) is False


def test_flood_fill_outside_is_unchanged_copy():
    grid = _grid(VALID)
    assert flood_fill(grid, -1, 0) == grid
    assert flood_fill(grid, 0, 99) == grid


def test_check_limits_closed_map():
    assert check_limits(_grid(VALID)) is True


def test_check_limits_open_side():
    grid = [list("1111"), list("0PE1"), list("1111")]
    assert check_limits(grid) is False


def test_check_limits_open_top():
    grid = [list("1101"), list("1PE1"), list("1111")]
    assert check_limits(grid) is False


def test_check_limits_empty():
    assert check_limits([]) is False


def test_validate_paths():
    assert validate_paths(_grid(VALID), 1, 1) is True
    assert validate_paths(_grid(BLOCKED), 1, 1) is False


def test_from_lines_valid():
    game_map = GameMap.from_lines(VALID)
    assert game_map.height == len(VALID)
    assert game_map.length == len(VALID[0]) - 1
    assert game_map.items == 1
    assert game_map.player_position() == (1, 1)
    assert game_map.grid == _grid(VALID)


@pytest.mark.parametrize(
    "lines",
    [
        ["111111\n", "1P00E1\n", "111111\n"],
        ["111111\n", "1PPCE1\n", "111111\n"],
        ["111111\n", "1P0C01\n", "111111\n"],
        ["111111\n", "1PECE1\n", "111111\n"],
        ["111111\n", "1PCE1\n", "111111\n"],
        ["111111\n", "1PCEZ1\n", "111111\n"],
    ],
)
def test_from_lines_rejects_bad_maps(lines):
    with pytest.raises(MapError):
        GameMap.from_lines(lines)


def test_tile_and_set_tile():
    game_map = GameMap.from_lines(VALID)
    assert game_map.tile(1, 3) == "C"
    game_map.set_tile(1, 1, "0")
    game_map.set_tile(1, 2, "P")
    assert game_map.player_position() == (1, 2)
    assert count_tiles(game_map.grid)["P"] == 1


def test_tile_out_of_bounds():
    game_map = GameMap.from_lines(VALID)
    with pytest.raises(IndexError):
        game_map.tile(-1, 0)
    with pytest.raises(IndexError):
        game_map.tile(0, game_map.length)


def test_set_tile_rejects_unknown_tile():
    game_map = GameMap.from_lines(VALID)
    with pytest.raises(ValueError):
        game_map.set_tile(1, 2, "X")
    assert game_map.tile(1, 2) == "0"


def test_player_position_missing():
    game_map = GameMap(grid=_grid(["11111\n", "10001\n"]), items=0)
    with pytest.raises(MapError):
        game_map.player_position()


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("".join(VALID), encoding="utf-8")
    assert read_map_lines(path) == VALID
    game_map = GameMap.from_file(path)
    assert game_map == GameMap.from_lines(VALID)
    assert Counter(count_tiles(game_map.grid))["E"] == 1


def test_from_file_missing(tmp_path):
    with pytest.raises(MapError):
        GameMap.from_file(tmp_path / "absent.ber")