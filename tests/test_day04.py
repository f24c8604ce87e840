import pytest

from adventgrid.day04 import (
    count_words,
    count_words_cross,
    main,
    matches_in_direction,
    parse_grid,
)

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def transpose(text):
    rows = text.splitlines()
    return "\n".join("".join(col) for col in zip(*rows)) + "\n"


def test_parse_grid_shape():
    grid = parse_grid(EXAMPLE)
    assert grid.num_rows == 10
    assert grid.num_columns == 10
    assert grid[4, 0] == "X"


def test_parse_ragged_rejected():
    with pytest.raises(ValueError):
        parse_grid("ab\nabc\n")


def test_example_xmas():
    assert count_words(parse_grid(EXAMPLE), "XMAS") == 18


def test_example_cross():
    assert count_words_cross(parse_grid(EXAMPLE), "MAS") == 9


def test_reversed_word_same_count():
    grid = parse_grid(EXAMPLE)
    assert count_words(grid, "XMAS") == count_words(grid, "SAMX")


def test_transpose_invariant():
    grid = parse_grid(EXAMPLE)
    flipped = parse_grid(transpose(EXAMPLE))
    assert count_words(grid, "XMAS") == count_words(flipped, "XMAS")
    assert count_words_cross(grid, "MAS") == count_words_cross(flipped, "MAS")


def test_matches_in_direction():
    grid = parse_grid("XMAS\n")
    assert matches_in_direction(grid, "XMAS", 0, 0, 0, 1) is True
    assert matches_in_direction(grid, "SAMX", 0, 3, 0, -1) is True
    assert matches_in_direction(grid, "XMAS", 0, 0, 1, 0) is False
    assert matches_in_direction(grid, "XMAS", 0, 1, 0, 1) is False


def test_single_row_counts_both_directions():
    grid = parse_grid("XMASAMX\n")
    assert count_words(grid, "XMAS") == count_words(grid, "SAMX")
    assert count_words(grid, "XMAS") == 2


def test_empty_word_rejected():
    grid = parse_grid(EXAMPLE)
    with pytest.raises(ValueError):
        count_words(grid, "")
    with pytest.raises(ValueError):
        count_words_cross(grid, "")


def test_empty_grid():
    grid = parse_grid("")
    assert count_words(grid, "XMAS") == 0
    assert count_words_cross(grid, "MAS") == 0


def test_main(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    grid = parse_grid(EXAMPLE)
    assert capsys.readouterr().out.splitlines() == [
        f'"XMAS" appears {count_words(grid, "XMAS")} times.',
        f'"MAS" appears {count_words_cross(grid, "MAS")} times in an X pattern.',
    ]


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "File error" in capsys.readouterr().err