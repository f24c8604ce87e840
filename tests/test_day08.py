from adventgrid.day08 import count_antinodes, count_resonant_antinodes, parse_antennas

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_parse_antennas():
    grid, antennas = parse_antennas(EXAMPLE)
    assert grid.num_rows == 12
    assert grid.num_columns == 12
    assert set(antennas) == {"0", "A"}
    assert antennas["0"] == [(1, 8), (2, 5), (3, 7), (4, 4)]
    assert antennas["A"] == [(5, 6), (8, 8), (9, 9)]


def test_example_counts():
    grid, antennas = parse_antennas(EXAMPLE)
    assert count_antinodes(grid, antennas) == 14
    assert count_resonant_antinodes(grid, antennas) == 34


def test_lone_antennas_make_no_antinodes():
    grid, antennas = parse_antennas("a....\n.....\n....b\n")
    assert count_antinodes(grid, antennas) == 0
    assert count_resonant_antinodes(grid, antennas) == count_antinodes(grid, antennas)


def test_resonant_at_least_basic():
    grid, antennas = parse_antennas(EXAMPLE)
    assert count_resonant_antinodes(grid, antennas) >= count_antinodes(grid, antennas)


def test_resonant_covers_paired_antennas():
    grid, antennas = parse_antennas(EXAMPLE)
    paired = sum(len(p) for p in antennas.values() if len(p) > 1)
    assert count_resonant_antinodes(grid, antennas) >= paired


def test_grid_left_unchanged():
    grid, antennas = parse_antennas(EXAMPLE)
    before = str(grid)
    count_antinodes(grid, antennas)
    count_resonant_antinodes(grid, antennas)
    assert str(grid) == before


def test_counting_is_repeatable():
    grid, antennas = parse_antennas(EXAMPLE)
    first = count_antinodes(grid, antennas)
    assert count_antinodes(grid, antennas) == first