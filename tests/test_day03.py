from adventgrid.day03 import main, sum_enabled_multiplications, sum_multiplications

PART1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
PART2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert sum_multiplications(PART1) == 161


def test_part2_example():
    assert sum_enabled_multiplications(PART2) == 48


def test_without_switches_both_agree():
    assert sum_enabled_multiplications(PART1) == sum_multiplications(PART1)


def test_too_many_digits_ignored():
    assert sum_multiplications("mul(1234,5)") == sum_multiplications("")


def test_disabled_from_start():
    assert sum_enabled_multiplications("don't()" + PART1) == 0


def test_do_reenables():
    text = "don't()mul(2,3)do()" + PART1
    assert sum_enabled_multiplications(text) == sum_multiplications(PART1)


def test_state_carries_across_lines(tmp_path, capsys):
    text = "mul(2,3)don't()\nmul(4,5)\n"
    path = tmp_path / "data.txt"
    path.write_text(text)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Part 1 total is: {sum_multiplications(text)}",
        f"Part 2 total is: {sum_multiplications('mul(2,3)')}",
    ]


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    captured = capsys.readouterr()
    assert "File error" in captured.err
    assert captured.out.splitlines()[0] == "Part 1 total is: 0"