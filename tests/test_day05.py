import pytest

from adventgrid.day05 import (
    fix_order,
    is_correctly_ordered,
    main,
    middle_page_sums,
    parse_input,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def example():
    return parse_input(EXAMPLE)


def test_parse_rules_and_updates(example):
    rules, updates = example
    assert 53 in rules[47]
    assert 13 in rules[97]
    assert len(updates) == 6
    assert updates[0] == [75, 47, 61, 53, 29]


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_input("abc\n\n1,2")


@pytest.mark.parametrize("index", [0, 1, 2])
def test_correct_updates(example, index):
    rules, updates = example
    assert is_correctly_ordered(rules, updates[index]) is True


@pytest.mark.parametrize("index", [3, 4, 5])
def test_incorrect_updates(example, index):
    rules, updates = example
    assert is_correctly_ordered(rules, updates[index]) is False


@pytest.mark.parametrize("index", [3, 4, 5])
def test_fix_order_gives_valid_permutation(example, index):
    rules, updates = example
    fixed = fix_order(rules, updates[index])
    assert sorted(fixed) == sorted(updates[index])
    assert is_correctly_ordered(rules, fixed)


def test_fix_order_known_result(example):
    rules, _ = example
    assert fix_order(rules, [61, 13, 29]) == [61, 29, 13]


def test_fix_order_leaves_input_untouched(example):
    rules, updates = example
    original = list(updates[5])
    fix_order(rules, updates[5])
    assert updates[5] == original


def test_fix_order_keeps_correct_order(example):
    rules, updates = example
    assert fix_order(rules, updates[0]) == updates[0]


def test_middle_page_sums(example):
    rules, updates = example
    assert middle_page_sums(rules, updates) == (143, 123)


def test_main_prints_sums(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "correct page updates is 143" in out
    assert "incorrect page updates is 123" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "File error" in capsys.readouterr().err