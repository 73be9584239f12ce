import pytest

from cubecaster.mapcheck import (
    ConfigError,
    check_boundary_line,
    check_map_chars,
    check_middle,
    find_first_wall_row,
    find_last_wall_row,
    validate_map,
)

VALID = ["111111", "100001", "10N001", "111111"]


def test_valid_map_returns_rows():
    assert validate_map("\n".join(VALID) + "\n") == VALID


def test_leading_blank_lines_are_skipped():
    assert validate_map("\n\n" + "\n".join(VALID)) == VALID


def test_irregular_map_with_spaces():
    rows = ["  1111", "111001", "1N0001", "111111"]
    assert validate_map("\n".join(rows)) == rows


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Invalid map"),
        (" \n\t \n", "Invalid map"),
        ("111\n1N1\n1S1\n111", "Player char repeated"),
        ("111\n101\n111", "Player missing"),
        ("111\n1X1\n1N1\n111", "Wrong char in map"),
        ("111\n1N1\n\n111", "Double endl"),
        ("111\n1N1\n111\n\n", "Double endl"),
        ("111\n1N1\n111\t", "Wrong char in map"),
    ],
)
def test_char_errors(text, message):
    with pytest.raises(ConfigError, match=f"^{message}$"):
        check_map_chars(text)


def test_broken_top_wall():
    with pytest.raises(ConfigError, match="^Up or down invalid wall$"):
        validate_map("1011\n1N01\n1111")


def test_broken_side_wall():
    with pytest.raises(ConfigError, match="^Left or right wall broken$"):
        validate_map("1111\n0N01\n1111")


def test_open_next_to_space():
    with pytest.raises(ConfigError, match="^Map invalid middle$"):
        validate_map("111111\n10 001\n1N0001\n111111")


def test_open_beyond_neighbour_row():
    with pytest.raises(ConfigError, match="^Map invalid middle$"):
        validate_map("111\n10001\n1N1\n11111")


def test_check_boundary_line():
    assert check_boundary_line("    ") is False
    assert check_boundary_line(" 1 11") is True
    assert check_boundary_line("0 x") is True
    with pytest.raises(ConfigError):
        check_boundary_line("  10")


def test_find_wall_rows():
    rows = ["   ", "111", "1N1", "111", "  "]
    assert find_first_wall_row(rows) == 1
    assert find_last_wall_row(rows) == 3


def test_find_wall_rows_when_all_blank():
    rows = [" ", "  "]
    assert find_first_wall_row(rows) == len(rows)
    assert find_last_wall_row(rows) == -1


def test_check_middle_blank_row():
    with pytest.raises(ConfigError, match="^Left or right wall broken$"):
        check_middle(["111", "   ", "111"], 0, 2)


def test_error_message_text():
    with pytest.raises(ConfigError) as info:
        check_map_chars("111\n101\n111")
    assert str(info.value) == "Player missing"