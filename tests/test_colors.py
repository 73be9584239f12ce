import pytest

from cubecaster.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
    ],
)
def test_pinned_values_from_table(name, expected):
    assert lookup_color(name) == expected


def test_none_means_transparent():
    assert lookup_color("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_lookup_ignores_case(name):
    assert lookup_color(name) == lookup_color("snow")


def test_case_insensitive_with_spaces():
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_entry_wins_for_duplicate_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["not a colour", "", "snow5", "#ff0000"])
def test_unknown_names_give_none(name):
    assert lookup_color(name) is None


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("light grey", "lightgrey"),
        ("dodger blue", "dodgerblue"),
        ("orange red", "orangered"),
        ("dark red", "darkred"),
        ("light green", "lightgreen"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


@pytest.mark.parametrize("base", ["red", "snow", "gold", "tomato", "magenta"])
def test_first_numbered_variant_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_all_gray_levels_fit_in_24_bits():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert all(0 <= value <= 0xFFFFFF for value in values)
    assert values == sorted(values)