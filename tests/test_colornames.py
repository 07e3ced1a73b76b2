import pytest

from wirefdf.colornames import color_names, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x000000),
        ("navy", 0x000080),
        ("thistle", 0xD8BFD8),
        ("snow4", 0x8B8989),
        ("blue4", 0x00008B),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("gray0", 0x000000),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == lookup_color("dark red")
    assert lookup_color("NoNe") == -1


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")
    with pytest.raises(KeyError):
        lookup_color("gray101")


def test_names_are_unique_and_lower_case():
    names = color_names()
    assert len(names) == len(set(names))
    assert all(name == name.lower() for name in names)


def test_every_listed_name_resolves_in_range():
    for name in color_names():
        value = lookup_color(name)
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_gray_and_grey_spellings_agree():
    for number in range(101):
        value = lookup_color(f"gray{number}")
        assert lookup_color(f"grey{number}") == value
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_grays_brighten_monotonically():
    levels = [lookup_color(f"gray{number}") for number in range(101)]
    assert levels == sorted(levels)


def test_first_shade_matches_base_where_source_agrees():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("green1") == lookup_color("green")


def test_table_order_starts_and_ends_as_in_source():
    names = color_names()
    assert names[0] == "snow"
    assert names[-1] == "none"
    assert names.index("thistle") < names.index("snow1") < names.index("gray0")