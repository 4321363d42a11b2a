import pytest

from cubscene.colors import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("black", 0x0),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_ascii_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_lookup_unknown_name():
    assert lookup_color("no such colour") is None


def test_duplicate_names_take_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_spellings_agree():
    for number in range(101):
        assert lookup_color(f"gray{number}") == lookup_color(f"grey{number}")


def test_gray_levels_are_neutral_and_increasing():
    values = [lookup_color(f"gray{number}") for number in range(101)]
    for value in values:
        red, green, blue = value >> 16, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue
    assert values == sorted(values)


def test_text_to_rgb_hex():
    assert text_to_rgb("#ff0000") == 0xFF0000
    assert text_to_rgb("#00FF00", "ignored") == 0x00FF00


def test_text_to_rgb_hex_stops_at_non_hex():
    assert text_to_rgb("#ab") == text_to_rgb("#abxyz")


def test_text_to_rgb_hex_without_digits_is_zero():
    assert text_to_rgb("#zz") == 0


def test_text_to_rgb_wraps_to_32_bits():
    assert text_to_rgb("#FFFFFFFF") == -1


def test_text_to_rgb_joins_suffix():
    assert text_to_rgb("light", "blue") == 0xADD8E6
    assert text_to_rgb("ghost", "white") == lookup_color("ghost white")


def test_text_to_rgb_name_without_suffix():
    assert text_to_rgb("Gold") == 0xFFD700
    assert text_to_rgb("none") == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("no_such_colour") == 0
    assert text_to_rgb("no", "such") == 0


def test_text_to_rgb_truncates_long_joined_name():
    assert text_to_rgb("x" * 40, "y" * 40) == 0
    assert text_to_rgb("red", " " * 80) == 0
@pytest.mark.parametrize("name", ["snow1", "blue4", "cyan2", "wheat3", "gold1"])
def test_text_to_rgb_matches_lookup(name):
    assert text_to_rgb(name) == lookup_color(name)