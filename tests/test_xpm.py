import pytest

from cubscene.colors import lookup_color
from cubscene.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    extract_strings,
    parse_xpm,
    parse_xpm_file,
    str_to_wordtab,
    strip_comments,
)

SAMPLE = ["2 2 2 1", ". c #FF0000", "# c None", ".#", "#."]


def test_wordtab_splits_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tb  c ") == ["a", "b", "c"]


def test_wordtab_keeps_newlines_inside_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment_keeps_length():
    text = "/* XPM */\nx"
    result = strip_comments(text)
    assert result == " " * 9 + "\nx"
    assert len(result) == len(text)


def test_strip_comments_leaves_quoted_markers():
    text = '"/* not a comment */" "//"'
    assert strip_comments(text) == text


def test_strip_line_comment_blanks_newline():
    text = "a // c\nb"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.startswith("a") and result.endswith("b")
    assert result[1:-1].strip(" ") == ""


def test_extract_strings_in_order():
    assert extract_strings('x "ab" y "cd"') == ["ab", "cd"]


def test_extract_strings_drops_unterminated():
    assert extract_strings('"ab" "c') == ["ab"]


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == TRANSPARENT
    assert image.pixel(0, 1) == TRANSPARENT
    assert image.pixel(1, 1) == 0xFF0000


def test_named_colour_with_two_words():
    image = parse_xpm(["1 1 1 1", "a c light blue", "a"])
    assert image.pixel(0, 0) == lookup_color("light blue")


def test_unknown_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c #00FF00", "ab"])
    assert image.pixel(0, 0) == 0x00FF00
    assert image.pixel(1, 0) == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixel(0, 0) == 0x000001


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1"],
        ["1 1 1 1", "a m #000000", "a"],
        ["1 1 1 1", "a c"],
        ["1 1 1 1", "a c #000000"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = parse_xpm(SAMPLE)
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_to_bytes_byte_orders():
    image = XpmImage(1, 1, (0x112233,))
    assert image.to_bytes(4, big_endian=False) == b"\x33\x22\x11\x00"
    assert image.to_bytes(4, big_endian=True) == b"\x00\x11\x22\x33"


def test_to_bytes_round_trip():
    image = parse_xpm(SAMPLE)
    data = image.to_bytes(4)
    assert len(data) == 4 * image.width * image.height
    values = [int.from_bytes(data[i:i + 4], "little") for i in range(0, len(data), 4)]
    assert tuple(values) == image.pixels


def test_parse_file(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 2 2 1",\n'
        '". c #FF0000",\n'
        '"# c None",\n'
        "// pixels\n"
        '".#",\n'
        '"#."\n'
        "};\n"
    )
    assert parse_xpm_file(str(path)) == parse_xpm(SAMPLE)


def test_parse_missing_file(tmp_path):
    with pytest.raises(XpmError):
        parse_xpm_file(str(tmp_path / "absent.xpm"))