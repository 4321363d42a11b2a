import pytest

from cubscene.config import ConfigError, GameData, SceneLoader, is_numeric, parse_rgb

CONFIG_LINES = [
    "NO ./north.xpm \n",
    "SO ./south.xpm \n",
    "WE ./west.xpm \n",
    "EA ./east.xpm \n",
    "F 220,100,0 \n",
    "C 225,30,0 \n",
]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", True),
        ("255", True),
        ("+7", True),
        ("-0", True),
        ("256", False),
        ("-1", False),
        ("", False),
        ("+", False),
        ("12a", False),
        ("a", False),
        (" 1", False),
    ],
)
def test_is_numeric(text, expected):
    assert is_numeric(text) is expected


def test_parse_rgb_extremes():
    assert parse_rgb("255,255,255") == 0xFFFFFF
    assert parse_rgb("0,0,0") == 0


def test_parse_rgb_components():
    value = parse_rgb("220,100,0")
    assert (value >> 16) & 0xFF == 220
    assert (value >> 8) & 0xFF == 100
    assert value & 0xFF == 0


def test_parse_rgb_ignores_empty_fields():
    assert parse_rgb(",1,,2,3,") == parse_rgb("1,2,3")


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "1,x,3", "300,0,0", "-5,0,0", ""])
def test_parse_rgb_errors(text):
    with pytest.raises(ConfigError):
        parse_rgb(text)


def test_empty_game_data_is_not_loaded():
    data = GameData()
    assert data.params_loaded() is False
    assert data.f_rgb == -1 and data.c_rgb == -1


def test_full_scene():
    loader = SceneLoader()
    for line in CONFIG_LINES:
        loader.load_line(line)
    for row in ["111\n", "\n", "101\n", "111\n"]:
        loader.load_line(row)
    data = loader.finish()
    assert data.params_loaded()
    assert data.no_path == "./north.xpm"
    assert data.ea_path == "./east.xpm"
    assert data.f_rgb == parse_rgb("220,100,0")
    assert data.c_rgb == parse_rgb("225,30,0")
    assert data.map == ["111", "101", "111"]


def test_lines_after_config_go_to_map():
    loader = SceneLoader()
    for line in CONFIG_LINES:
        loader.load_line(line)
    loader.load_line("NO ./other.xpm \n")
    data = loader.finish()
    assert data.no_path == "./north.xpm"
    assert data.map == ["NO ./other.xpm "]


def test_finish_without_map():
    loader = SceneLoader()
    for line in CONFIG_LINES:
        loader.load_line(line)
    assert loader.finish().map is None


def test_later_identifier_overrides_earlier():
    loader = SceneLoader()
    loader.load_line("NO ./a.xpm \n")
    loader.load_line("NO ./b.xpm \n")
    assert loader.data.no_path == "./b.xpm"
    assert not loader.data.params_loaded()


@pytest.mark.parametrize(
    "line",
    ["NO ./north.xpm\n", "XX ./north.xpm \n", "\n", "NO ./north.xpm extra\n", "F 1,2 \n"],
)
def test_bad_config_lines(line):
    with pytest.raises(ConfigError):
        SceneLoader().load_line(line)