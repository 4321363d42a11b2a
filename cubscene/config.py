"""Scene configuration: textures, floor and ceiling colours, and the map."""

from __future__ import annotations

from dataclasses import dataclass, field

from cubscene.strutil import atoi, split


class ConfigError(ValueError):
    """Raised when a scene description is malformed."""


@dataclass
class GameData:
    """Everything read from a scene description."""

    map_path: str | None = None
    map_text: str | None = None
    map: list[str] | None = None
    no_path: str | None = None
    so_path: str | None = None
    we_path: str | None = None
    ea_path: str | None = None
    f_rgb: int = -1
    c_rgb: int = -1

    def params_loaded(self) -> bool:
        """Tell whether all four textures and both colours are set."""
        return bool(
            self.no_path
            and self.so_path
            and self.we_path
            and self.ea_path
            and self.f_rgb >= 0
            and self.c_rgb >= 0
        )


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is a whole colour component from 0 to 255.

    One leading sign is allowed; a negative value other than zero is not.
    """
    pos = 0
    sign = 1
    if text[:1] in ("-", "+") and text:
        if text[0] == "-":
            sign = -1
        pos = 1
    if pos >= len(text) or not text[pos].isdigit() or not text[pos].isascii():
        return False
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + int(text[pos])
        if value > 255 or value * sign < 0:
            return False
        pos += 1
    return pos == len(text)


def _parse_component(text: str) -> int:
    if not is_numeric(text):
        raise ConfigError("unvalid map format")
    return atoi(text)


def parse_rgb(text: str) -> int:
    """Parse ``R,G,B`` into a single ``0xRRGGBB`` integer."""
    parts = split(text, ",") or []
    if len(parts) != 3:
        raise ConfigError("invalid color: expected three components")
    red, green, blue = (_parse_component(part) for part in parts)
    return (red << 16) | (green << 8) | blue


_TEXTURES = {"NO": "no_path", "SO": "so_path", "WE": "we_path", "EA": "ea_path"}
_COLORS = {"F": "f_rgb", "C": "c_rgb"}


class SceneLoader:
    """Feed a scene description line by line, then call :meth:`finish`.

    Configuration lines come first; once every texture and colour is set,
    all further lines belong to the map.
    """

    def __init__(self) -> None:
        self.data = GameData()
        self._in_map = False

    def load_line(self, line: str) -> None:
        """Take one line, newline included."""
        if self._in_map:
            self.data.map_text = (self.data.map_text or "") + line
            return
        self._load_config_line(line)
        if self.data.params_loaded():
            self._in_map = True

    def _load_config_line(self, line: str) -> None:
        tokens = split(line, " ") or []
        if len(tokens) < 3 or not tokens[2].startswith("\n"):
            raise ConfigError("Unvalid map format!")
        key, value = tokens[0], tokens[1]
        if key in _TEXTURES:
            setattr(self.data, _TEXTURES[key], value)
        elif key in _COLORS:
            setattr(self.data, _COLORS[key], parse_rgb(value))
        else:
            raise ConfigError("Unvalid map format!")

    def finish(self) -> GameData:
        """Build the map rows from the collected map lines and return the data."""
        self.data.map = split(self.data.map_text, "\n")
        return self.data