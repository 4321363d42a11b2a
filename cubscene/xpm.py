"""Reading of XPM images into pixel values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cubscene.colors import text_to_rgb
from cubscene.strutil import atoi

TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels`` holds ``0xRRGGBB`` values row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the value of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def to_bytes(self, bytes_per_pixel: int = 4, big_endian: bool = False) -> bytes:
        """Pack the pixels, each in ``bytes_per_pixel`` bytes, rows unpadded."""
        if bytes_per_pixel <= 0:
            raise ValueError("bytes_per_pixel must be positive")
        mask = (1 << (8 * bytes_per_pixel)) - 1
        order = "big" if big_endian else "little"
        return b"".join((value & mask).to_bytes(bytes_per_pixel, order) for value in self.pixels)


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in text.replace("\t", " ").split(" ") if word]


def _find_outside_quotes(text: str, needle: str) -> int:
    in_quote = False
    last_start = len(text) - len(needle)
    for index, char in enumerate(text):
        if index > last_start:
            break
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(needle, index):
            return index
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(start + count, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    The length of the text is kept. A line comment is blanked together with
    the newline that ends it.
    """
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        offset = -1 if close < 0 else close - (begin + 2)
        text = _blank(text, begin, offset + 4)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        close = text.find("\n", begin + 2)
        offset = -1 if close < 0 else close - (begin + 2)
        text = _blank(text, begin, offset + 3)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of every double-quoted string, in order."""
    strings = []
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            break
        strings.append(text[opening + 1:closing])
        pos = closing + 1
    return strings


def _next(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("header values must be positive")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError("colour line shorter than its key")
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour line without a 'c' entry") from None
    if index >= len(words):
        raise XpmError("colour line without a colour after 'c'")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of strings.

    Pixels whose key is not in the palette are 0; pixels of the ``None``
    colour get the value ``0xFF000000``.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next(source, "header"))
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color_line(_next(source, "colour line"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)
    pixels: list[int] = []
    for _ in range(height):
        row = _next(source, "pixel row")
        if len(row) < width * cpp:
            raise XpmError("pixel row shorter than the image width")
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_file(path: str) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(extract_strings(strip_comments(text)))