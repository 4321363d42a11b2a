"""String helpers used by the scene parser.

The functions keep the exact edge-case behaviour the parser relies on:
whitespace and sign handling in ``atoi``, the word splitting that drops
empty fields, the left-to-right non-overlapping search in ``strrstr`` and
the ``None`` handling of ``strjoin``.
"""

from __future__ import annotations

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    then digits are read until the first non-digit. Text without digits
    gives 0. The result wraps like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = _wrap(result * 10 + int(text[pos]), 64)
        pos += 1
    return _wrap(_wrap(sign * result, 64), 32)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str | None, sep: str) -> list[str] | None:
    """Split ``text`` on ``sep``, dropping empty fields.

    ``None`` is passed through so that an absent text stays absent.
    """
    if text is None:
        return None
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``charset`` of ``None`` leaves the text unchanged.
    """
    if text is None:
        return None
    if charset is None:
        return text
    return text.strip(charset)


def strnstr(text: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying entirely within the first ``limit`` characters.

    Returns the index of the first match, or ``None``. An empty needle
    matches at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = text.find(needle, 0, limit)
    return None if index < 0 else index


def strrstr(text: str, needle: str) -> int | None:
    """Return the index of the last match of ``needle`` in ``text``.

    Matches are found left to right without overlapping, each search
    resuming just past the previous match; the last one found wins.
    Returns ``None`` when there is no match.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    found: int | None = None
    pos = 0
    while True:
        index = text.find(needle, pos)
        if index < 0:
            return found
        found = index
        pos = index + len(needle)


def substr(text: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def _code(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the difference of the first differing character codes, the end
    of a string counting as code 0, or 0 when the compared parts match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    for index in range(limit):
        a = _code(first, index)
        b = _code(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strcmp(first: str, second: str) -> int:
    """Compare two strings as ``strncmp`` does, without a length limit."""
    return strncmp(first, second, max(len(first), len(second)) + 1)


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a ``None`` side counts as empty.

    Returns ``None`` only when both sides are ``None``.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")