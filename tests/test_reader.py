import io

import pytest

from cubscene.reader import LineReader


def test_lines_keep_newlines():
    reader = LineReader(io.StringIO("first\nsecond\nthird"), 4)
    assert list(reader) == ["first\n", "second\n", "third"]


def test_read_line_returns_none_at_end():
    reader = LineReader(io.StringIO("only\n"), 32)
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_yields_nothing():
    assert list(LineReader(io.StringIO(""), 8)) == []


@pytest.mark.parametrize("size", [1, 2, 3, 7, 32, 1000])
def test_buffer_size_does_not_change_lines(size):
    text = "NO ./a \n\n  111\n1001\n111"
    assert "".join(LineReader(io.StringIO(text), size)) == text
    assert list(LineReader(io.StringIO(text), size)) == text.splitlines(keepends=True)


def test_blank_lines_are_returned():
    reader = LineReader(io.StringIO("\n\nx\n"), 1)
    assert list(reader) == ["\n", "\n", "x\n"]


def test_reset_drops_buffered_text():
    reader = LineReader(io.StringIO("ab\ncd\nef\n"), 32)
    assert reader.read_line() == "ab\n"
    reader.reset()
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)