import io

import pytest

from webserv.lines import LineReader, read_lines

TEXT = "first line\nsecond\n\nfourth after an empty one\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 1000])
def test_lines_match_splitlines(size):
    lines = list(read_lines(io.StringIO(TEXT), size))
    assert lines == TEXT.splitlines(keepends=True)
    assert "".join(lines) == TEXT


def test_read_line_one_by_one():
    reader = LineReader(io.StringIO("a\nb"), 4)
    first = reader.read_line()
    second = reader.read_line()
    assert first == "a\n"
    assert second == "b"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_exhausted_reader_keeps_returning_none():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_binary_stream():
    data = b"alpha\nbeta\ngamma\n"
    assert list(read_lines(io.BytesIO(data), 5)) == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_size_raises(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)


def test_iteration_equals_read_lines():
    assert list(LineReader(io.StringIO(TEXT), 5)) == list(read_lines(io.StringIO(TEXT), 5))


class _FailingStream:
    def __init__(self):
        self.calls = 0

    def read(self, size):
        self.calls += 1
        if self.calls == 1:
            return "partial"
        raise OSError("broken")


def test_read_error_propagates_and_drops_buffer():
    stream = _FailingStream()
    reader = LineReader(stream, 7)
    with pytest.raises(OSError):
        reader.read_line()
    stream.calls = 10
    with pytest.raises(OSError):
        reader.read_line()


def test_data_after_error_is_not_returned():
    class Stream:
        def __init__(self):
            self.step = 0

        def read(self, size):
            self.step += 1
            if self.step == 1:
                return "lost"
            if self.step == 2:
                raise OSError("broken")
            return ""

    reader = LineReader(Stream(), 4)
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() is None