import io

import pytest

from pipex.linereader import LineReader, read_lines

SAMPLES = [
    "ab\ncd\nef",
    "ab\ncd\n",
    "\n",
    "\n\n\n",
    "single line without newline",
    "a much longer first line that spans several read buffers\nshort\n",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("buffer_size", [1, 2, 3, 20, 1000])
def test_lines_join_back_to_input(text, buffer_size):
    lines = list(read_lines(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


@pytest.mark.parametrize("text", SAMPLES)
def test_every_line_but_last_ends_with_newline(text):
    lines = list(LineReader(io.StringIO(text)))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)


def test_next_line_returns_lines_in_order():
    reader = LineReader(io.StringIO("ab\ncd\nef"), 4)
    assert reader.next_line() == "ab\n"
    assert reader.next_line() == "cd\n"
    assert reader.next_line() == "ef"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream_yields_nothing():
    assert list(read_lines(io.StringIO(""))) == []
    assert LineReader(io.BytesIO(b"")).next_line() is None


@pytest.mark.parametrize("buffer_size", [1, 5, 20])
def test_binary_stream(buffer_size):
    data = b"first\nsecond\nthird"
    lines = list(read_lines(io.BytesIO(data), buffer_size))
    assert lines == data.splitlines(keepends=True)
    assert b"".join(lines) == data


def test_readers_on_separate_streams_keep_their_own_state():
    one = LineReader(io.StringIO("a1\na2\n"), 1)
    two = LineReader(io.StringIO("b1\nb2\n"), 1)
    assert one.next_line() == "a1\n"
    assert two.next_line() == "b1\n"
    assert one.next_line() == "a2\n"
    assert two.next_line() == "b2\n"


@pytest.mark.parametrize("buffer_size", [0, -3])
def test_non_positive_buffer_size_is_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x\n"), buffer_size)


class _FailingStream:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates():
    reader = LineReader(_FailingStream())
    with pytest.raises(OSError):
        reader.next_line()


def test_reads_resume_after_stream_grows():
    stream = io.StringIO()
    reader = LineReader(stream, 3)
    assert reader.next_line() is None
    stream.write("late\n")
    stream.seek(0)
    assert reader.next_line() == "late\n"