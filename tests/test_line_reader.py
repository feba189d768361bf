import io
import os

import pytest

from ftkit.line_reader import BUFFER_SIZE, LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_end, write_end = os.pipe()
    os.write(write_end, data)
    os.close(write_end)
    return read_end


def test_default_buffer_size_reads_five_bytes_per_chunk():
    stream = io.BytesIO(b"ab\ncdefghijklmnop\n")
    reader = LineReader(stream)
    assert reader.read_line() == b"ab\n"
    assert stream.tell() == BUFFER_SIZE == 5


def test_bytes_lines_keep_newlines():
    reader = LineReader(io.BytesIO(b"hello world\nab\n\nlast"))
    assert list(reader) == [b"hello world\n", b"ab\n", b"\n", b"last"]


def test_text_stream_gives_str_lines():
    reader = LineReader(io.StringIO("one\ntwo\n"))
    assert reader.read_line() == "one\n"
    assert reader.read_line() == "two\n"
    assert reader.read_line() is None


def test_empty_source_gives_none():
    assert LineReader(io.BytesIO(b"")).read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 42, 10000])
def test_round_trip_any_buffer_size(size):
    data = b"1111111111\n2222\n\n33333333333333333333\n4"
    lines = list(LineReader(io.BytesIO(data), buffer_size=size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines == data.splitlines(keepends=True)


def test_only_reads_up_to_newline():
    stream = io.BytesIO(b"ab\ncdefghijklmnop\n")
    reader = LineReader(stream, buffer_size=3)
    assert reader.read_line() == b"ab\n"
    assert stream.tell() == 3


def test_none_after_end_is_repeatable():
    reader = LineReader(io.BytesIO(b"x"))
    assert reader.read_line() == b"x"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_reader_on_file_descriptor(tmp_path):
    path = tmp_path / "map.ber"
    path.write_bytes(b"1111\n1PCE1\n1111\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(LineReader(fd)) == [b"1111\n", b"1PCE1\n", b"1111\n"]
    finally:
        os.close(fd)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), buffer_size=size)


def test_invalid_source():
    with pytest.raises(TypeError):
        LineReader(object())
    with pytest.raises(ValueError):
        LineReader(-1)


def test_source_error_propagates():
    class Broken:
        def read(self, size):
            raise OSError("boom")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()


def test_get_next_line_reads_whole_pipe():
    fd = _pipe_with(b"first line\nsecond\nno newline")
    try:
        assert get_next_line(fd) == b"first line\n"
        assert get_next_line(fd) == b"second\n"
        assert get_next_line(fd) == b"no newline"
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


def test_get_next_line_keeps_descriptors_apart():
    fd_a = _pipe_with(b"a1\na2\n")
    fd_b = _pipe_with(b"b1\nb2\n")
    try:
        assert get_next_line(fd_a) == b"a1\n"
        assert get_next_line(fd_b) == b"b1\n"
        assert get_next_line(fd_a) == b"a2\n"
        assert get_next_line(fd_b) == b"b2\n"
        assert get_next_line(fd_a) is None
        assert get_next_line(fd_b) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


def test_get_next_line_negative_fd():
    with pytest.raises(ValueError):
        get_next_line(-1)


def test_get_next_line_closed_fd():
    read_end, write_end = os.pipe()
    os.close(write_end)
    os.close(read_end)
    with pytest.raises(OSError):
        get_next_line(read_end)