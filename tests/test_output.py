import os

import pytest

from ftkit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(read_fd, write_fd):
    os.close(write_fd)
    chunks = []
    while True:
        chunk = os.read(read_fd, 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def test_putchar_writes_one_byte(pipe):
    read_fd, write_fd = pipe
    assert putchar_fd("Z", write_fd) == 1
    assert _drain(read_fd, write_fd) == b"Z"


def test_putchar_accepts_code(pipe):
    read_fd, write_fd = pipe
    assert putchar_fd(ord("q"), write_fd) == 1
    assert _drain(read_fd, write_fd) == b"q"


@pytest.mark.parametrize("fd", [0, -1])
def test_putchar_refuses_non_positive_fd(fd):
    with pytest.raises(ValueError):
        putchar_fd("a", fd)


def test_putchar_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe[1])


def test_putstr_round_trip(pipe):
    read_fd, write_fd = pipe
    text = "hello world"
    assert putstr_fd(text, write_fd) == len(text)
    assert _drain(read_fd, write_fd) == text.encode()


def test_putendl_appends_newline(pipe):
    read_fd, write_fd = pipe
    assert putendl_fd("line", write_fd) == 5
    assert _drain(read_fd, write_fd) == b"line\n"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_putnbr_writes_decimal(pipe, n):
    read_fd, write_fd = pipe
    count = putnbr_fd(n, write_fd)
    written = _drain(read_fd, write_fd)
    assert written == str(n).encode()
    assert count == len(written)


def test_putstr_to_closed_fd_raises(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    with pytest.raises(OSError):
        putstr_fd("x", write_fd)