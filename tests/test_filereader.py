import io

import pytest

from labkit.filereader import FileReader


def make(text, name="test"):
    return FileReader(io.StringIO(text), name)


def test_has_reads_ahead_and_peek_returns_characters():
    r = make("abc")
    assert r.has(2)
    assert r.peek(0) == "a"
    assert r.peek(1) == "b"
    assert r.good()


def test_has_beyond_end_fails_and_sets_eof():
    r = make("ab")
    assert not r.has(3)
    assert r.eof()
    assert not r.good()
    assert r.view(2) == "ab"


def test_peek_outside_buffer_raises():
    r = make("abc")
    r.has(1)
    with pytest.raises(IndexError):
        r.peek(1)


def test_view_outside_buffer_raises():
    r = make("abc")
    r.has(2)
    assert r.view(0) == ""
    with pytest.raises(IndexError):
        r.view(3)


def test_commit_beyond_buffer_raises():
    r = make("abc")
    r.has(1)
    with pytest.raises(IndexError):
        r.commit(2)


def test_commit_tracks_lines_and_columns():
    r = make("ab\ncd\nef")
    assert r.has(8)
    r.commit(4)
    assert (r.line, r.column) == (1, 1)
    assert r.view(4) == "d\nef"
    r.commit(2)
    assert (r.line, r.column) == (2, 0)
    assert r.peek(0) == "e"


def test_commit_everything_round_trips_text():
    text = "1 2 +\n3 *;"
    r = make(text)
    collected = []
    while r.has(1):
        collected.append(r.peek(0))
        r.commit(1)
    assert "".join(collected) == text
    assert r.line == text.count("\n")


def test_reader_without_stream():
    r = FileReader()
    assert str(r) == "filereader( nofile )"
    assert not r.good()
    assert not r.has(1)


def test_str_shows_buffer_and_end_of_file():
    r = make("ab\n", "stdin")
    r.has(3)
    assert str(r) == "filereader( stdin, 0, 0 ) : ab{0A}\n"
    assert not r.has(4)
    assert str(r).endswith(" (end of file)\n")