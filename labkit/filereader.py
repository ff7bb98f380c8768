"""A look-ahead reader over a text stream that tracks line and column."""

from __future__ import annotations

from typing import TextIO


def _show(c: str) -> str:
    if " " <= c <= "~":
        return c
    return "{" + f"{ord(c):02X}" + "}"


class FileReader:
    """Buffers characters from a stream so a lexer can look ahead and commit.

    Lines and columns are counted from zero.
    """

    def __init__(self, stream: TextIO | None = None, filename: str = "") -> None:
        self._stream = stream
        self._buffer = ""
        self._eof = False
        self.filename = filename
        self.line = 0
        self.column = 0

    def has(self, length: int) -> bool:
        """True if at least length characters are buffered, reading more if needed."""
        if length <= len(self._buffer):
            return True
        if not self.good():
            return False
        assert self._stream is not None
        while length > len(self._buffer):
            c = self._stream.read(1)
            if not c:
                self._eof = True
                return False
            self._buffer += c
        return True

    def peek(self, i: int) -> str:
        """Return the i-th buffered character; it must already be buffered."""
        if not 0 <= i < len(self._buffer):
            raise IndexError("filereader: peek outside of buffer")
        return self._buffer[i]

    def view(self, i: int) -> str:
        """Return the first i buffered characters."""
        if not 0 <= i <= len(self._buffer):
            raise IndexError("filereader: view outside of buffer")
        return self._buffer[:i]

    def commit(self, length: int) -> None:
        """Irreversibly consume length buffered characters."""
        if not 0 <= length <= len(self._buffer):
            raise IndexError("filereader: commit beyond buffer")
        consumed = self._buffer[:length]
        for c in consumed:
            if c == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
        self._buffer = self._buffer[length:]

    def good(self) -> bool:
        """True while a stream is attached and its end has not been reached."""
        return self._stream is not None and not self._eof

    def eof(self) -> bool:
        return self._eof

    def __str__(self) -> str:
        if self._stream is None:
            return "filereader( nofile )"
        text = f"filereader( {self.filename}, {self.line}, {self.column} ) : "
        text += "".join(_show(c) for c in self._buffer)
        if self.eof():
            text += " (end of file)"
        elif not self.good():
            text += "(file is not good)"
        return text + "\n"