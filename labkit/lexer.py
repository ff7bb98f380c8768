"""Tokeniser for the reverse-Polish calculator.

Tokens are recognised by longest match, reading from a FileReader only as
far as needed:

* whitespace: one or more of space, tab, newline, carriage return;
* numbers: an optional '-', then '0' or a non-zero digit followed by digits.
  After that an optional '.' with any number of digits. After that an optional
  'e' or 'E', an optional sign and at most three exponent digits;
* identifiers: a letter or '_' followed by letters, digits or '_'. The
  words sin, cos, tan, exp, log, sqrt, abs, e and pi get their own kinds;
* comments: '//' up to and including a newline, or '/*' ... '*/';
* single characters: + - * / % ^, and ';' or '=' which end the input.
"""

from __future__ import annotations

from .filereader import FileReader
from .tokens import InputType

_DIGITS = frozenset("0123456789")
_NONZERO = frozenset("123456789")
_WHITESPACE = frozenset(" \t\n\r")
_LETTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_IDENT_NEXT = _LETTERS | _DIGITS
_EXPONENT = frozenset("eE")
_SIGNS = frozenset("+-")
_MAX_EXPONENT_DIGITS = 3

_SINGLE = {
    "%": InputType.MOD,
    "*": InputType.TIMES,
    "+": InputType.PLUS,
    "^": InputType.POW,
    ";": InputType.END,
    "=": InputType.END,
}

_KEYWORDS = {
    "sin": InputType.SIN,
    "cos": InputType.COS,
    "tan": InputType.TAN,
    "exp": InputType.EXP,
    "log": InputType.LOG,
    "sqrt": InputType.SQRT,
    "abs": InputType.ABS,
    "e": InputType.E,
    "pi": InputType.PI,
}


def _at(reader: FileReader, i: int) -> str | None:
    """The i-th character ahead, or None if the input ends before it."""
    if reader.has(i + 1):
        return reader.peek(i)
    return None


def _span(reader: FileReader, i: int, chars: frozenset[str]) -> int:
    """Advance from i over characters in chars; return the end position."""
    while _at(reader, i) in chars:
        i += 1
    return i


def _number(reader: FileReader, start: int) -> int:
    """End position of a number starting at start, or 0 if there is none."""
    c = _at(reader, start)
    if c == "0":
        i = start + 1
    elif c in _NONZERO:
        i = _span(reader, start + 1, _DIGITS)
    else:
        return 0
    if _at(reader, i) == ".":
        i = _span(reader, i + 1, _DIGITS)
    if _at(reader, i) in _EXPONENT:
        i += 1
        if _at(reader, i) in _SIGNS:
            i += 1
        for _ in range(_MAX_EXPONENT_DIGITS):
            if _at(reader, i) not in _DIGITS:
                break
            i += 1
    return i


def _slash(reader: FileReader) -> tuple[InputType, int]:
    """Classify input starting with '/': a comment or a division."""
    opener = _at(reader, 1)
    i = 2
    if opener == "/":
        while (c := _at(reader, i)) is not None:
            i += 1
            if c == "\n":
                return InputType.COMMENT, i
    elif opener == "*":
        after_star = False
        while (c := _at(reader, i)) is not None:
            i += 1
            if after_star and c == "/":
                return InputType.COMMENT, i
            after_star = c == "*"
    return InputType.DIV, 1


def classify(reader: FileReader) -> tuple[InputType, int]:
    """Return the kind and length of the longest token at the reader's front.

    Gives (InputType.SCANERROR, 0) if no token starts there. Nothing is
    committed; characters are only buffered.
    """
    c = _at(reader, 0)
    if c is None:
        return InputType.SCANERROR, 0
    if c in _WHITESPACE:
        return InputType.WHITESPACE, _span(reader, 1, _WHITESPACE)
    if c in _SINGLE:
        return _SINGLE[c], 1
    if c == "-":
        end = _number(reader, 1)
        return (InputType.NUM, end) if end else (InputType.MINUS, 1)
    if c in _DIGITS:
        return InputType.NUM, _number(reader, 0)
    if c == "/":
        return _slash(reader)
    if c in _LETTERS:
        end = _span(reader, 1, _IDENT_NEXT)
        return _KEYWORDS.get(reader.view(end), InputType.IDENT), end
    return InputType.SCANERROR, 0


def read(reader: FileReader) -> tuple[InputType, int]:
    """Return the next token's kind and length without committing it.

    At the end of the input this is (InputType.END, 0); a character that
    starts no token gives (InputType.SCANERROR, 1).
    """
    if not reader.has(1):
        return InputType.END, 0
    kind, length = classify(reader)
    if length > 0:
        return kind, length
    return InputType.SCANERROR, 1