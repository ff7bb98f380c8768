"""The kinds of tokens that the calculator's lexer produces."""

from __future__ import annotations

from enum import Enum


class InputType(Enum):
    """A token kind; str() gives its printable name."""

    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIV = "div"
    MOD = "mod"
    POW = "pow"

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    EXP = "exp"
    LOG = "log"

    SQRT = "sqrt"
    ABS = "abs"

    E = "e"
    PI = "pi"

    NUM = "num"
    IDENT = "ident"
    SCANERROR = "scanerror"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    END = "end"

    def __str__(self) -> str:
        return self.value