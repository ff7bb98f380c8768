"""A reverse-Polish calculator that reads tokens from a FileReader."""

from __future__ import annotations

import argparse
import math
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from .filereader import FileReader
from .lexer import read
from .tokens import InputType

_NULLARY = frozenset({InputType.E, InputType.PI})
_UNARY = frozenset({
    InputType.SIN, InputType.COS, InputType.TAN, InputType.EXP,
    InputType.LOG, InputType.SQRT, InputType.ABS,
})
_BINARY = frozenset({
    InputType.PLUS, InputType.MINUS, InputType.TIMES,
    InputType.DIV, InputType.MOD, InputType.POW,
})
_SILENT = frozenset({InputType.WHITESPACE, InputType.COMMENT})

_NUMBER_PREFIX = re.compile(r"-?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?")


class RpnError(Exception):
    """An error in the input, with the position (counted from 0) where it arose."""

    def __init__(self, cause: str, line: int, column: int) -> None:
        super().__init__(cause)
        self.cause = cause
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.cause} at position {self.line + 1}/{self.column + 1}"


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_stack(stack: Sequence[float], limit: int = 10) -> str:
    """Show the top `limit` entries of a stack whose top is its last element.

    Deeper entries are replaced by '...'.
    """
    if len(stack) > limit:
        shown = stack[len(stack) - limit:] if limit > 0 else []
        text = " [ ..." + "".join(f", {_fmt(v)}" for v in shown)
    elif stack:
        text = "[ " + ", ".join(_fmt(v) for v in stack)
    else:
        text = "["
    return text + " ]"


def apply0(op: InputType) -> float:
    """Value of a constant."""
    if op is InputType.E:
        return 2.7182818284590452
    if op is InputType.PI:
        return 3.1415926535897932
    raise ValueError("unknown 0-ary operator")


def _exp(d: float) -> float:
    try:
        return math.exp(d)
    except OverflowError:
        return math.inf


def _log(d: float) -> float:
    if d == 0:
        return -math.inf
    if d < 0:
        return math.nan
    return math.log(d)


def _sqrt(d: float) -> float:
    return math.nan if d < 0 else math.sqrt(d)


def _tan(d: float) -> float:
    try:
        return math.tan(d)
    except ValueError:
        return math.nan


def _trig(fn):
    def apply(d: float) -> float:
        try:
            return fn(d)
        except ValueError:
            return math.nan
    return apply


_UNARY_FUNCS = {
    InputType.EXP: _exp,
    InputType.LOG: _log,
    InputType.SQRT: _sqrt,
    InputType.SIN: _trig(math.sin),
    InputType.COS: _trig(math.cos),
    InputType.TAN: _tan,
    InputType.ABS: abs,
}


def apply1(op: InputType, d1: float) -> float:
    """Apply a one-argument function."""
    try:
        fn = _UNARY_FUNCS[op]
    except KeyError:
        raise ValueError("unknown unary operator") from None
    return fn(d1)


def _divide(d1: float, d2: float) -> float:
    if d2 == 0:
        if d1 == 0 or math.isnan(d1):
            return math.nan
        return math.copysign(math.inf, d1) * math.copysign(1.0, d2)
    return d1 / d2


def _mod(d1: float, d2: float) -> float:
    quotient = _divide(d1, d2)
    if math.isnan(quotient) or math.isinf(quotient):
        return math.nan
    return d1 - int(quotient) * d2


def _pow(d1: float, d2: float) -> float:
    try:
        return math.pow(d1, d2)
    except OverflowError:
        odd = d2.is_integer() and int(d2) % 2 == 1
        return -math.inf if d1 < 0 and odd else math.inf
    except ValueError:
        return math.inf if d1 == 0 else math.nan


_BINARY_FUNCS = {
    InputType.PLUS: lambda a, b: a + b,
    InputType.MINUS: lambda a, b: a - b,
    InputType.TIMES: lambda a, b: a * b,
    InputType.DIV: _divide,
    InputType.MOD: _mod,
    InputType.POW: _pow,
}


def apply2(op: InputType, d1: float, d2: float) -> float:
    """Apply a two-argument operator; d1 is the deeper operand."""
    try:
        fn = _BINARY_FUNCS[op]
    except KeyError:
        raise ValueError("unknown binary operator") from None
    return fn(d1, d2)


def _number(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def evaluate(reader: FileReader, out: TextIO | None = None) -> float:
    """Evaluate one expression up to ';' or '=' and return its value.

    The stack is written to out after every change.
    """
    if out is None:
        out = sys.stdout
    stack: list[float] = []

    while True:
        kind, length = read(reader)

        if kind in _NULLARY:
            stack.append(apply0(kind))
        elif kind is InputType.NUM:
            stack.append(_number(reader.view(length)))
        elif kind in _UNARY:
            if not stack:
                raise RpnError(
                    f"unary operator {kind}: no number on stack",
                    reader.line, reader.column,
                )
            stack.append(apply1(kind, stack.pop()))
        elif kind in _BINARY:
            if len(stack) < 2:
                raise RpnError(
                    f"binary operator {kind}: less than two numbers on stack",
                    reader.line, reader.column,
                )
            d2 = stack.pop()
            d1 = stack.pop()
            stack.append(apply2(kind, d1, d2))
        elif kind in _SILENT:
            pass
        elif kind is InputType.END:
            if not stack:
                raise RpnError("no value to return", reader.line, reader.column)
            if len(stack) > 1:
                out.write("(ended with more than one value on the stack)\n")
            return stack[-1]
        elif kind is InputType.IDENT:
            raise RpnError("unknown identifier", reader.line, reader.column)
        else:
            raise RpnError(f"cannot handle {kind}", reader.line, reader.column)

        if kind not in _SILENT:
            out.write(format_stack(stack) + "\n")

        reader.commit(length)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate an expression in reverse Polish notation."
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    def run(stream: TextIO, name: str) -> None:
        reader = FileReader(stream, name)
        try:
            print("evaluating rpn:")
            result = evaluate(reader)
            print(f"result: {_fmt(result)}")
        except (RpnError, ValueError, IndexError) as e:
            print(e)

    if args.file is None:
        run(sys.stdin, "stdin")
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                run(f, args.file)
        except OSError as e:
            print(f"could not open {args.file}: {e.strerror}", file=sys.stderr)
            return 1
    return 0