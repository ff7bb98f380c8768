import pytest

from labkit.tokens import InputType


@pytest.mark.parametrize(
    "kind, text",
    [
        (InputType.PLUS, "plus"),
        (InputType.MINUS, "minus"),
        (InputType.TIMES, "times"),
        (InputType.DIV, "div"),
        (InputType.MOD, "mod"),
        (InputType.POW, "pow"),
        (InputType.SIN, "sin"),
        (InputType.SQRT, "sqrt"),
        (InputType.PI, "pi"),
        (InputType.NUM, "num"),
        (InputType.IDENT, "ident"),
        (InputType.SCANERROR, "scanerror"),
        (InputType.COMMENT, "comment"),
        (InputType.WHITESPACE, "whitespace"),
        (InputType.END, "end"),
    ],
)
def test_str_gives_name(kind, text):
    assert str(kind) == text


ALL_NAMES = [
    "plus", "minus", "times", "div", "mod", "pow",
    "sin", "cos", "tan", "exp", "log",
    "sqrt", "abs",
    "e", "pi",
    "num", "ident", "scanerror", "comment", "whitespace",
    "end",
]


def test_names_are_unique_and_complete():
    kinds = [InputType(name) for name in ALL_NAMES]
    assert len(set(kinds)) == 21
    assert [str(k) for k in kinds] == ALL_NAMES


def test_declaration_order():
    kinds = list(InputType)
    assert kinds[0] is InputType("plus")
    assert kinds[-1] is InputType("end")
    assert [str(k) for k in kinds] == ALL_NAMES


def test_lookup_by_name_round_trips():
    for kind in InputType:
        assert InputType(str(kind)) is kind


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        InputType("???")