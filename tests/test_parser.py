import pytest

from intcalc.expression import Assignment, BinaryOperation, BinaryOperator, Expression, Literal, Sequence, Variable
from intcalc.parser import ParseError, parse
from intcalc.tokenizer import tokenize


@pytest.mark.parametrize(
    "code, expected_ast",
    [
        pytest.param("7", Literal(7)),
        pytest.param("x", Variable("x")),
        pytest.param("007", Literal(7)),
        pytest.param(
            "2+3*4",
            BinaryOperation(
                BinaryOperator.ADD, Literal(2), BinaryOperation(BinaryOperator.MUL, Literal(3), Literal(4))
            ),
        ),
        pytest.param(
            "10-3-2",
            BinaryOperation(
                BinaryOperator.SUB, BinaryOperation(BinaryOperator.SUB, Literal(10), Literal(3)), Literal(2)
            ),
        ),
        pytest.param(
            "8/4/2",
            BinaryOperation(
                BinaryOperator.DIV, BinaryOperation(BinaryOperator.DIV, Literal(8), Literal(4)), Literal(2)
            ),
        ),
        pytest.param(
            "x = 1 + y",
            Assignment("x", BinaryOperation(BinaryOperator.ADD, Literal(1), Variable("y"))),
        ),
        pytest.param(
            "a = 1; b = 2; a",
            Sequence(Sequence(Assignment("a", Literal(1)), Assignment("b", Literal(2))), Variable("a")),
        ),
        pytest.param(
            "(a = 1; a + 2) * 3",
            BinaryOperation(
                BinaryOperator.MUL,
                Sequence(Assignment("a", Literal(1)), BinaryOperation(BinaryOperator.ADD, Variable("a"), Literal(2))),
                Literal(3),
            ),
        ),
    ],
)
def test_parse(code: str, expected_ast: Expression) -> None:
    assert parse(tokenize(code)) == expected_ast


@pytest.mark.parametrize(
    "code, expected_errmsg",
    [
        pytest.param("", "found end of input", id="empty"),
        pytest.param("1 +", "found end of input", id="missing-right-operand"),
        pytest.param("2 * (3 -", "found end of input"),
        pytest.param("x =", "found end of input", id="assignment-without-value"),
        pytest.param("a = 1;", "found end of input", id="trailing-semicolon"),
        pytest.param("(1+2", "Unclosed parenthesis"),
        pytest.param("((1)", "Unclosed parenthesis"),
        pytest.param("(1 2)", "Unclosed parenthesis"),
        pytest.param("()", "found RPAREN"),
        pytest.param(")", "found RPAREN"),
        pytest.param("* 2", "found MULT"),
        pytest.param("-1", "found MINUS", id="no-unary-minus"),
        pytest.param("1 2", "Unexpected NUMBER"),
        pytest.param("1)", "Unexpected RPAREN"),
        pytest.param("x=y=1", "Unexpected ASSIGN", id="assignment-does-not-chain"),
        pytest.param("x == 1", "found ASSIGN"),
        pytest.param("1 = 2", "Unexpected ASSIGN"),
        pytest.param("(x) = 2", "Unexpected ASSIGN"),
    ],
)
def test_parse_error(code: str, expected_errmsg: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse(tokenize(code))
    assert expected_errmsg in exc_info.value.errmsg


def test_parse_is_repeatable() -> None:
    tokens = tokenize("x = 4; (x + 5) * 2 - 10 / y")
    assert parse(tokens) == parse(tokens)


def test_parse_error_message_points_at_token() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse(tokenize("x=y=1"))
    assert exc_info.value.error_token_idx == 3
    assert str(exc_info.value).splitlines() == [
        "[Parser error] Unexpected ASSIGN '='",
        "x = y = 1",
        "      ^",
    ]


def test_parse_error_message_at_end_of_input() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse(tokenize("1 +"))
    assert exc_info.value.error_token_idx == 2
    assert str(exc_info.value).splitlines()[1:] == ["1 +", "    ^"]


def test_expression_str() -> None:
    assert str(parse(tokenize("a = 2 + 3 * 4; (a - 1) / 2"))) == "((a = (2 + (3 * 4))); ((a - 1) / 2))"
