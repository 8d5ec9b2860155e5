from dataclasses import dataclass

from intcalc.errors import CalcError
from intcalc.expression import Assignment, BinaryOperation, BinaryOperator, Expression, Literal, Sequence, Variable
from intcalc.tokenizer import Token, TokenKind, untokenize
from intcalc.utils import MAX_NUMBER_DIGITS, caret_excerpt


@dataclass
class ParseError(CalcError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        code = untokenize(self.tokens)
        if self.error_token_idx < len(self.tokens):
            parsed = untokenize(self.tokens[: self.error_token_idx + 1])
            caret_idx = len(parsed) - len(self.tokens[self.error_token_idx].lexeme)
        else:
            caret_idx = len(code) + 1 if code else 0
        return "\n".join([f"[Parser error] {self.errmsg}", *caret_excerpt(code, caret_idx)])


ADDITION_OPERATORS = {
    TokenKind.PLUS: BinaryOperator.ADD,
    TokenKind.MINUS: BinaryOperator.SUB,
}

MULTIPLICATION_OPERATORS = {
    TokenKind.MULT: BinaryOperator.MUL,
    TokenKind.DIV: BinaryOperator.DIV,
}


def parse(tokens: list[Token]) -> Expression:
    """Builds the AST for a whole input; every token must be consumed

    Grammar, loosest binding first, all binary levels left-associative:

        seq      := assign (';' assign)*
        assign   := NAME '=' addition | addition
        addition := mult (('+' | '-') mult)*
        mult     := term (('*' | '/') term)*
        term     := NUMBER | NAME | '(' seq ')'
    """
    try:
        result, i = _consume_sequence(tokens, 0)
    except RecursionError:
        raise ParseError("Expression nested too deeply", tokens=tokens, error_token_idx=0) from None
    if i < len(tokens):
        raise ParseError(f"Unexpected {tokens[i].kind} {tokens[i].lexeme!r}", tokens=tokens, error_token_idx=i)
    return result


def _past_end(tokens: list[Token], i: int) -> bool:
    return i >= len(tokens)


def _consume_sequence(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_assignment(tokens, i)
    while not _past_end(tokens, i) and tokens[i].kind is TokenKind.SEMICOLON:
        second, i = _consume_assignment(tokens, i + 1)
        result = Sequence(first=result, second=second)
    return result, i


def _consume_assignment(tokens: list[Token], i: int) -> tuple[Expression, int]:
    # the value is an addition, so assignments do not chain: in "x = y = 1" the second '=' is left over
    if (
        not _past_end(tokens, i + 1)
        and tokens[i].kind is TokenKind.NAME
        and tokens[i + 1].kind is TokenKind.ASSIGN
    ):
        value, j = _consume_addition(tokens, i + 2)
        return Assignment(name=tokens[i].lexeme, value=value), j
    return _consume_addition(tokens, i)


def _consume_addition(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_multiplication(tokens, i)
    while not _past_end(tokens, i) and tokens[i].kind in ADDITION_OPERATORS:
        operator = ADDITION_OPERATORS[tokens[i].kind]
        right, i = _consume_multiplication(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_multiplication(tokens: list[Token], i: int) -> tuple[Expression, int]:
    result, i = _consume_term(tokens, i)
    while not _past_end(tokens, i) and tokens[i].kind in MULTIPLICATION_OPERATORS:
        operator = MULTIPLICATION_OPERATORS[tokens[i].kind]
        right, i = _consume_term(tokens, i + 1)
        result = BinaryOperation(operator=operator, left=result, right=right)
    return result, i


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    if _past_end(tokens, i):
        raise ParseError(
            "Expected number, name or parenthesis, found end of input", tokens=tokens, error_token_idx=i
        )
    first = tokens[i]
    if first.kind is TokenKind.NUMBER:
        if len(first.lexeme) > MAX_NUMBER_DIGITS:
            raise ParseError(
                f"Number too long, at most {MAX_NUMBER_DIGITS} digits", tokens=tokens, error_token_idx=i
            )
        return Literal(int(first.lexeme)), i + 1
    elif first.kind is TokenKind.NAME:
        return Variable(first.lexeme), i + 1
    elif first.kind is TokenKind.LPAREN:
        inner, j = _consume_sequence(tokens, i + 1)
        if _past_end(tokens, j):
            raise ParseError("Unclosed parenthesis", tokens=tokens, error_token_idx=i)
        if tokens[j].kind is not TokenKind.RPAREN:
            raise ParseError(
                f"Unclosed parenthesis, expected ')', found {tokens[j].kind}", tokens=tokens, error_token_idx=j
            )
        return inner, j + 1
    else:
        raise ParseError(
            f"Expected number, name or parenthesis, found {first.kind}", tokens=tokens, error_token_idx=i
        )
