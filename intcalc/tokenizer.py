import enum
import re
from dataclasses import dataclass
from typing import Callable

from intcalc.errors import CalcError
from intcalc.utils import PrintableEnum, caret_excerpt


@dataclass
class LexError(CalcError):
    errmsg: str
    code: str
    error_char_idx: int

    @property
    def char(self) -> str:
        return self.code[self.error_char_idx]

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *caret_excerpt(self.code, self.error_char_idx)])


class TokenKind(PrintableEnum):
    NUMBER = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    MULT = enum.auto()
    DIV = enum.auto()
    ASSIGN = enum.auto()
    NAME = enum.auto()
    SEMICOLON = enum.auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.kind}>{self.lexeme}"


def _is_valid_in_number(s: str) -> bool:
    return s.isascii() and s.isdigit()


def _is_valid_in_name(s: str) -> bool:
    return s.isascii() and s.isalpha()


SINGLE_CHAR_TOKENS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
}


def _consume_run(code: str, i: int, is_valid: Callable[[str], bool]) -> int:
    """Index one past the maximal run of valid characters starting at `i`"""
    end_idx = i + 1
    while end_idx < len(code) and is_valid(code[end_idx]):
        end_idx += 1
    return end_idx


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_valid_in_number(code[i]):
            number_end_idx = _consume_run(code, i, _is_valid_in_number)
            tokens.append(Token(kind=TokenKind.NUMBER, lexeme=code[i:number_end_idx]))
            i = number_end_idx
            continue
        elif _is_valid_in_name(code[i]):
            name_end_idx = _consume_run(code, i, _is_valid_in_name)
            tokens.append(Token(kind=TokenKind.NAME, lexeme=code[i:name_end_idx]))
            i = name_end_idx
            continue
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(kind=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i]))
        elif code[i].isspace():
            pass
        else:
            raise LexError(f"Unknown character: {code[i]!r}", code=code, error_char_idx=i)
        i += 1
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    result = re.sub(r"\s+;", ";", result)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
