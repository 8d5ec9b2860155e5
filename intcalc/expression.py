import enum
from dataclasses import dataclass

from intcalc.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()

    @property
    def symbol(self) -> str:
        return {
            BinaryOperator.ADD: "+",
            BinaryOperator.SUB: "-",
            BinaryOperator.MUL: "*",
            BinaryOperator.DIV: "/",
        }[self]


# Nodes are built only by the parser and never mutated afterwards; every node owns its children.


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Assignment:
    name: str
    value: "Expression"

    def __str__(self) -> str:
        return f"({self.name} = {self.value})"


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.left} {self.operator.symbol} {self.right})"


@dataclass(frozen=True)
class Sequence:
    first: "Expression"
    second: "Expression"

    def __str__(self) -> str:
        return f"({self.first}; {self.second})"


Expression = Literal | Variable | Assignment | BinaryOperation | Sequence
