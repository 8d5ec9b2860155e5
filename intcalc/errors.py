from dataclasses import dataclass


class CalcError(Exception):
    """Base for every error reported back to the user for a single input"""


class RuntimeFault(CalcError):
    """Evaluation of a well-formed expression failed"""


class DivisionByZero(RuntimeFault):
    def __str__(self) -> str:
        return "[Runtime error] Cannot divide by 0"


@dataclass
class UndefinedVariable(RuntimeFault):
    name: str

    def __str__(self) -> str:
        return f"[Runtime error] Undefined variable: {self.name!r}"


class ResultTooLarge(RuntimeFault):
    def __str__(self) -> str:
        return "[Runtime error] Result too large to print"


class ExpressionTooDeep(RuntimeFault):
    def __str__(self) -> str:
        return "[Runtime error] Expression nested too deeply"
