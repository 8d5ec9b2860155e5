import logging
from dataclasses import dataclass, field
from typing import Optional

from intcalc.environment import Environment
from intcalc.errors import CalcError
from intcalc.parser import parse
from intcalc.runtime import evaluate
from intcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    value: int


@dataclass(frozen=True)
class Failure:
    error: CalcError

    @property
    def message(self) -> str:
        return str(self.error)


Result = Success | Failure


def calculate(code: str, environment: Environment) -> Result:
    """Runs one input through tokenizer, parser and evaluator

    Any calculator error becomes a `Failure`; assignments made before the error are kept.
    """
    try:
        tokens = tokenize(code)
        logger.debug("tokens: %s", " ".join(str(t) for t in tokens))
        expression = parse(tokens)
        logger.debug("ast: %s", expression)
        value = evaluate(expression, environment)
    except CalcError as e:
        logger.debug("%r failed: %r", code, e)
        return Failure(e)
    logger.debug("%r = %d, variables: %s", code, value, environment.as_dict())
    return Success(value)


@dataclass
class Session:
    environment: Environment = field(default_factory=Environment)

    @classmethod
    def with_variables(cls, variables: Optional[dict[str, int]] = None) -> "Session":
        return cls(environment=Environment(variables))

    def calculate(self, code: str) -> Result:
        return calculate(code, self.environment)
