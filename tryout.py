from intcalc.environment import Environment
from intcalc.errors import RuntimeFault
from intcalc.parser import ParseError, parse
from intcalc.runtime import evaluate
from intcalc.tokenizer import LexError, tokenize

environment = Environment()

for code in [
    "5",
    "1 + 1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "10 - 3 - 2",
    "7/2",
    "(0-7)/2",
    "1/0",
    "5^2",
    "a = 1; b= 2; c = a + b",
    "c * 10",
    "var = (1 + 14 * (54 - 2))",
    "(x = 3; x * x) + x",
    "a = b = 10",
    "(1 + 2",
    "undefined + 1",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except LexError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(tokens)
    except ParseError as e:
        print(e)
        continue
    print(f"ast: {expression}")

    try:
        result = evaluate(expression, environment)
    except RuntimeFault as e:
        print(e)
        continue
    print(f"result: {result}")
    print(f"variables: {environment.as_dict()}")
