import random
import re
import warnings

from intcalc.environment import Environment
from intcalc.session import Success, calculate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> int | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    result = calculate(code, Environment())
    if isinstance(result, Success):
        return result.value
    return result.message


if __name__ == "__main__":
    alphabet = "0123456789()+-* "  # no division: Python floors, the calculator truncates toward zero

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if not isinstance(res_py, (int, str)):
            continue  # "()" is an empty tuple in Python
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, int) and isinstance(res_my, str) and re.search(r"(^|[-+*(])\s*[-+]", code):
            continue  # unary signs are not part of the grammar
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
