import argparse
import logging
from typing import Callable, Optional

from intcalc.session import Failure, Session

QUIT_COMMAND = "end"

MANUAL = "\n".join(
    [
        "Quick manual:",
        "  Addition or subtraction: use '+' or '-', e.g. '1 + 2'",
        "  Multiplication or division: use '*' or '/', e.g. '1 + 2 / 1' (division truncates toward zero)",
        "  Parentheses: '(' starts a subexpression and ')' ends it, e.g. '(1 + 3) / 2'",
        "  Variables: assign with '=' and separate expressions with ';', e.g. 'x = 4; (x + 5) * 2'",
        "  Variables are kept for the rest of the session",
        f"  Type {QUIT_COMMAND!r} to quit",
    ]
)


def run(
    session: Session,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    read = read or input
    write = write or print
    while True:
        try:
            code = read("> ")
        except (EOFError, KeyboardInterrupt):
            write("")
            break

        if code.strip() == QUIT_COMMAND:
            break
        if not code.strip():
            continue

        result = session.calculate(code)
        if isinstance(result, Failure):
            write(result.message)
        else:
            write(f"Result: {result.value}")


def main(argv: Optional[list[str]] = None) -> None:
    argparser = argparse.ArgumentParser(description="Integer calculator with variables")
    argparser.add_argument("-v", "--verbose", action="store_true", help="log tokens and syntax trees")
    argparser.add_argument("--no-help", action="store_true", help="do not print the manual on start")
    args = argparser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.no_help:
        print(MANUAL)
    run(Session())


if __name__ == "__main__":
    main()
