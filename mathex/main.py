import argparse
import logging
from sys import stdout

import mathex.constants as cst
from mathex.calculator import evaluate

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mathex", description="Checks whether a formula is true for given values")
    parser.add_argument("expression", help="formula, e.g. 'A > 0 && B < 10'")
    parser.add_argument("values", nargs="*", type=float, help="values of A, B, C, ...")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every stage of evaluation")
    parser.add_argument("--log-file", default=None, help=f"also append logs to a file(e.g. {cst.LOG_FILE})")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for application. Evaluates formula from command line and prints 1 or 0
    :return: exit code, 0 if formula was evaluated
    """
    args = parse_args(argv)

    handlers: list[logging.Handler] = [logging.StreamHandler(stdout)]
    if args.log_file:
        handlers.append(logging.FileHandler(args.log_file, mode="a", encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        handlers=handlers,
        format=cst.FORMAT,
        force=True,
    )

    result, error = evaluate(args.expression, args.values)
    if error:
        logger.error(f"Could not evaluate {args.expression}: {error}")
        return 1
    logger.debug(f"{args.expression} = {result}")
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
