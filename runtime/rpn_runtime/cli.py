"""
Command-line front end for the RPN runtime.

    rpn-eval "2 3 +"
    rpn-eval -f program.rpn

Prints the final stack top to bottom as "index<TAB>type<TAB>value", or the error
message when evaluation fails. Exit status is 0 on success, 1 otherwise.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .cells import format_cell, type_name
from .errors import RPNError
from .evaluator import EvalResult, evaluate
from .machine import DEFAULT_CAPACITY, MachineConfig


def format_result(result: EvalResult) -> List[str]:
    """Output lines for a finished evaluation"""
    if not result.ok:
        return [result.message]
    lines = []
    for index in range(len(result.stack), 0, -1):
        cell = result.stack[index - 1]
        lines.append(f"{index}\t{type_name(cell)}\t{format_cell(cell)}")
    return lines


def read_source(path: str) -> str:
    # Programs are single-line; line breaks in files act as spaces
    with open(path, 'r', encoding='utf-8') as f:
        return f.read().replace('\r', ' ').replace('\n', ' ')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpn-eval",
        description="Evaluate a postfix (RPN) expression on a stack machine.",
    )
    parser.add_argument("expression", nargs="?", help="Postfix source, e.g. '2 3 +'.")
    parser.add_argument("-f", "--file", help="Read the source from a file instead.")
    parser.add_argument("--initial-capacity", type=int, default=DEFAULT_CAPACITY,
                        help="Initial stack capacity in cells.")
    parser.add_argument("--max-capacity", type=int, default=None,
                        help="Largest capacity the stack may grow to.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    if args.file:
        try:
            source = read_source(args.file)
        except OSError as e:
            print(f"Error: cannot read '{args.file}': {e}", file=sys.stderr)
            return 1
    elif args.expression is not None:
        source = args.expression
    else:
        return 0

    try:
        config = MachineConfig(initial_capacity=args.initial_capacity,
                               max_capacity=args.max_capacity)
        result = evaluate(source, config)
    except RPNError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    for line in format_result(result):
        print(line)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
