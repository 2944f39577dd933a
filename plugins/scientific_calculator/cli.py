"""Command line interface for the Scientific Calculator plugin."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from .core import (
    ExpressionError,
    compile_expression,
    describe_token,
    evaluate_expression,
    list_functions,
    substitute_constants,
    tokenize,
)


def _print(payload: dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def command_eval(args: argparse.Namespace) -> None:
    expression = args.expression
    if not args.no_constants:
        expression = substitute_constants(expression)
    _print(evaluate_expression(expression, angle_mode=args.angle_mode, strict=not args.lenient))


def command_tokens(args: argparse.Namespace) -> None:
    strict = not args.lenient
    tokens = tokenize(args.expression, strict=strict)
    postfix = compile_expression(args.expression, strict=strict)
    _print(
        {
            "tokens": [describe_token(token) for token in tokens],
            "postfix": [describe_token(token) for token in postfix],
        }
    )


def command_functions(args: argparse.Namespace) -> None:
    _print({"functions": list_functions()})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scientific Calculator CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser("eval", help="Evaluate an expression")
    eval_parser.add_argument("expression", help="Expression, e.g. '2 + 3 * sin(30)'")
    eval_parser.add_argument(
        "--angle-mode",
        dest="angle_mode",
        default="degree",
        choices=["degree", "radian"],
        help="Unit for trigonometric functions",
    )
    eval_parser.add_argument("--lenient", action="store_true", help="Skip unknown input instead of failing")
    eval_parser.add_argument(
        "--no-constants",
        dest="no_constants",
        action="store_true",
        help="Do not substitute pi and e",
    )
    eval_parser.set_defaults(func=command_eval)

    tokens_parser = subparsers.add_parser("tokens", help="Show tokens and postfix order")
    tokens_parser.add_argument("expression")
    tokens_parser.add_argument("--lenient", action="store_true")
    tokens_parser.set_defaults(func=command_tokens)

    functions_parser = subparsers.add_parser("functions", help="List supported functions")
    functions_parser.set_defaults(func=command_functions)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ExpressionError as exc:
        _print({"error": {"code": exc.code, "message": str(exc)}})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
