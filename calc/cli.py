"""Command line interface for the calculator."""

from __future__ import annotations

import argparse

from pydantic import ValidationError

from .core.config import get_settings
from .core.logging import setup_logging
from .repl import Session


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate arithmetic expressions over '+', '*' and parentheses.",
    )
    parser.add_argument(
        "-e",
        "--expression",
        dest="expressions",
        action="append",
        metavar="TEXT",
        help="Evaluate TEXT and exit instead of reading from stdin (repeatable).",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print a prompt before reading each line.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        help="Significant digits for printed numbers (default: shortest exact form).",
    )
    parser.add_argument(
        "--allow-trailing",
        action="store_true",
        default=None,
        help="Ignore tokens left over after a complete expression.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    overrides = {
        "PRECISION": args.precision,
        "ALLOW_TRAILING": args.allow_trailing,
        "LOG_LEVEL": args.log_level,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    settings = get_settings()
    if overrides:
        try:
            settings = settings.model_validate({**settings.model_dump(), **overrides})
        except ValidationError as exc:
            parser.error(str(exc))

    setup_logging(settings)

    if args.expressions:
        session = Session(settings, prompt=False)
        results = [session.execute(text, line_no) for line_no, text in enumerate(args.expressions, 1)]
        return 0 if all(results) else 1

    session = Session(settings, prompt=not args.no_prompt)
    session.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
