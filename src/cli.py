"""
Command line: печать свободного члена для JSON документа

    constant-term path/to/testcase.json

stdout содержит только результат в десятичной записи; диагностика и
ошибки идут в stderr через logging. Exit codes: 0 — успех, 1 — ошибка
реконструкции, 2 — ошибка использования (argparse).
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.core.errors import ReconstructionError
from src.core.math import format_in_base
from src.reconstruction import ConstantTermSolver, SolverConfig, load_document

logger = logging.getLogger("constant_term")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="constant-term",
        description="Reconstruct the constant term of a polynomial from base-N samples.",
    )
    parser.add_argument("path", help="JSON document with keys {n, k} and samples")
    parser.add_argument(
        "--allow-empty-numeral",
        action="store_true",
        help="treat an empty value as 0 instead of an invalid digit",
    )
    parser.add_argument(
        "--no-contract",
        action="store_true",
        help="skip JSON Schema validation of the input document",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging on stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SolverConfig(
        allow_empty_numeral=args.allow_empty_numeral,
        validate_contract=not args.no_contract,
    )

    try:
        document = load_document(args.path)
        result = ConstantTermSolver(config).solve(document)
    except ReconstructionError as e:
        logger.error("%s", e)
        return EXIT_FAILURE

    logger.debug(
        "Used %d of %d points",
        len(result.points_used),
        result.points_available,
    )
    print(format_in_base(result.constant_term, 10))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
