""" seidellab: solve a linear system with Gauss-Seidel and show every step.

    seidellab system.json
    seidellab --example --explain 3 2
"""

import argparse
import logging
import sys

from SeidelLab.linear_system.dominance import is_diagonally_dominant
from SeidelLab.linear_system.examples import build_textbook
from SeidelLab.linear_system.gauss_seidel import (
    DEFAULT_MAXITER, DEFAULT_TOLERANCE, solve_system,
)
from SeidelLab.linear_system.inputs import load_system
from SeidelLab.linear_system.report import (
    base_formulas, explain, pretty_print,
)

EXIT_CONVERGED = 0
EXIT_NOT_CONVERGED = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seidellab",
        description="Solve A x = b with the Gauss-Seidel method.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "system", nargs="?",
        help='JSON file with {"matrix": [[...]], "rhs": [...]}',
    )
    source.add_argument(
        "--example", action="store_true",
        help="use the built-in 3x3 example system",
    )
    parser.add_argument(
        "--tol", type=float, default=DEFAULT_TOLERANCE,
        help=f"convergence tolerance (default {DEFAULT_TOLERANCE})",
    )
    parser.add_argument(
        "--max-iter", type=int, default=DEFAULT_MAXITER,
        help=f"maximum number of sweeps (default {DEFAULT_MAXITER})",
    )
    parser.add_argument(
        "--formulas", action="store_true",
        help="print the update formula of each unknown",
    )
    parser.add_argument(
        "--explain", nargs=2, type=int, metavar=("ITER", "VAR"),
        help="explain how x_VAR was computed in iteration ITER (1-based)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.example:
            problem = build_textbook()
        else:
            problem = load_system(args.system)
        dominant = is_diagonally_dominant(problem.matrix)
        result = solve_system(
            problem, tol=args.tol, max_iter=args.max_iter, dominant=dominant,
        )
    except (OSError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    explanation = None
    if args.explain:
        try:
            explanation = explain(result, *args.explain)
        except IndexError as err:
            print(f"error: {err}", file=sys.stderr)
            return EXIT_INVALID_INPUT

    if args.formulas:
        print(base_formulas(problem))
    pretty_print(dominant, result)
    if explanation is not None:
        print(explanation)

    return EXIT_CONVERGED if result.converged else EXIT_NOT_CONVERGED


if __name__ == "__main__":
    sys.exit(main())
