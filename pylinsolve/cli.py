"""
Command-Line Interface for PyLinSolve.

Reads an augmented matrix from the console (or a file), solves it and
prints one line per unknown.

Usage:
    python -m pylinsolve [OPTIONS]
    pylinsolve [OPTIONS]

Options:
    --file PATH         Read the matrix from PATH instead of the console
    --tolerance VALUE   Zero tolerance: 'exact' (default), 'roundoff' or a number
    --timing            Print timing information after the solution
    --verbose           Explain why a system is unsolvable

Exit codes:
    0  solved
    1  system is unsolvable
    2  input could not be used
"""

import argparse
import sys
from typing import IO, List, Optional, Tuple

from pylinsolve import __version__
from pylinsolve.core.exceptions import (
    ParseError,
    PyLinSolveError,
    RowsNotOfEqualLengthError,
    SystemUnsolvableError,
)
from pylinsolve.elimination import AugmentedMatrix, Row, solve
from pylinsolve.io import format_solution, load_matrix, parse_row

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2

BANNER = "Equation system solver"
INSTRUCTIONS = (
    "Please insert your matrix using spaces to separate elements and new lines "
    "to separate rows.\n"
    "Use a period for decimals. The last element in the row will be seen as the sum.\n"
    "Finish with an empty line."
)
ROW_RETRY = "Row input was incorrect, please try again."
UNEQUAL_RETRY = "Rows were of unequal length. Please try again."
UNSOLVABLE = "The system is unsolvable."
SOLVED = "The following solution was found"


def _collect_rows(stream: IO[str]) -> Tuple[List[Row], bool]:
    """
    Read rows until a blank line.

    Malformed lines are reported and skipped. Returns the rows and whether
    the stream hit end-of-file.
    """
    rows: List[Row] = []
    while True:
        line = stream.readline()
        if not line:
            return rows, True
        try:
            row = parse_row(line)
        except ParseError:
            print(ROW_RETRY)
            continue
        if row is None:
            return rows, False
        rows.append(row)


def read_matrix_interactively(stream: Optional[IO[str]] = None) -> AugmentedMatrix:
    """
    Prompt-style matrix entry.

    Whole entry restarts when the rows turn out to be of unequal length.

    Raises:
        RowsNotOfEqualLengthError: If the input ends while rows are still unequal
    """
    if stream is None:
        stream = sys.stdin

    while True:
        rows, eof = _collect_rows(stream)
        try:
            return AugmentedMatrix(rows)
        except RowsNotOfEqualLengthError:
            print(UNEQUAL_RETRY)
            if eof:
                raise


def _tolerance_arg(text: str):
    """Numbers become floats; anything else stays a tier name."""
    try:
        return float(text)
    except ValueError:
        return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pylinsolve",
        description="Solve a linear system given as an augmented matrix (Gauss-Jordan elimination).",
    )
    parser.add_argument(
        "--file", "-f",
        help="Read the augmented matrix from a .csv, .tsv, .npy or text file",
    )
    parser.add_argument(
        "--tolerance", "-t",
        type=_tolerance_arg,
        default="exact",
        help="Zero tolerance: 'exact' (default), 'roundoff' or a non-negative number",
    )
    parser.add_argument(
        "--timing",
        action="store_true",
        help="Print timing information",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Explain why a system is unsolvable",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    print(BANNER)

    try:
        if args.file:
            matrix = load_matrix(args.file)
        else:
            print(INSTRUCTIONS)
            matrix = read_matrix_interactively()
    except (PyLinSolveError, OSError) as e:
        print(f"Error: {e}")
        return EXIT_BAD_INPUT

    try:
        solution = solve(matrix, zero_tolerance=args.tolerance)
    except SystemUnsolvableError as e:
        print(UNSOLVABLE)
        if args.verbose:
            print(str(e))
        return EXIT_UNSOLVABLE
    except PyLinSolveError as e:
        print(f"Error: {e}")
        return EXIT_BAD_INPUT

    print(SOLVED)
    if solution.values.size:
        print(format_solution(solution.values))

    if args.timing and solution.timing:
        for name, seconds in solution.timing.items():
            print(f"  {name}: {seconds:.6f}s")

    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
