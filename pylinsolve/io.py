"""
Text and file adapter for augmented matrices.

Turns lines of text (or files) into rows, and solution vectors back into
text. Nothing here knows how systems are solved.

Text format, one equation per line:

    1 2 0 5
    0 0 1 3
    2 1 0 4

Numbers are separated by whitespace, a period is the decimal separator, and
the last number of each line is the sum (right-hand side). A blank line
ends interactive input.

Usage:
    from pylinsolve.io import read_rows, load_matrix, format_solution

    rows = read_rows(sys.stdin)
    matrix = load_matrix("system.csv")
    print(format_solution(solve(matrix).values))
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence
import numpy as np
import pandas as pd

from pylinsolve.core.exceptions import ParseError
from pylinsolve.elimination.design import AugmentedMatrix, Row


def parse_row(line: str) -> Row | None:
    """
    Parse one line into a Row.

    Args:
        line: Whitespace-separated numbers; the last one is the sum

    Returns:
        The Row, or None for a blank line

    Raises:
        ParseError: If a token is not a number
    """
    text = line.strip()
    if not text:
        return None

    values: list[float] = []
    for token in text.split():
        try:
            values.append(float(token))
        except ValueError as e:
            raise ParseError(
                f"Cannot parse {token!r} as a number in line {text!r}",
                line=text,
                token=token,
            ) from e

    return Row(tuple(values[:-1]), values[-1])


def read_rows(lines: Iterable[str]) -> list[Row]:
    """
    Parse lines until the first blank one (or the end of input).

    Raises:
        ParseError: On the first malformed line
    """
    rows: list[Row] = []
    for line in lines:
        row = parse_row(line)
        if row is None:
            break
        rows.append(row)
    return rows


def load_matrix(path: str | Path) -> AugmentedMatrix:
    """
    Load an augmented matrix from a file.

    Supported formats:
        .csv / .tsv   numeric table without header, read with pandas
        .npy          2D array saved with numpy.save
        anything else whitespace-separated text, blank lines skipped

    In every format the last column holds the sums.

    Raises:
        ParseError: If the file content is not numeric or has missing cells
        RowsNotOfEqualLengthError: If text rows disagree on their length
        OSError: If the file cannot be read
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in ('.csv', '.tsv'):
        return _load_table(path, sep='\t' if suffix == '.tsv' else ',')
    elif suffix == '.npy':
        return AugmentedMatrix.from_augmented(np.load(path))
    else:
        with path.open() as f:
            rows = [row for row in map(parse_row, f) if row is not None]
        return AugmentedMatrix(rows)


def _load_table(path: Path, sep: str) -> AugmentedMatrix:
    """Read a headerless numeric table; every row must be complete."""
    try:
        df = pd.read_csv(path, header=None, sep=sep, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return AugmentedMatrix()
    except pd.errors.ParserError as e:
        raise ParseError(f"{path}: {e}") from e

    incomplete = df.index[df.isna().any(axis=1)].tolist()
    if incomplete:
        raise ParseError(f"{path}: missing values in rows {incomplete}")

    try:
        values = df.to_numpy(dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ParseError(f"{path}: non-numeric content: {e}") from e

    return AugmentedMatrix.from_augmented(values)


def format_solution(values: Sequence[float]) -> str:
    """One 'X{i} = value' line per unknown."""
    return "\n".join(f"X{i} = {float(x)}" for i, x in enumerate(values))
