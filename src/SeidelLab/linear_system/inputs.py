""" Turning user-entered values into a `LinearSystem`.

Entries may be numbers or numeric strings. Cells are named 1-based in error
messages, `A[row,col]` and `b[row]`, the way they are shown to the user. """

import json
import math
from pathlib import Path
from typing import Any, Sequence

from SeidelLab.linear_system.utils import LinearSystem


def parse_entry(raw: Any, label: str) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid value in {label}: {raw!r}")
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value in {label}: {raw!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"Invalid value in {label}: {raw!r}")
    return value


def parse_system(
    matrix: Sequence[Sequence[Any]],
    rhs: Sequence[Any],
) -> LinearSystem:
    """
    Parse raw entries and check the shape and the diagonal.

    Raises:
    - ValueError: on the first bad entry, a non-square matrix, an rhs of the
      wrong length or a zero on the diagonal.
    """
    n = len(matrix)
    if n == 0:
        raise ValueError("The system is empty.")
    if len(rhs) != n:
        raise ValueError(
            f"The right-hand side has {len(rhs)} entries, expected {n}."
        )

    parsed_matrix = []
    parsed_rhs = []
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise ValueError(
                f"The matrix must be square: row {i+1} has {len(row)} "
                f"entries, expected {n}."
            )
        parsed_matrix.append([
            parse_entry(raw, f"A[{i+1},{j+1}]") for j, raw in enumerate(row)
        ])
        parsed_rhs.append(parse_entry(rhs[i], f"b[{i+1}]"))

    for i in range(n):
        if parsed_matrix[i][i] == 0:
            raise ValueError(f"The diagonal contains a zero in row {i+1}.")

    return LinearSystem(matrix=parsed_matrix, rhs=parsed_rhs)


def load_system(path: str | Path) -> LinearSystem:
    """ Read `{"matrix": [[...], ...], "rhs": [...]}` from a JSON file. """
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as err:
            raise ValueError(f"{path} is not valid JSON: {err}") from err

    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object")
    missing = [key for key in ("matrix", "rhs") if key not in data]
    if missing:
        raise ValueError(f"{path} is missing {', '.join(missing)}")
    matrix = data["matrix"]
    if not isinstance(matrix, list) or not all(
        isinstance(row, list) for row in matrix
    ):
        raise ValueError(f"{path}: 'matrix' must be a list of rows")
    if not isinstance(data["rhs"], list):
        raise ValueError(f"{path}: 'rhs' must be a list")

    return parse_system(matrix, data["rhs"])
