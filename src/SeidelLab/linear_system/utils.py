from dataclasses import dataclass
import math

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass
class LinearSystem:
    matrix: NDArray
    rhs: NDArray
    solution: NDArray | None = None


    def __post_init__(self):
        self.matrix = np.asarray(self.matrix, dtype=np.float64)
        self.rhs = np.asarray(self.rhs, dtype=np.float64)
        if self.solution is not None:
            self.solution = np.asarray(self.solution, dtype=np.float64)


    @property
    def size(self) -> int:
        return self.rhs.shape[0]


    def __str__(self) -> str:
        lstr = f"{self.matrix=}\n"
        lstr += f"{self.solution=}\n"
        lstr += f"{self.rhs=}\n"
        return lstr


def validate_system(
    matrix: ArrayLike,
    rhs: ArrayLike,
    tol: float,
    max_iter: int,
) -> None:
    """
    Fail fast on anything the Gauss-Seidel sweep cannot handle.

    Raises:
    - ValueError: empty or non-square matrix, rhs of the wrong length, a zero
      on the diagonal, NaN or infinite entries, a negative or non-finite
      tolerance, or max_iter < 1.
    """
    rows = list(matrix)
    n = len(rows)
    if n == 0:
        raise ValueError("The system is empty.")
    for i, row in enumerate(rows):
        if np.ndim(row) != 1:
            raise ValueError(
                f"The matrix must be square: row {i+1} is not a list of "
                "numbers."
            )
    rows = [list(row) for row in rows]
    for i, row in enumerate(rows):
        if len(row) != n:
            raise ValueError(
                f"The matrix must be square: row {i+1} has {len(row)} "
                f"entries, expected {n}."
            )

    if np.ndim(rhs) != 1:
        raise ValueError("The right-hand side must be a flat list of numbers.")
    rhs = list(rhs)
    if len(rhs) != n:
        raise ValueError(
            f"The right-hand side has {len(rhs)} entries, expected {n}."
        )

    if not (np.all(np.isfinite(np.asarray(rows, dtype=np.float64)))
            and np.all(np.isfinite(np.asarray(rhs, dtype=np.float64)))):
        raise ValueError("The system contains NaN or infinite entries.")

    for i in range(n):
        if rows[i][i] == 0:
            raise ValueError(f"The diagonal contains a zero in row {i+1}.")

    if not math.isfinite(tol) or tol < 0:
        raise ValueError(f"Tolerance must be a finite number >= 0, got {tol}.")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}.")
