import numpy as np
from numpy.typing import ArrayLike


def is_diagonally_dominant(matrix: ArrayLike) -> bool:
    """ Strict row diagonal dominance: |a_ii| > sum_{j != i} |a_ij| for every
    row. Sufficient, not necessary, for Gauss-Seidel to converge. """
    magnitudes = np.abs(np.asarray(matrix, dtype=np.float64))
    on_diagonal = np.eye(magnitudes.shape[0], dtype=bool)
    diagonal = magnitudes.diagonal()
    off_diagonal = np.where(on_diagonal, 0.0, magnitudes).sum(axis=1)
    return bool(np.all(diagonal > off_diagonal))
