import numpy as np
from SeidelLab.linear_system.utils import LinearSystem


def build_textbook() -> LinearSystem:
    # Not diagonally dominant (every row ties), yet Gauss-Seidel converges:
    # the iteration matrix has spectral radius 1/3.
    matrix = np.array([
        [2, 1, 1],
        [1, 3, -2],
        [1, -2, -3],
    ])
    rhs = np.array([6, 13, -1])
    solution = np.array([2, 3, -1])
    return LinearSystem(matrix=matrix, rhs=rhs, solution=solution)


def build_diagonal_dominant() -> LinearSystem:
    matrix = np.array([
        [10, -1, 2, 0],
        [-1, 11, -1, 3],
        [2, -1, 10, -1],
        [0, 3, -1, 8],
    ])
    rhs = np.array([6, 25, -11, 15])
    solution = np.array([1, 2, -1, 1])
    return LinearSystem(matrix=matrix, rhs=rhs, solution=solution)


def build_random_diagonal_dominant(
    n: int,
    seed: int = 20250508,
) -> LinearSystem:
    """
    Generates a strictly diagonally dominant problem `matrix @ solution = rhs`.

    Args:
    - n (int): Size of the square matrix A.
    - seed (int): Optional random seed.

    Returns:
    - ls (LinearSystem): a dataclass with `matrix`, `rhs`, and `solution`
    """
    rng = np.random.default_rng(seed=seed)

    matrix = rng.uniform(low=-1.0, high=1.0, size=(n, n))
    off_diagonal = np.abs(matrix).sum(axis=1) - np.abs(matrix.diagonal())
    signs = np.where(rng.random(size=n) < 0.5, -1.0, 1.0)
    np.fill_diagonal(matrix, signs * (off_diagonal + rng.uniform(1.0, 2.0, n)))
    solution = rng.random(size=(n))
    rhs = np.dot(matrix, solution)

    return LinearSystem(matrix=matrix, solution=solution, rhs=rhs)
