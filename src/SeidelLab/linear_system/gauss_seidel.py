""" Gauss-Seidel iteration with a complete record of every update.

Unknowns are updated in place, row by row, so that row `i` already sees the
values computed for rows `j < i` in the same sweep. That is the only
difference from the Jacobi method and the sweep order must never change. """

import logging

import numpy as np
from numpy.typing import ArrayLike

from SeidelLab.linear_system.dominance import is_diagonally_dominant
from SeidelLab.linear_system.trace import (
    FormulaTrace, GaussSeidelResult, IterationRecord, TermContribution,
    VariableUpdate,
)
from SeidelLab.linear_system.utils import LinearSystem, validate_system

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-4
DEFAULT_MAXITER = 100


def sweep(
    matrix: np.ndarray,
    rhs: np.ndarray,
    solution: np.ndarray,
) -> tuple[VariableUpdate, ...]:
    """ One Gauss-Seidel pass. Updates `solution` in place and returns what
    was computed for each row. """
    n = rhs.shape[0]
    updates = []
    for i in range(n):
        total = 0.0
        terms = []
        for j in range(n):
            if j == i:
                continue
            coefficient = float(matrix[i, j])
            value_used = float(solution[j])
            total += coefficient * value_used
            terms.append(TermContribution(
                coefficient=coefficient,
                column=j,
                value_used=value_used,
                is_new=j < i,
            ))

        diagonal = float(matrix[i, i])
        new_value = (float(rhs[i]) - total) / diagonal
        solution[i] = new_value

        formula = FormulaTrace(
            rhs=float(rhs[i]), diagonal=diagonal, terms=tuple(terms),
        )
        updates.append(
            VariableUpdate(index=i, value=new_value, formula=formula)
        )
    return tuple(updates)


def solve(
    matrix: ArrayLike,
    rhs: ArrayLike,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAXITER,
    validate: bool = True,
) -> GaussSeidelResult:
    """
    Solve `matrix @ solution = rhs` starting from the zero vector.

    Args:
    - matrix: square coefficient matrix with a non-zero diagonal.
    - rhs: the independent terms.
    - tol: stop once the largest component change of a sweep is <= tol.
    - max_iter: the maximum number of sweeps.
    - validate: check the inputs first and raise `ValueError` on bad ones.

    Returns:
    - GaussSeidelResult: the last approximation, whether it converged, the
      number of sweeps and one `IterationRecord` per sweep. Running out of
      sweeps is reported with `converged=False`, not raised.
    """
    if validate:
        validate_system(matrix, rhs, tol, max_iter)

    matrix = np.array(matrix, dtype=np.float64)
    rhs = np.array(rhs, dtype=np.float64)
    solution = np.zeros(rhs.shape[0], dtype=np.float64)
    history = []

    for iteration in range(1, max_iter + 1):
        old_solution = solution.copy()
        updates = sweep(matrix, rhs, solution)
        error = float(np.linalg.norm(solution - old_solution, ord=np.inf))
        history.append(IterationRecord(
            iteration=iteration, updates=updates, error=error,
        ))
        logger.debug("sweep %d: error = %.3e", iteration, error)

        if error <= tol:
            logger.info("Gauss-Seidel converged in %d sweeps", iteration)
            return GaussSeidelResult(
                solution=solution,
                converged=True,
                iterations=iteration,
                history=history,
            )

    logger.info(
        "Gauss-Seidel did not converge in %d sweeps (last error %.3e)",
        max_iter, history[-1].error,
    )
    return GaussSeidelResult(
        solution=solution,
        converged=False,
        iterations=max_iter,
        history=history,
    )


def solve_system(
    ls: LinearSystem,
    tol: float = DEFAULT_TOLERANCE,
    max_iter: int = DEFAULT_MAXITER,
    dominant: bool | None = None,
) -> GaussSeidelResult:
    """ Warn if the matrix is not diagonally dominant, then solve.
    `dominant` skips the check when the caller already classified the matrix.

    A converged solution is stored on `ls`. If `ls` already carries a
    solution, the two must agree within `100 * tol`. """
    if dominant is None:
        dominant = is_diagonally_dominant(ls.matrix)
    if not dominant:
        logger.warning(
            "The matrix is not diagonally dominant; "
            "Gauss-Seidel may not converge."
        )

    result = solve(ls.matrix, ls.rhs, tol=tol, max_iter=max_iter)
    if not result.converged:
        return result

    if ls.solution is None:
        ls.solution = result.solution.copy()
    elif not np.allclose(
        ls.solution, result.solution, rtol=0.0, atol=max(100 * tol, 1e-8),
    ):
        raise RuntimeError("Gauss-Seidel solution must match the reference")

    return result


def require_convergence(result: GaussSeidelResult) -> GaussSeidelResult:
    if not result.converged:
        raise RuntimeError("Gauss-Seidel method didn't converge")
    return result
