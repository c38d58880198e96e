""" Records explaining every value computed by the Gauss-Seidel sweeps. """

from __future__ import annotations
from dataclasses import dataclass, field

from numpy.typing import NDArray


@dataclass(frozen=True)
class TermContribution:
    """
    One off-diagonal term `coefficient * x[column]` of an update.

    :param coefficient: the raw matrix entry A[row][column]
    :param column: 0-based index of the unknown the term multiplies
    :param value_used: the value x[column] held when the update ran
    :param is_new: True if x[column] was already updated in the same sweep
    """
    coefficient: float
    column: int
    value_used: float
    is_new: bool


    @property
    def product(self) -> float:
        return self.coefficient * self.value_used


@dataclass(frozen=True)
class FormulaTrace:
    """ `x[i] = (rhs - sum(terms)) / diagonal` """
    rhs: float
    diagonal: float
    terms: tuple[TermContribution, ...] = ()


    def evaluate(self) -> float:
        """ Recompute the value from the recorded pieces. The summation order
        matches the solver, so the result is bit-identical. """
        total = 0.0
        for term in self.terms:
            total += term.coefficient * term.value_used
        return (self.rhs - total) / self.diagonal


@dataclass(frozen=True)
class VariableUpdate:
    index: int
    value: float
    formula: FormulaTrace


@dataclass(frozen=True)
class IterationRecord:
    iteration: int
    updates: tuple[VariableUpdate, ...]
    error: float


    @property
    def values(self) -> list[float]:
        return [update.value for update in self.updates]


@dataclass
class GaussSeidelResult:
    solution: NDArray
    converged: bool
    iterations: int
    history: list[IterationRecord] = field(default_factory=list)


    def update(self, iteration: int, variable: int) -> VariableUpdate:
        """
        Look up the update of unknown `variable` in sweep `iteration`.
        Both indices are 1-based, as they are shown to the user.
        """
        if not 1 <= iteration <= len(self.history):
            raise IndexError(
                f"Iteration {iteration} is out of range 1..{len(self.history)}"
            )
        updates = self.history[iteration - 1].updates
        if not 1 <= variable <= len(updates):
            raise IndexError(
                f"Variable x{variable} is out of range x1..x{len(updates)}"
            )
        return updates[variable - 1]
