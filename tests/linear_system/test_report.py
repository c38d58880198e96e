import numpy as np
import pytest

from SeidelLab.linear_system.examples import build_textbook
from SeidelLab.linear_system.gauss_seidel import solve
from SeidelLab.linear_system.report import (
    base_formulas, dominance_banner, explain, iteration_table, pretty_print,
    solution_text, status_line,
)


def textbook_run(max_iter=100):
    problem = build_textbook()
    return problem, solve(problem.matrix, problem.rhs, max_iter=max_iter)


def test_base_formulas():
    problem, _ = textbook_run()
    assert base_formulas(problem).splitlines() == [
        "x1 = ( 6 - (1)x2 - (1)x3 ) / 2",
        "x2 = ( 13 - (1)x1 - (-2)x3 ) / 3",
        "x3 = ( -1 - (1)x1 - (-2)x2 ) / -3",
    ]


def test_explain_flips_sign_for_display_only():
    _, result = textbook_run()
    text = explain(result, 1, 2)

    assert text.splitlines() == [
        "x2, iteration 1",
        "    13    (independent term b2)",
        "  - (1 x 3.000000)    <- x1 [NEW]",
        "  + (2 x 0.000000)    <- x3 [OLD]",
        "  / 3    (diagonal a22)",
        "  = 3.333333",
    ]
    stored = [term.coefficient for term in result.update(1, 2).formula.terms]
    assert stored == [1.0, -2.0]


def test_explain_out_of_range():
    _, result = textbook_run(max_iter=3)
    with pytest.raises(IndexError):
        explain(result, 4, 1)
    with pytest.raises(IndexError):
        explain(result, 1, 4)
    with pytest.raises(IndexError):
        explain(result, 0, 1)


def test_iteration_table():
    _, result = textbook_run()
    lines = iteration_table(result).splitlines()

    assert len(lines) == result.iterations + 2
    assert lines[0].split() == ["Iter", "|", "x1", "|", "x2", "|", "x3",
                                "|", "Error"]
    first = lines[2].split(" | ")
    assert first[0].strip() == "1"
    assert first[1].strip() == "3.000000"
    assert first[2].strip() == "3.333333"


def test_status_and_solution():
    _, result = textbook_run()
    assert status_line(False, result).startswith("Warning:")
    assert status_line(False, result).endswith(
        f"Converged in {result.iterations} iterations!"
    )
    assert dominance_banner(True).startswith("The matrix is diagonally")
    values = [float(line.split(" = ")[1])
              for line in solution_text(result).splitlines()]
    assert np.allclose(values, [2, 3, -1], atol=1e-3)

    _, exhausted = textbook_run(max_iter=2)
    assert status_line(True, exhausted) == (
        "Convergence was not reached within 2 iterations."
    )


def test_pretty_print(capsys):
    _, result = textbook_run()
    pretty_print(False, result)
    out = capsys.readouterr().out
    assert "==> Gauss-Seidel <==" in out
    assert "x1 = " in out
