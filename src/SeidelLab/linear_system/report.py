""" Plain-text rendering of a Gauss-Seidel run.

Stored coefficients are the raw matrix entries. Only here, when a term is
written as part of `rhs - sum`, is its sign flipped for display. """

from SeidelLab.linear_system.trace import GaussSeidelResult, TermContribution
from SeidelLab.linear_system.utils import LinearSystem


def _num(value: float) -> str:
    return f'{value:g}'


def base_formulas(ls: LinearSystem) -> str:
    """ The update rule of every unknown, e.g.
    `x1 = ( 6 - (1)x2 - (1)x3 ) / 2` """
    lines = []
    for i in range(ls.size):
        line = f'x{i+1} = ( {_num(ls.rhs[i])}'
        for j in range(ls.size):
            if i != j:
                line += f' - ({_num(ls.matrix[i, j])})x{j+1}'
        line += f' ) / {_num(ls.matrix[i, i])}'
        lines.append(line)
    return '\n'.join(lines)


def dominance_banner(dominant: bool) -> str:
    if dominant:
        return 'The matrix is diagonally dominant. Convergence is guaranteed.'
    return ('Warning: the matrix is not diagonally dominant. '
            'It may not converge.')


def status_line(dominant: bool, result: GaussSeidelResult) -> str:
    if not result.converged:
        return ('Convergence was not reached within '
                f'{result.iterations} iterations.')
    return (f'{dominance_banner(dominant)} '
            f'Converged in {result.iterations} iterations!')


def iteration_table(result: GaussSeidelResult) -> str:
    if not result.history:
        return ''
    n = len(result.history[0].updates)
    width = 12
    header = f"{'Iter':>5} | "
    header += ' | '.join(f'{f"x{i+1}":>{width}}' for i in range(n))
    header += f" | {'Error':>{width}}"
    lines = [header, '-' * len(header)]
    for record in result.history:
        row = f'{record.iteration:>5} | '
        row += ' | '.join(f'{value:>{width}.6f}' for value in record.values)
        row += f' | {record.error:>{width}.8f}'
        lines.append(row)
    return '\n'.join(lines)


def display_sign(term: TermContribution) -> str:
    # inverted, the term is subtracted from rhs
    return '-' if term.coefficient >= 0 else '+'


def explain(result: GaussSeidelResult, iteration: int, variable: int) -> str:
    """ Show how x`variable` was computed in sweep `iteration` (1-based).
    Raises IndexError when either index is out of range. """
    update = result.update(iteration, variable)
    formula = update.formula

    lines = [
        f'x{variable}, iteration {iteration}',
        f'    {_num(formula.rhs)}    (independent term b{variable})',
    ]
    for term in formula.terms:
        tag = 'NEW' if term.is_new else 'OLD'
        lines.append(
            f'  {display_sign(term)} ({_num(abs(term.coefficient))} x '
            f'{term.value_used:.6f})    <- x{term.column+1} [{tag}]'
        )
    lines.append(
        f'  / {_num(formula.diagonal)}    '
        f'(diagonal a{variable}{variable})'
    )
    lines.append(f'  = {update.value:.6f}')
    return '\n'.join(lines)


def solution_text(result: GaussSeidelResult) -> str:
    return '\n'.join(
        f'x{i+1} = {value:.6f}' for i, value in enumerate(result.solution)
    )


def pretty_print(dominant: bool, result: GaussSeidelResult):
    header = '==> Gauss-Seidel <=='
    table = iteration_table(result)
    width = max(len(header), len(table.partition('\n')[0]))
    print()
    print(header.center(width))
    print()
    print(status_line(dominant, result))
    print()
    print(table)
    if result.converged:
        print()
        print(solution_text(result))
    print()
