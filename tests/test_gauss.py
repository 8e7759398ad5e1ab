import io

import pytest

from algokit.gauss import (
    GaussError,
    InfiniteSolutionsError,
    NoSolutionError,
    main,
    solve_linear_system,
)


def _residuals(system, solution):
    return [
        sum(a * x for a, x in zip(row[:-1], solution)) - row[-1]
        for row in system
    ]


def test_two_by_two():
    system = [[2, 1, 5], [1, -1, 1]]
    result = solve_linear_system(system)
    assert result == pytest.approx([2.0, 1.0])


def test_three_by_three_satisfies_equations():
    system = [[3, 2, -1, 1], [2, -2, 4, -2], [-1, 0.5, -1, 0]]
    result = solve_linear_system(system)
    assert len(result) == 3
    assert _residuals(system, result) == pytest.approx([0, 0, 0], abs=1e-9)


def test_needs_row_swap():
    system = [[0, 1, 3], [1, 0, 4]]
    result = solve_linear_system(system)
    assert result == pytest.approx([4.0, 3.0])


def test_input_is_not_modified():
    system = [[2, 1, 5], [1, -1, 1]]
    snapshot = [row[:] for row in system]
    solve_linear_system(system)
    assert system == snapshot


def test_empty_system():
    assert solve_linear_system([]) == []


def test_no_solution():
    with pytest.raises(NoSolutionError):
        solve_linear_system([[1, 1, 2], [1, 1, 3]])


def test_infinite_solutions():
    with pytest.raises(InfiniteSolutionsError):
        solve_linear_system([[1, 1, 2], [2, 2, 4]])


def test_errors_share_base():
    with pytest.raises(GaussError):
        solve_linear_system([[0, 0, 1], [0, 0, 0]])


def test_bad_shape():
    with pytest.raises(ValueError):
        solve_linear_system([[1, 2], [3, 4]])


def test_main_prints_solution(tmp_path, capsys):
    path = tmp_path / "system.txt"
    path.write_text("2\n2 1 5\n1 -1 1\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "2.00\n1.00\n"


def test_main_reports_infinite(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1 2\n2 2 4\n"))
    main([])
    assert capsys.readouterr().out == "infinite"


def test_main_reports_no_solution(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1 2\n1 1 3\n"))
    main([])
    assert capsys.readouterr().out == "no solution"