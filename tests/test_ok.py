import numpy as np
import pytest

from mathex import evaluate


def suppress_error(expr: str, error: str, *arguments):
    result, message = evaluate(expr, *arguments)
    assert result == -1
    assert message.startswith(error)
    return message


@pytest.mark.parametrize("expression, arguments, expected",
                         [
                             ("A", [0.0], 0),
                             ("A", [1.0], 1),
                             ("max(1,2) > 1", [], 1),
                             ("A%2!=0", [4.0], 0),
                             ("A%2!=0", [5.0], 1),
                             ("abs(A)", [-5.0], 1),
                             ("A > 0 && B <= max(A, 10)", [3.0, 7.0], 1),
                             ("A > 0 && B <= max(A, 10)", [3.0, 11.0], 0),
                             ("A - A", [2.5], 0),
                             ("0/0", [], 1),
                         ])
def test_scenarios(expression, arguments, expected):
    assert evaluate(expression, arguments) == (expected, None)


def test_variadic_arguments():
    assert evaluate("A+B==3", 1.0, 2.0) == (1, None)
    assert evaluate("A+B==3", 1, 3) == (0, None)


@pytest.mark.parametrize("arguments", [[2.0, 3.0], (2.0, 3.0), np.array([2.0, 3.0])])
def test_sequence_arguments(arguments):
    assert evaluate("B-A == 1", arguments) == (1, None)


def test_uses_more_variables():
    message = suppress_error("A", "SyntaxError", [])
    assert "uses more variables than provided" in message


def test_unmatched_open_parenthesis():
    message = suppress_error("(A", "StackError", [1.0])
    assert "No matching ')'" in message
    assert "position 0" in message


def test_idempotence():
    for expression, arguments in [("A*2 >= B", [1.0, 2.0]), ("A +", [1.0]), ("C", [1.0])]:
        first = evaluate(expression, arguments)
        for _ in range(3):
            assert evaluate(expression, arguments) == first


def test_gap_free_formulas_are_accepted():
    letters = [chr(ord("A") + i) for i in range(26)] + ["AA", "AB", "AC"]
    for n in range(len(letters) + 1):
        expression = "+".join(letters[:n]) or "1"
        result, message = evaluate(expression, [float(i) for i in range(n)])
        assert message is None
        assert result in (0, 1)
