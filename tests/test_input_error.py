import pytest

from mathex import evaluate
from mathex.calculator import Calculator, parse_arguments
from mathex.extra.exceptions import InputError
from tests.test_ok import suppress_error


@pytest.mark.parametrize("arguments",
                         [
                             (["x"],),
                             ("x",),
                             (True,),
                             ([1.0, None],),
                             ([1.0], 2.0),
                             ([[1.0]],),
                         ])
def test_invalid_arguments(arguments):
    with pytest.raises(InputError):
        parse_arguments(arguments)


def test_invalid_arguments_reported_by_evaluate():
    message = suppress_error("A", "InputError", ["1"])
    assert "Argument 1" in message


def test_formula_must_be_string():
    with pytest.raises(InputError):
        Calculator().calc(None)
    assert evaluate(42)[0] == -1


@pytest.mark.parametrize("arguments, expected",
                         [
                             ((), []),
                             (([],), []),
                             ((1, 2.5), [1.0, 2.5]),
                             (([1, 2.5],), [1.0, 2.5]),
                             (((3,),), [3.0]),
                         ])
def test_valid_arguments(arguments, expected):
    assert parse_arguments(arguments) == expected


def test_too_large_integer():
    with pytest.raises(InputError):
        parse_arguments((10 ** 400,))
