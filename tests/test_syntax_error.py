import pytest

from mathex.calculator import Calculator
from mathex.extra.exceptions import FormulaSyntaxError


@pytest.mark.parametrize("expression, arguments, message",
                         [
                             ("*1", [], "requires a value to the left"),
                             ("0-1+-1", [], "requires a value to the right"),
                             ("-1", [], "requires a value to the left"),
                             ("1*", [], "requires a value to the right"),
                             ("1+()", [], "requires a value to the right"),
                             ("!", [], "requires a value to the right"),
                             ("1 2", [], "Missed operation"),
                             ("A B", [1, 2], "Missed operation"),
                             ("2(1)", [], "Missed operation"),
                             ("2abs(1)", [], "Missed operation"),
                             ("(1)2", [], "Missed operation"),
                             ("(1)(2)", [], "Missed operation"),
                             ("A!B", [1, 2], "Missed operation"),
                             ("abs", [], "must be followed by '('"),
                             ("abs 5", [], "must be followed by '('"),
                             ("max(,1)", [], "requires a value to the right"),
                             ("max(1,)", [], "Comma requires a value to the right"),
                             ("max(1,,2)", [], "Comma requires a value to the right"),
                         ])
def test_structure(expression, arguments, message):
    with pytest.raises(FormulaSyntaxError, match=message.replace("(", r"\(")):
        Calculator().calc(expression, arguments)


@pytest.mark.parametrize("expression, arguments, message",
                         [
                             ("A", [], "uses more variables than provided"),
                             ("A+B", [1], "uses more variables than provided"),
                             ("1", [1], "uses fewer variables than provided"),
                             ("A", [1, 2], "uses fewer variables than provided"),
                             ("A+C", [1, 2], "skips variable 'B'"),
                             ("B", [1], "skips variable 'A'"),
                             ("AA", [1], "skips variable 'A'"),
                         ])
def test_variables(expression, arguments, message):
    with pytest.raises(FormulaSyntaxError, match=message):
        Calculator().calc(expression, arguments)


def test_first_violation_is_reported():
    with pytest.raises(FormulaSyntaxError) as exc:
        Calculator().calc("1 2 *", [])
    assert exc.value.token.text == "2"
    assert exc.value.position == 2


def test_error_message_names_token():
    with pytest.raises(FormulaSyntaxError) as exc:
        Calculator().calc("1 + * 2", [])
    assert str(exc.value) == "SyntaxError: Operator '+' requires a value to the right (symbol '+' at position 2)"
