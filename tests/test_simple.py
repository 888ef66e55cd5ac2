import math

import pytest

from mathex.calculator import Calculator
from mathex.extra.exceptions import ExecutionError


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1+2*3", 7),
        ("(1+2)*3", 9),
        ("10-4-3", 3),
        ("8/4/2", 1),
        ("1.5*2", 3),
        ("2^3^2", 64),
        ("2^10", 1024),
        ("7%3", 1),
        ("7.9%3", 1),
        ("(0-7)%3", 2),
        ("1<<4", 16),
        ("256>>4", 16),
        ("(0-1)>>1", -1),
        ("1<<64", 0),
        ("1<<63", -9223372036854775808),
        ("8>>(0-1)", 16),
        ("~0", -1),
        ("~5", -6),
        ("!0", 1),
        ("!5", 0),
        ("!!5", 1),
        ("6&3", 2),
        ("6|3", 7),
        ("2.7&3", 2),
        ("1&&0", 0),
        ("1&&2", 1),
        ("0||0", 0),
        ("0||3", 1),
        ("1<2", 1),
        ("2<=2", 1),
        ("3>4", 0),
        ("4>=5", 0),
        ("2==2", 1),
        ("2!=2", 0),
        ("1+2<<1", 6),
        ("1|2&3", 3),
        ("1<2==1", 1),
        ("!0+1", 2),
        ("2*!0", 2),
        ("1 && !0", 1),
        ("3 > 2 && 2 > 1 || 0", 1),
    ]
)
def test_simple_ok(expression, expected):
    assert Calculator().calc(expression) == expected


@pytest.mark.parametrize("expression, expected",
    [
        ("1/0", math.inf),
        ("0-1/0", -math.inf),
        ("log(0)", -math.inf),
    ]
)
def test_ieee_infinity(expression, expected):
    assert Calculator().calc(expression) == expected


@pytest.mark.parametrize("expression", ["0/0", "acos(2)", "5%0", "(0-8)^0.5"])
def test_ieee_nan(expression):
    assert math.isnan(Calculator().calc(expression))


@pytest.mark.parametrize("expression", ["(1/0)&1", "~(0/0)", "1<<(1/0)"])
def test_bitwise_on_non_finite(expression):
    with pytest.raises(ExecutionError):
        Calculator().calc(expression)
