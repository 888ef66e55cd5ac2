import numpy as np

from mathex.extra.types import Function, Operator, Side
from mathex.extra.utils import floor_integer, wrap_integer
import mathex.constants as cst


def truth(value) -> np.float64:
    return np.float64(1.0 if value else 0.0)


def bitwise(op: str, func):
    """
    Lifts integer function to floored double operands
    :param op: operator sign, used in error messages
    :param func: function of one or two python integers
    """
    def wrapper(*args):
        integers = [floor_integer(float(arg), op) for arg in args]
        return np.float64(wrap_integer(func(*integers)))
    return wrapper


def shift_left(a: int, b: int) -> int:
    if b < 0:
        return shift_right(a, -b)
    if b >= cst.INTEGER_BITS:
        return 0
    return a << b


def shift_right(a: int, b: int) -> int:
    if b < 0:
        return shift_left(a, -b)
    if b >= cst.INTEGER_BITS:
        return -1 if a < 0 else 0
    return a >> b


def modulo(a, b) -> np.float64:
    """
    Floored modulus of floored operands, result takes the sign of the divisor
    """
    return np.mod(np.floor(a), np.floor(b))


OPEN_PARENTHESIS = "("
CLOSE_PARENTHESIS = ")"

SYMBOLS: tuple[Operator, ...] = (
        Operator("(", 0, Side.RIGHT_ONLY),
        Operator(")", 0, Side.LEFT_ONLY),
        Operator("!", 1, Side.RIGHT_ONLY, lambda a: truth(a == 0)),
        Operator("~", 1, Side.RIGHT_ONLY, bitwise("~", lambda a: ~a)),
        Operator("^", 2, Side.BOTH, np.power),
        Operator("*", 3, Side.BOTH, np.multiply),
        Operator("/", 3, Side.BOTH, np.divide),
        Operator("%", 3, Side.BOTH, modulo),
        Operator("+", 4, Side.BOTH, np.add),
        Operator("-", 4, Side.BOTH, np.subtract),
        Operator("<<", 5, Side.BOTH, bitwise("<<", shift_left)),
        Operator(">>", 5, Side.BOTH, bitwise(">>", shift_right)),
        Operator("<", 6, Side.BOTH, lambda a, b: truth(a < b)),
        Operator("<=", 6, Side.BOTH, lambda a, b: truth(a <= b)),
        Operator(">", 6, Side.BOTH, lambda a, b: truth(a > b)),
        Operator(">=", 6, Side.BOTH, lambda a, b: truth(a >= b)),
        Operator("==", 7, Side.BOTH, lambda a, b: truth(a == b)),
        Operator("!=", 7, Side.BOTH, lambda a, b: truth(a != b)),
        Operator("&", 8, Side.BOTH, bitwise("&", lambda a, b: a & b)),
        Operator("|", 9, Side.BOTH, bitwise("|", lambda a, b: a | b)),
        Operator("&&", 10, Side.BOTH, lambda a, b: truth(a != 0 and b != 0)),
        Operator("||", 11, Side.BOTH, lambda a, b: truth(a != 0 or b != 0)),
    )

SYMBOLS_INDEX: dict[str, int] = {op.sign: i for i, op in enumerate(SYMBOLS)}

# longest lexemes first, so that '>=' is matched before '>'
SORTED_SIGNS: tuple[str, ...] = tuple(sorted(SYMBOLS_INDEX.keys(), key=len, reverse=True))

PREFIX_SIGNS = frozenset(op.sign for op in SYMBOLS if op.side is Side.RIGHT_ONLY and op.sign != OPEN_PARENTHESIS)


FUNCTIONS: tuple[Function, ...] = (
        Function("abs", 1, np.abs),
        Function("log", 1, np.log),
        Function("exp", 1, np.exp),
        Function("sin", 1, np.sin),
        Function("cos", 1, np.cos),
        Function("tan", 1, np.tan),
        Function("asin", 1, np.arcsin),
        Function("acos", 1, np.arccos),
        Function("sinh", 1, np.sinh),
        Function("cosh", 1, np.cosh),
        Function("tanh", 1, np.tanh),
        Function("asinh", 1, np.arcsinh),
        Function("acosh", 1, np.arccosh),
        Function("atanh", 1, np.arctanh),
        Function("ceil", 1, np.ceil),
        Function("floor", 1, np.floor),
        Function("deg", 1, np.degrees),
        Function("rad", 1, np.radians),
        Function("max", 2, np.maximum),
        Function("min", 2, np.minimum),
        Function("pow", 2, np.power),
        Function("atan2", 2, np.arctan2),
    )

FUNCTIONS_INDEX: dict[str, int] = {func.name: i for i, func in enumerate(FUNCTIONS)}
