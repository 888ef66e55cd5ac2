import math
import string
from functools import wraps

import mathex.constants as cst
from mathex.extra.exceptions import ExecutionError, MathexError


def variable_index(letters: str) -> int:
    """
    Converts variable name to its 1-based position among the arguments
    :param letters: uppercase letters, e.g. 'A', 'Z', 'AA'
    :return: index, e.g. 1, 26, 27
    """
    index = 0
    for letter in letters:
        index = index * cst.ALPHABET_SIZE + (ord(letter) - ord("A") + 1)
    return index


def variable_name(index: int) -> str:
    """
    Converts 1-based variable index back to its letters(inverse of variable_index)
    :param index: index of the variable, must be positive
    :return: variable name
    """
    if index < 1:
        raise ValueError(f"Variable index must be positive, got {index}")
    letters = ""
    while index > 0:
        index, rest = divmod(index - 1, cst.ALPHABET_SIZE)
        letters = string.ascii_uppercase[rest] + letters
    return letters


def wrap_integer(value: int) -> int:
    """
    Wraps python integer into signed two's-complement range of cst.INTEGER_BITS
    """
    value %= cst.INTEGER_MODULUS
    if value > cst.INTEGER_MAX:
        value -= cst.INTEGER_MODULUS
    return value


def floor_integer(value: float, op: str) -> int:
    """
    Floors operand of a bitwise operator
    :param value: operand
    :param op: operator sign, used in error message
    :raises ExecutionError: operand is inf or nan
    :return: floored and wrapped integer
    """
    if not math.isfinite(value):
        raise ExecutionError(f"Cannot apply '{op}' to non-finite value {value}")
    return wrap_integer(math.floor(value))


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except MathexError as e:
            self.logger.debug(f"{func.__name__} rejected formula: {e}")
            raise
        except Exception as e:
            self.logger.exception(f"Exception in {func.__name__}: {e}")
            raise

    return wrapper


class CallAllMethods:
    """
    Calls every method of the object(in alphabetical order)
    """
    def call_all_methods(self, instance = None):
        if not instance:
            instance = self
        for method in dir(instance):
            attr = getattr(instance, method)
            if not method.startswith("__") and callable(attr) and method!="call_all_methods" and method.find("__") == -1:
                attr()
