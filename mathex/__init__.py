"""
mathex - tiny expression language deciding whether a formula is true for given variable values
"""
from mathex.calculator import Calculator, evaluate
from mathex.extra.exceptions import (
    ArgumentCountError,
    ExecutionError,
    FormulaSyntaxError,
    InputError,
    MathexError,
    StackError,
    TokenizationError,
)

__all__ = [
    "Calculator", "evaluate",
    "MathexError", "InputError", "TokenizationError", "FormulaSyntaxError",
    "StackError", "ArgumentCountError", "ExecutionError",
]
