import logging
import numbers
from collections.abc import Sequence

import numpy as np

import mathex.constants as cst
from mathex.checks import check_arity
from mathex.extra.exceptions import ExecutionError, InputError, MathexError
from mathex.extra.types import Side, Token, TokenKind
from mathex.extra.utils import log_exception
from mathex.rpn import ConverterRPN
from mathex.tokenizer import Tokenizer
from mathex.validator import ValidTokens
from mathex.vars import FUNCTIONS, SYMBOLS


def parse_arguments(arguments: tuple) -> list[float]:
    """
    Normalizes caller arguments: either one sequence of numbers or several numbers
    :param arguments: positional arguments passed after the expression
    :raises InputError: some value is not a real number
    :return: list of floats
    """
    first = arguments[0] if len(arguments) == 1 else None
    if (isinstance(first, (Sequence, np.ndarray)) and not isinstance(first, (str, bytes))
            and getattr(first, "ndim", 1) > 0):
        values = list(first)
    else:
        values = list(arguments)

    for i, value in enumerate(values, start=1):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise InputError(f"Argument {i} is not a number: {value!r}")
    try:
        return [float(value) for value in values]
    except OverflowError as e:
        raise InputError(f"Argument does not fit into a double: {e}")


class Calculator:

    """
    Class running the whole pipeline: tokenize, validate syntax, convert to postfix, check arity and execute
    :param logger: logger shared by every stage
    """
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)
        self.tokens: list[Token] = []
        self.rpn: list[Token] = []

    @log_exception
    def calc(self, expression: str, *arguments) -> float:
        """
        Calculates value of the formula
        :param expression: formula
        :param arguments: one sequence of numbers or several numbers, bound to A, B, C, ...
        :raises MathexError: any stage failed
        :return: value of the formula
        """
        if not isinstance(expression, str):
            raise InputError(f"Formula must be a string, got {type(expression).__name__}")
        values = parse_arguments(arguments)
        self.logger.debug(f"expression: {expression}, arguments: {values}")

        self.tokens = Tokenizer(logger=self.logger).tokenize(expression)
        ValidTokens(self.tokens, len(values), logger=self.logger)
        self.rpn = ConverterRPN(logger=self.logger).rpn(self.tokens)
        check_arity(self.rpn)
        return self.calc_rpn(values)

    @log_exception
    def calc_rpn(self, arguments: list[float]) -> float:
        """
        Executes postfix program on a stack of doubles
        :param arguments: values of variables
        :raises ExecutionError: stack does not end with exactly one value
        :return: value left on the stack
        """
        output: list[np.float64] = []

        def pop(t: Token) -> np.float64:
            try:
                return output.pop()
            except IndexError:
                raise ExecutionError("Operand stack is empty", token=t)

        with np.errstate(all="ignore"):
            for t in self.rpn:
                if t.kind is TokenKind.NUMBER:
                    output.append(np.float64(t.value))

                elif t.kind is TokenKind.VARIABLE:
                    output.append(np.float64(arguments[t.value - 1]))

                elif t.kind is TokenKind.FUNCTION:
                    func = FUNCTIONS[t.value]
                    args = [pop(t) for _ in range(func.args)][::-1]
                    output.append(np.float64(func.callable_function(*args)))

                elif t.kind is TokenKind.SYMBOL and SYMBOLS[t.value].callable_function is not None:
                    op = SYMBOLS[t.value]
                    if op.side is Side.BOTH:
                        b = pop(t)
                        a = pop(t)
                        output.append(np.float64(op.callable_function(a, b)))
                    else:
                        output.append(np.float64(op.callable_function(pop(t))))

                else:
                    raise ExecutionError("Token cannot be executed", token=t)

        if len(output) != 1:
            raise ExecutionError(f"Operand stack holds {len(output)} values after execution, expected 1")
        return float(output[0])


def evaluate(expression: str, *arguments) -> tuple[int, str | None]:
    """
    Decides whether formula is true for the given variable values
    :param expression: formula, e.g. 'A > 0 && B <= max(A, 10)'
    :param arguments: one sequence of numbers or several numbers, bound to A, B, C, ...
    :return: (1, None) if formula is non-zero, (0, None) if zero, (-1, message) on any error
    """
    try:
        result = Calculator().calc(expression, *arguments)
    except MathexError as e:
        return cst.ERROR, str(e)
    if result != 0:
        return cst.TRUE, None
    return cst.FALSE, None
