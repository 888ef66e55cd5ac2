import logging

from mathex.extra.exceptions import ArgumentCountError
from mathex.extra.types import Side, Token, TokenKind
from mathex.vars import FUNCTIONS, SYMBOLS

logger = logging.getLogger(__name__)


def required_operands(token: Token) -> int:
    """
    Amount of operands token consumes from the stack(it always produces one)
    """
    if token.kind is TokenKind.FUNCTION:
        return FUNCTIONS[token.value].args
    return SYMBOLS[token.value].arity


def check_arity(rpn: list[Token]) -> None:
    """
    Simulates postfix program with a depth counter instead of operand stack
    :param rpn: postfix program
    :raises ArgumentCountError: operator or function lacks operands, or program does not reduce to one value
    :return: None if OK
    """
    depth = 0
    for t in rpn:
        if t.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
            depth += 1
            continue

        needed = required_operands(t)
        if depth < needed:
            if t.kind is TokenKind.FUNCTION:
                raise ArgumentCountError(f"Function '{t.text}' requires {needed} argument(s) but {depth} available",
                                         token=t)
            if SYMBOLS[t.value].side is Side.BOTH:
                raise ArgumentCountError(f"Operator '{t.text}' has no required first and second operand values",
                                         token=t)
            raise ArgumentCountError(f"Operator '{t.text}' has no required right operand", token=t)
        depth -= needed - 1

    if depth != 1:
        logger.debug(f"postfix program leaves {depth} values")
        raise ArgumentCountError(f"Formula must reduce to exactly one value but {depth} remain")
