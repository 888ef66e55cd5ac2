import logging

from mathex.extra.exceptions import FormulaSyntaxError
from mathex.extra.types import Side, Token, TokenKind
from mathex.extra.utils import CallAllMethods, log_exception, variable_name
from mathex.vars import CLOSE_PARENTHESIS, OPEN_PARENTHESIS, PREFIX_SIGNS, SYMBOLS


def is_value_end(token: Token | None) -> bool:
    """
    Checks if token completes a value: number, variable or ')'
    """
    if token is None:
        return False
    if token.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
        return True
    return token.kind is TokenKind.SYMBOL and token.text == CLOSE_PARENTHESIS


def is_value_start(token: Token | None) -> bool:
    """
    Checks if token can begin a value: number, variable, function, '(' or prefix operator
    """
    if token is None:
        return False
    if token.kind in (TokenKind.NUMBER, TokenKind.VARIABLE, TokenKind.FUNCTION):
        return True
    return token.kind is TokenKind.SYMBOL and (token.text == OPEN_PARENTHESIS or token.text in PREFIX_SIGNS)


def is_open_parenthesis(token: Token | None) -> bool:
    return token is not None and token.kind is TokenKind.SYMBOL and token.text == OPEN_PARENTHESIS


class ValidTokens(CallAllMethods):
    """
    Syntax validator of tokenized formula. Checks run on creation in alphabetical order
    :param tokens: tokens of the formula
    :param arguments_count: amount of numeric arguments supplied by the caller
    :raises FormulaSyntaxError: first structural violation found
    """
    def __init__(self, tokens: list[Token], arguments_count: int, logger: logging.Logger | None = None):
        self.tokens = tokens
        self.arguments_count = arguments_count
        self.logger = logger or logging.getLogger(__name__)
        self.variables: set[int] = set()

        self.call_all_methods()

    @log_exception
    def _a_check_structure(self) -> None:
        """
        Scans tokens left to right, collecting variables
        :raises FormulaSyntaxError: operator without operand, function without '(' or two values in a row
        """
        tokens = self.tokens
        for i, t in enumerate(tokens):
            previous = tokens[i - 1] if i > 0 else None
            following = tokens[i + 1] if i + 1 < len(tokens) else None

            if t.kind is TokenKind.FUNCTION:
                if not is_open_parenthesis(following):
                    raise FormulaSyntaxError(f"Function '{t.text}' must be followed by '('", token=t)

            elif t.kind is TokenKind.SYMBOL:
                side = SYMBOLS[t.value].side
                if side in (Side.LEFT_ONLY, Side.BOTH) and not is_value_end(previous):
                    raise FormulaSyntaxError(f"Operator '{t.text}' requires a value to the left", token=t)
                if side in (Side.RIGHT_ONLY, Side.BOTH) and not is_value_start(following):
                    raise FormulaSyntaxError(f"Operator '{t.text}' requires a value to the right", token=t)

            elif t.kind is TokenKind.COMMA:
                if not is_value_end(previous):
                    raise FormulaSyntaxError("Comma requires a value to the left", token=t)
                if not is_value_start(following):
                    raise FormulaSyntaxError("Comma requires a value to the right", token=t)

            elif t.kind is TokenKind.VARIABLE:
                self.variables.add(t.value)

            if is_value_end(t) and is_value_start(following):
                raise FormulaSyntaxError(f"Missed operation between '{t.text}' and '{following.text}'",
                                         token=following)

    @log_exception
    def _b_check_variables(self) -> None:  # begins with _b to start after _a_check_structure
        """
        Checks that formula uses exactly variables 1..arguments_count
        :raises FormulaSyntaxError: variable count differs from arguments count or a variable is skipped
        """
        used = len(self.variables)
        provided = self.arguments_count
        if used < provided:
            raise FormulaSyntaxError(f"Formula uses fewer variables than provided: {used} used, {provided} provided")
        if used > provided:
            raise FormulaSyntaxError(f"Formula uses more variables than provided: {used} used, {provided} provided")
        for index in range(1, provided + 1):
            if index not in self.variables:
                raise FormulaSyntaxError(f"Formula skips variable '{variable_name(index)}'")
