import logging
import re

import mathex.constants as cst
from mathex.extra.exceptions import TokenizationError
from mathex.extra.types import Token, TokenKind
from mathex.extra.utils import log_exception, variable_index
from mathex.vars import FUNCTIONS_INDEX, SORTED_SIGNS, SYMBOLS_INDEX

NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")
VARIABLE_PATTERN = re.compile(r"[A-Z]+")
FUNCTION_PATTERN = re.compile(r"[a-z][a-z0-9]*")


def excerpt(expression: str, position: int, radius: int = cst.EXCERPT_RADIUS) -> str:
    """
    Cuts part of the expression around position
    """
    start = max(position - radius, 0)
    return expression[start:position + radius + 1]


class Tokenizer:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def tokenize(self, expression: str) -> list[Token]:
        """
        Tokenizes the expression in a single left-to-right pass
        :param expression: raw formula
        :raises TokenizationError: no token matches at some position
        :return: list of tokens
        """
        tokens: list[Token] = []
        position = 0
        length = len(expression)

        while position < length:
            s = expression[position]
            if s.isspace():
                position += 1
                continue

            match = NUMBER_PATTERN.match(expression, position)
            if match:
                end = match.end()
                if end < length and expression[end] == ".":
                    raise TokenizationError(f"Number '{expression[position:end + 1]}' ends with a bare '.'",
                                            position=end, excerpt=excerpt(expression, end))
                tokens.append(Token(TokenKind.NUMBER, float(match.group()), position, match.group()))
                position = end
                continue

            match = VARIABLE_PATTERN.match(expression, position)
            if match:
                tokens.append(Token(TokenKind.VARIABLE, variable_index(match.group()), position, match.group()))
                position = match.end()
                continue

            sign = self._match_symbol(expression, position)
            if sign:
                tokens.append(Token(TokenKind.SYMBOL, SYMBOLS_INDEX[sign], position, sign))
                position += len(sign)
                continue

            match = FUNCTION_PATTERN.match(expression, position)
            if match:
                name = match.group()
                if name not in FUNCTIONS_INDEX:
                    raise TokenizationError(f"Unknown function '{name}'",
                                            position=position, excerpt=excerpt(expression, position))
                tokens.append(Token(TokenKind.FUNCTION, FUNCTIONS_INDEX[name], position, name))
                position = match.end()
                continue

            if s == ",":
                tokens.append(Token(TokenKind.COMMA, 0, position, s))
                position += 1
                continue

            raise TokenizationError(f"Unknown token '{s}'", position=position, excerpt=excerpt(expression, position))

        self.logger.debug(f"{tokens=}")
        return tokens

    @staticmethod
    def _match_symbol(expression: str, position: int) -> str | None:
        for sign in SORTED_SIGNS:
            if expression.startswith(sign, position):
                return sign
        return None
