from dataclasses import dataclass
from enum import Enum
from typing import Callable


class TokenKind(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    SYMBOL = "symbol"
    FUNCTION = "function"
    COMMA = "comma"


class Side(Enum):
    """
    Which neighbours an operator needs. Also decides ties at equal precedence
    """
    RIGHT_ONLY = "right"
    LEFT_ONLY = "left"
    BOTH = "both"


@dataclass(frozen=True)
class Token:
    """
    Class representing a token
    :param kind: kind of the token
    :param value: literal for numbers, 1-based index for variables, table index for symbols and functions
    :param source_offset: position of the first character in the formula
    :param text: lexeme as written in the formula
    """
    kind: TokenKind
    value: float | int
    source_offset: int
    text: str = ""


@dataclass(frozen=True)
class Operator:
    """
    Class representing an operator
    :param sign: lexeme of the operator
    :param precedence: rank of the operator, lower binds tighter
    :param side: operands required around the operator
    :param callable_function: function that will be called when met in postfix program(None for parenthesis)
    """
    sign: str
    precedence: int
    side: Side
    callable_function: Callable | None = None

    @property
    def arity(self) -> int:
        return 2 if self.side is Side.BOTH else 1


@dataclass(frozen=True)
class Function:
    """
    Class representing a function
    :param name: name of the function
    :param args: fixed amount of args
    :param callable_function: function that will be called when met in postfix program
    """
    name: str
    args: int
    callable_function: Callable
