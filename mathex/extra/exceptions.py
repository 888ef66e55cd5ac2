from mathex.extra.types import Token


class MathexError(Exception):
    """
    Base class for every error raised while evaluating a formula
    :param message: description of the problem
    :param token: offending token, if any
    :param position: offending position in the formula, if any
    """
    category = "Error"

    def __init__(self, message: str, token: Token | None = None, position: int | None = None):
        super().__init__(message)
        self.message = message
        self.token = token
        if position is None and token is not None:
            position = token.source_offset
        self.position = position

    def __str__(self):
        text = f"{self.category}: {self.message}"
        if self.token is not None:
            text += f" ({self.token.kind.value} '{self.token.text}' at position {self.position})"
        elif self.position is not None:
            text += f" (at position {self.position})"
        return text


class InputError(MathexError):
    category = "InputError"


class TokenizationError(MathexError):
    category = "TokenizationError"

    def __init__(self, message: str, position: int, excerpt: str):
        super().__init__(message, position=position)
        self.excerpt = excerpt

    def __str__(self):
        return f"{super().__str__()}: '{self.excerpt}'"


class FormulaSyntaxError(MathexError):
    category = "SyntaxError"


class StackError(MathexError):
    category = "StackError"


class ArgumentCountError(MathexError):
    category = "ArgumentCountError"


class ExecutionError(MathexError):
    category = "ExecutionError"
