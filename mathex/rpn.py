import logging

from mathex.extra.exceptions import StackError
from mathex.extra.types import Side, Token, TokenKind
from mathex.extra.utils import log_exception
from mathex.vars import CLOSE_PARENTHESIS, OPEN_PARENTHESIS, SYMBOLS


def is_open(token: Token) -> bool:
    return token.kind is TokenKind.SYMBOL and token.text == OPEN_PARENTHESIS


class ConverterRPN:
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    @log_exception
    def rpn(self, tokens: list[Token]) -> list[Token]:
        """
        Converts list of tokens to postfix order(shunting-yard, extended with functions and commas)
        :param tokens: syntax-valid tokens
        :raises StackError: unmatched parenthesis or comma outside of parenthesis
        :return: postfix program
        """
        output: list[Token] = []
        stack_ops: list[Token] = []  # operators, '(' and pending functions

        for t in tokens:
            if t.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
                output.append(t)

            elif t.kind is TokenKind.FUNCTION or is_open(t):
                stack_ops.append(t)

            elif t.kind is TokenKind.COMMA:
                while stack_ops and not is_open(stack_ops[-1]):
                    output.append(stack_ops.pop())
                if not stack_ops:
                    raise StackError("Comma outside of parenthesis", token=t)

            elif t.text == CLOSE_PARENTHESIS:
                while stack_ops and not is_open(stack_ops[-1]):
                    output.append(stack_ops.pop())
                if not stack_ops:
                    raise StackError("No matching '('", token=t)
                stack_ops.pop()
                if stack_ops and stack_ops[-1].kind is TokenKind.FUNCTION:
                    output.append(stack_ops.pop())

            else:
                cur_op = SYMBOLS[t.value]
                while stack_ops and not is_open(stack_ops[-1]):
                    prev_op = SYMBOLS[stack_ops[-1].value] if stack_ops[-1].kind is TokenKind.SYMBOL else None
                    if prev_op is None:
                        break
                    if prev_op.precedence < cur_op.precedence or (
                            prev_op.precedence == cur_op.precedence and cur_op.side is not Side.RIGHT_ONLY):
                        output.append(stack_ops.pop())
                    else:
                        break
                stack_ops.append(t)

        for op in stack_ops[::-1]:
            output.append(op)

        for t in output:
            if is_open(t):
                raise StackError("No matching ')'", token=t)

        self.logger.debug(f"rpn={[t.text for t in output]}")
        return output
