"""
Arithmetic Expression Evaluator For The Inline Calculator.

Evaluates Single-Line Expressions Built From Numbers, + - * / % ^ And
Parentheses Without eval(): Tokenize, Convert To Postfix (Shunting-Yard),
Then Reduce The Postfix Sequence On A Stack.

All Operators Are Left-Associative, Including ^: 2^3^2 Is (2^3)^2 = 64.
"""

import math
import string
from types import MappingProxyType
from typing import Callable, List, NamedTuple


class MalformedExpressionError(ValueError):
    """Raised When An Expression Has Too Few Operands Or Too Many Values."""


class Operator(NamedTuple):
    precedence: int
    apply: Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _remainder(a: float, b: float) -> float:
    # Sign Follows The Dividend; x % 0 And inf % x Are NaN
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _power(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        if b.is_integer() and b % 2:
            return math.copysign(math.inf, a)
        return math.inf
    except ValueError:
        # 0 Raised To A Negative Power
        if a == 0 and b < 0:
            return math.inf
        return math.nan


OPERATORS = MappingProxyType({
    '+': Operator(1, lambda a, b: a + b),
    '-': Operator(1, lambda a, b: a - b),
    '*': Operator(2, lambda a, b: a * b),
    '/': Operator(2, _divide),
    '%': Operator(2, _remainder),
    '^': Operator(3, _power),
})

NUMBER_CHARS = frozenset(string.digits + '.')
PARENTHESES = frozenset('()')


def _is_number(token: str) -> bool:
    return token[0] in NUMBER_CHARS


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        # "1.2.3" Or A Lone "."
        return math.nan


def tokenize(expression: str) -> List[str]:
    """
    Split An Expression Into Number, Operator And Parenthesis Tokens.

    Spaces Are Skipped And Unknown Characters Are Dropped.
    """
    tokens = []
    current = ''

    for char in expression:
        if char == ' ':
            continue

        if char in NUMBER_CHARS:
            current += char
        elif char in OPERATORS or char in PARENTHESES:
            if current:
                tokens.append(current)
                current = ''
            tokens.append(char)

    if current:
        tokens.append(current)

    return tokens


def to_postfix(tokens: List[str]) -> List[str]:
    """Reorder Infix Tokens Into Postfix (RPN) Order."""
    output = []
    stack = []

    for token in tokens:
        if _is_number(token):
            output.append(token)
        elif token == '(':
            stack.append(token)
        elif token == ')':
            while stack and stack[-1] != '(':
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif token in OPERATORS:
            precedence = OPERATORS[token].precedence
            while stack and stack[-1] != '(' and OPERATORS[stack[-1]].precedence >= precedence:
                output.append(stack.pop())
            stack.append(token)

    while stack:
        output.append(stack.pop())

    return output


def evaluate_postfix(postfix: List[str]) -> float:
    """
    Reduce A Postfix Sequence To A Single Number.

    Raises:
        MalformedExpressionError: Operator Without Two Operands, Nothing To
            Evaluate, Or Values Left Without An Operator Between Them
    """
    stack: List[float] = []

    for token in postfix:
        if _is_number(token):
            stack.append(_parse_number(token))
        elif token in OPERATORS:
            if len(stack) < 2:
                raise MalformedExpressionError(f"Missing Operand For '{token}'")
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[token].apply(left, right))
        # An Unmatched "(" Is Left In The Output And Ignored Here

    if not stack:
        raise MalformedExpressionError("Empty Expression")
    if len(stack) > 1:
        raise MalformedExpressionError("Missing Operator Between Values")

    return stack[0]


def evaluate(expression: str) -> float:
    """
    Evaluate An Arithmetic Expression.

    Args:
        expression: Text Such As "(3+4)*2"

    Returns:
        The Numeric Result; Division By Zero Gives inf And Malformed
        Numbers Give NaN Instead Of Raising
    """
    return evaluate_postfix(to_postfix(tokenize(expression)))


def format_number(value: float) -> str:
    """Render A Result The Way It Is Shown In Chat ("4", "0.5", "Infinity")."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
