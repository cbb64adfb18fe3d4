"""Parse and evaluate three-token arithmetic expressions."""
from collections.abc import Callable as ABCCallable
from typing import Callable, Dict, List, Tuple

from arithmetic_calculator.common.errors import (
    InvalidNumberError,
    InvalidOperatorError,
    MalformedInputError,
)
from arithmetic_calculator.common.models import ParsedExpression
from arithmetic_calculator.common.operations import add, divide, multiply, subtract


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to arithmetic operations
OPERATORS: Dict[str, OperatorFn] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}

# An expression is exactly "<number> <operator> <number>"
FIELD_COUNT = 3


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions of the form ``<number> <operator> <number>``.

    Design constraints:
        - No eval(), no dynamic code execution
        - A single binary operation per expression, no precedence rules
        - Every failure is raised to the caller as a ``CalculatorError``

    Algorithm:
        1. Tokenize based on whitespace
        2. Require exactly three tokens
        3. Convert the operands, then validate the operator
        4. Dispatch to the operation registered for the operator

    Examples:
        - ``"3 + 2"`` parses to ``(3.0, 2.0, "+")`` and evaluates to ``5.0``
        - ``".6 + -0.6"`` evaluates to ``0.0``
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split an arithmetic expression into tokens on runs of whitespace.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[str]
        """
        return expr.split()

    @staticmethod
    def _to_number(token: str) -> float:
        """
        Convert an operand token to a float.

        :param str token: Token string

        :return: Numeric value of the token
        :rtype: float
        :raises InvalidNumberError: If the token is not a number
        """
        try:
            return float(token)
        except ValueError:
            raise InvalidNumberError(token) from None

    @staticmethod
    def parse_expression(expr: str) -> ParsedExpression:
        """
        Parse an expression into its operands and operator.

        :param str expr: Arithmetic expression string

        :return: Parsed operands and operator
        :rtype: ParsedExpression
        :raises MalformedInputError: If the expression does not have exactly three tokens
        :raises InvalidNumberError: If an operand is not a number
        :raises InvalidOperatorError: If the operator is not supported
        """
        tokens: List[str] = ExpressionParser.tokenize(expr)

        if len(tokens) != FIELD_COUNT:
            raise MalformedInputError(
                f"Expected {FIELD_COUNT} fields '<number> <operator> <number>', "
                f"got {len(tokens)}: {expr!r}"
            )

        left_token, op, right_token = tokens
        left: float = ExpressionParser._to_number(left_token)
        right: float = ExpressionParser._to_number(right_token)

        if op not in OPERATORS:
            raise InvalidOperatorError(op)

        return ParsedExpression(left=left, operator=op, right=right)

    @staticmethod
    def parse(expr: str) -> Tuple[float, float, str]:
        """
        Parse an expression and return ``(left, right, operator)``.

        :param str expr: Arithmetic expression string

        :return: Left operand, right operand and operator symbol
        :rtype: Tuple[float, float, str]
        """
        parsed = ExpressionParser.parse_expression(expr)
        return parsed.left, parsed.right, parsed.operator

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate an arithmetic expression.

        :param str expr: Arithmetic expression string

        :return: Computed result as float
        :rtype: float
        :raises CalculatorError: If the expression is invalid or the operation fails
        """
        parsed = ExpressionParser.parse_expression(expr)
        return OPERATORS[parsed.operator](parsed.left, parsed.right)


parse = ExpressionParser.parse
evaluate = ExpressionParser.evaluate
