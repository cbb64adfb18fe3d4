"""Basic arithmetic operations over floating-point numbers."""
import math

from arithmetic_calculator.common.errors import DivideByZeroError, InvalidDomainError


def add(a: float, b: float, *extras: float) -> float:
    """
    Sum two or more numbers, accumulating from left to right.

    :param float a: First operand
    :param float b: Second operand
    :param float extras: Additional operands

    :return: Sum of all operands
    :rtype: float
    """
    total: float = a + b
    for value in extras:
        total += value
    return total


def subtract(a: float, b: float, *extras: float) -> float:
    """
    Subtract the sum of every trailing operand from the first one.

    ``subtract(4, 2, 0.5, -0.5)`` computes ``4 - (2 + 0.5 - 0.5)``.

    :param float a: Minuend
    :param float b: First subtrahend
    :param float extras: Additional subtrahends

    :return: ``a - (b + sum(extras))``
    :rtype: float
    """
    subtrahend: float = b
    for value in extras:
        subtrahend += value
    return a - subtrahend


def multiply(a: float, b: float, *extras: float) -> float:
    """Multiply two or more numbers from left to right."""
    product: float = a * b
    for value in extras:
        product *= value
    return product


def divide(a: float, b: float) -> float:
    """
    Divide ``a`` by ``b``.

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient
    :rtype: float
    :raises DivideByZeroError: If ``b`` is zero
    """
    if b == 0:
        raise DivideByZeroError(f"Cannot divide {a} by zero")
    return a / b


def square_root(a: float) -> float:
    """
    Return the non-negative square root of ``a``.

    :param float a: Radicand

    :return: Square root
    :rtype: float
    :raises InvalidDomainError: If ``a`` is negative
    """
    if a < 0:
        raise InvalidDomainError(f"Cannot take the square root of negative number {a}")
    return math.sqrt(a)
