"""Exceptions raised while parsing and evaluating arithmetic expressions."""


class CalculatorError(ValueError):
    """Base class for every error raised by the calculator."""


class MalformedInputError(CalculatorError):
    """The expression does not split into exactly three tokens."""


class InvalidNumberError(CalculatorError):
    """An operand token cannot be converted to a number."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a number: {token!r}")
        self.token = token


class InvalidOperatorError(CalculatorError):
    """The operator token is not one of the supported symbols."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown operator: {token!r}")
        self.token = token


class DivideByZeroError(CalculatorError, ZeroDivisionError):
    """The divisor is exactly zero."""


class InvalidDomainError(CalculatorError):
    """The operand is outside the domain of the operation."""
