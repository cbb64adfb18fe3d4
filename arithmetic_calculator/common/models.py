"""Pydantic models for arithmetic requests, parsed expressions and results."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, model_validator


OperatorSymbol = Literal["+", "-", "*", "/"]


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression submitted for evaluation."""

    model_config = ConfigDict(frozen=True)

    expression: StrictStr = Field(..., description="Arithmetic expression as a string")


class ParsedExpression(BaseModel):
    """Operands and operator extracted from a ``<number> <operator> <number>`` expression."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="Left operand")
    operator: OperatorSymbol = Field(..., description="Operator symbol")
    right: float = Field(..., description="Right operand")


class OperationResult(BaseModel):
    """
    Outcome of evaluating one arithmetic expression.

    Exactly one of ``result`` and ``error`` is set. A failed evaluation never
    carries a numeric result, so a zero is always a genuine value.
    """

    model_config = ConfigDict(frozen=True)

    expression: StrictStr = Field(..., description="Original arithmetic expression")
    line: int = Field(default=1, ge=1, description="Line number of the expression in its input")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")
    error_type: Optional[str] = Field(default=None, description="Name of the error class")

    @model_validator(mode="after")
    def result_xor_error(self) -> "OperationResult":
        """Ensure the result holds either a value or an error, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("OperationResult needs exactly one of 'result' or 'error'")
        return self

    @property
    def ok(self) -> bool:
        """True when the expression evaluated successfully."""
        return self.error is None
