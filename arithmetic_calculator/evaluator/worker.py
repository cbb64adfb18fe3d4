"""Worker evaluating a single arithmetic expression into an OperationResult."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperationRequest, OperationResult
from arithmetic_calculator.common.parser import ExpressionParser


class ExpressionWorker(BaseModel):
    """
    Worker responsible for evaluating a single arithmetic expression.

    Lifecycle:
        - Created for one expression only
        - Evaluates it and captures the value or the calculator error
        - Returns the outcome as an ``OperationResult``
    """

    # Make the Pydantic instance immutable (read-only) for safety
    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Single arithmetic expression to evaluate")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v

    @classmethod
    def from_request(cls, request: OperationRequest, line_number: int = 1) -> "ExpressionWorker":
        """
        Build a worker for the expression carried by a request.

        :param OperationRequest request: Validated expression request
        :param int line_number: Line number of the expression in its input

        :return: Worker for the request's expression
        :rtype: ExpressionWorker
        """
        return cls(expression=request.expression, line_number=line_number)

    def run(self) -> OperationResult:
        """
        Evaluate the arithmetic expression and capture its result or error.

        :return: Result of the evaluation
        :rtype: OperationResult
        """
        logger.info(f"👷🏁 Worker started on line {self.line_number}: {self.expression}")

        try:
            result: float = ExpressionParser.evaluate(self.expression)
        except CalculatorError as exc:
            logger.warning(
                f"👷❌ Worker failed on line {self.line_number}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {self.expression!r}"
            )
            return OperationResult(
                expression=self.expression,
                line=self.line_number,
                error=str(exc),
                error_type=type(exc).__name__,
            )

        logger.info(f"👷✅ Worker finished on line {self.line_number}: {result}")
        return OperationResult(expression=self.expression, line=self.line_number, result=result)
