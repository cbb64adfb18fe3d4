"""Test classes OperationRequest, ParsedExpression and OperationResult."""
from pydantic import ValidationError
import pytest

from arithmetic_calculator.common.models import (
    OperationRequest,
    OperationResult,
    ParsedExpression,
)


def test_operation_request_valid() -> None:
    """Test that a valid OperationRequest can be created."""
    req = OperationRequest(expression="2 + 3")
    assert req.expression == "2 + 3"


def test_operation_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        OperationRequest(expression=123)


def test_parsed_expression_valid() -> None:
    """Test that a ParsedExpression keeps its operands and operator."""
    parsed = ParsedExpression(left=3, operator="+", right=2)
    assert (parsed.left, parsed.operator, parsed.right) == (3.0, "+", 2.0)


def test_parsed_expression_unknown_operator() -> None:
    """Test that operators outside the fixed set are rejected."""
    with pytest.raises(ValidationError):
        ParsedExpression(left=3, operator="%", right=2)


def test_parsed_expression_is_frozen() -> None:
    """Test that a ParsedExpression cannot be modified."""
    parsed = ParsedExpression(left=3, operator="+", right=2)
    with pytest.raises(ValidationError):
        parsed.left = 4


def test_operation_result_valid() -> None:
    """Test that a successful OperationResult can be created."""
    res = OperationResult(expression="2 + 3", result=5.0)
    assert res.result == 5.0
    assert res.line == 1
    assert res.ok


def test_operation_result_error() -> None:
    """Test that a failed OperationResult carries no numeric result."""
    res = OperationResult(expression="1 / 0", error="Cannot divide 1.0 by zero")
    assert res.result is None
    assert not res.ok


def test_operation_result_zero_is_a_result() -> None:
    """Test that a zero result is a success, not a failure marker."""
    res = OperationResult(expression=".6 + -0.6", result=0.0)
    assert res.ok


@pytest.mark.parametrize("kwargs", [
    {"expression": "2 + 2"},                               # neither
    {"expression": "2 + 2", "result": 4.0, "error": "x"},  # both
    {"expression": "2 + 2", "result": "not a float"},
    {"expression": 42, "result": 8.0},
    {"expression": "2 + 2", "result": 4.0, "line": 0},
])
def test_operation_result_invalid(kwargs) -> None:
    """Test that inconsistent or mistyped results raise a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(**kwargs)
