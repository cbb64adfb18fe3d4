"""Evaluate blocks of newline-separated arithmetic expressions."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperationRequest, OperationResult
from arithmetic_calculator.evaluator.worker import ExpressionWorker


class BatchEvaluator(BaseModel):
    """
    Evaluate one expression per line and report every outcome.

    Features:
        - Blank lines are skipped, line numbers count non-empty lines only.
        - One worker per expression, evaluated in input order.
        - A failing expression is reported and does not stop the batch.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(default=1, ge=1, description="Line number given to the first expression")

    @staticmethod
    def split_lines(text: str) -> List[str]:
        """
        Split text into stripped, non-empty expression lines.

        :param str text: Newline-separated expressions

        :return: List of non-empty expression lines
        :rtype: List[str]
        """
        return [line.strip() for line in text.splitlines() if line.strip()]

    @staticmethod
    def format_result(result: OperationResult) -> str:
        """
        Render a result as ``expr = value`` or ``expr -> ERROR: message``.

        :param OperationResult result: Evaluated expression

        :return: Report line
        :rtype: str
        """
        if result.ok:
            return f"{result.expression} = {result.result}"
        return f"{result.expression} -> ERROR: {result.error}"

    def requests(self, text: str) -> List[OperationRequest]:
        """
        Build one request per expression line of the text.

        :param str text: Newline-separated expressions

        :return: Requests in input order
        :rtype: List[OperationRequest]
        """
        return [OperationRequest(expression=expr) for expr in self.split_lines(text)]

    def evaluate(self, text: str) -> List[OperationResult]:
        """
        Evaluate every expression line of the text.

        :param str text: Newline-separated expressions

        :return: One result per non-empty line, in input order
        :rtype: List[OperationResult]
        """
        requests: List[OperationRequest] = self.requests(text)
        logger.info(f"🧮 Evaluating {len(requests)} expressions")

        results: List[OperationResult] = [
            ExpressionWorker.from_request(request, line_number=line_number).run()
            for line_number, request in enumerate(requests, start=self.start_line)
        ]

        failures = sum(1 for r in results if not r.ok)
        if failures:
            logger.info(f"🧮❌ {failures} of {len(results)} expressions failed")
        return results

    def render(self, text: str) -> str:
        """
        Evaluate the text and return the report, one line per expression.

        :param str text: Newline-separated expressions

        :return: Report text, newline-terminated when not empty
        :rtype: str
        """
        lines: List[str] = [self.format_result(r) for r in self.evaluate(text)]
        return "".join(f"{line}\n" for line in lines)
