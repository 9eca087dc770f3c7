"""CalculatorService: arithmetic over explicit operands.

Deterministic and side-effect free: no capabilities are used, every call
builds a fresh Result.
"""

from __future__ import annotations

import builtins

from samplelib.services.contracts import CalculatorInput, CalculatorOutput, Operation
from samplelib.services.result import ErrorCode, Result, fail, ok

DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"


def _operands(a: float | CalculatorInput, b: float | None) -> CalculatorInput:
    """Accept either ``(a, b)`` or a single CalculatorInput."""
    if isinstance(a, CalculatorInput):
        return a
    return CalculatorInput(a=a, b=b)


def _tagged(result: float, operation: Operation) -> Result[CalculatorOutput]:
    return ok(CalculatorOutput(result=result, operation=operation))


class CalculatorService:
    """Binary arithmetic returning Results, plus sign predicates."""

    def add(self, a: float | CalculatorInput, b: float | None = None) -> Result[CalculatorOutput]:
        """Return ``a + b``. Never fails."""
        operands = _operands(a, b)
        return _tagged(operands.a + operands.b, "add")

    def subtract(
        self, a: float | CalculatorInput, b: float | None = None
    ) -> Result[CalculatorOutput]:
        """Return ``a - b``. Never fails."""
        operands = _operands(a, b)
        return _tagged(operands.a - operands.b, "subtract")

    def multiply(
        self, a: float | CalculatorInput, b: float | None = None
    ) -> Result[CalculatorOutput]:
        """Return ``a * b``. Never fails."""
        operands = _operands(a, b)
        return _tagged(operands.a * operands.b, "multiply")

    def divide(
        self, a: float | CalculatorInput, b: float | None = None
    ) -> Result[CalculatorOutput]:
        """Return ``a / b``, or a DIVISION_BY_ZERO Failure when ``b == 0``."""
        operands = _operands(a, b)
        if operands.b == 0:
            return fail(ErrorCode.DIVISION_BY_ZERO, DIVISION_BY_ZERO_MESSAGE)
        return _tagged(operands.a / operands.b, "divide")

    # --- Unary helpers (total, no Result wrapping) ---

    def abs(self, value: float) -> float:
        return builtins.abs(value)

    def is_positive(self, value: float) -> bool:
        return value > 0

    def is_negative(self, value: float) -> bool:
        return value < 0

    def is_zero(self, value: float) -> bool:
        return value == 0
