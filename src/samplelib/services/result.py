"""Result, Success and Failure: the universal service contract.

INVARIANT: Every fallible service operation returns a Result. Failure is an
ordinary return value, never a raised exception.

``Success`` and ``Failure`` are separate frozen models, so a payload and an
error can never coexist on one value. Branch on the ``success`` discriminant
(or ``match`` on the class) before touching ``data`` or ``error``::

    match calculator.divide(1, 0):
        case Success(data=out):
            print(out.result)
        case Failure(code=ErrorCode.DIVISION_BY_ZERO):
            print("nope")
"""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorCode(StrEnum):
    """Stable machine-readable failure codes.

    Callers branch on these, never on the message text.
    """

    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    EMPTY_INPUT = "EMPTY_INPUT"


class Success(BaseModel, Generic[T]):
    """Successful outcome carrying a payload."""

    model_config = {"frozen": True}

    success: Literal[True] = True
    data: T


class Failure(BaseModel):
    """Failed outcome carrying a human-readable message and a stable code."""

    model_config = {"frozen": True}

    success: Literal[False] = False
    error: str
    code: ErrorCode


type Result[T] = Success[T] | Failure


def ok(data: T) -> Success[T]:
    """Wrap *data* in a Success."""
    return Success(data=data)


def fail(code: ErrorCode, message: str) -> Failure:
    """Build a Failure for a known error condition."""
    return Failure(error=message, code=code)
