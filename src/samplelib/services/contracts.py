"""Typed payload contracts for calculator and string operations.

Inputs are validated on the way in; outputs are frozen so a Result payload
cannot be mutated after it leaves the service.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Operation = Literal["add", "subtract", "multiply", "divide"]


class CalculatorInput(BaseModel):
    """Operand pair for a binary arithmetic operation."""

    model_config = ConfigDict(frozen=True)

    a: float
    b: float


class CalculatorOutput(BaseModel):
    """Payload for a calculator Success."""

    model_config = ConfigDict(frozen=True)

    result: float
    operation: Operation


class StringProcessOptions(BaseModel):
    """Transformations for ``StringService.process``.

    Applied in field order: trim, uppercase, prefix, suffix. Each one only
    when truthy, so an empty prefix is the same as no prefix.
    """

    model_config = ConfigDict(frozen=True)

    trim: bool = False
    uppercase: bool = False
    prefix: str | None = None
    suffix: str | None = None

    @field_validator("trim", "uppercase", mode="before")
    @classmethod
    def _truthy_flag(cls, v: Any) -> bool:
        return bool(v)

    @field_validator("prefix", "suffix", mode="before")
    @classmethod
    def _blank_affix_is_absent(cls, v: Any) -> Any:
        return v or None


class StringProcessInput(BaseModel):
    """Text plus processing options."""

    model_config = ConfigDict(frozen=True)

    text: str
    options: StringProcessOptions = Field(default_factory=StringProcessOptions)


class StringProcessOutput(BaseModel):
    """Payload for a ``StringService.process`` Success.

    ``length`` counts UTF-16 code units of ``processed``, so characters outside
    the Basic Multilingual Plane count as two.
    """

    model_config = ConfigDict(frozen=True)

    original: str
    processed: str
    length: int
