"""StringService: text transformations.

Lengths reported by ``process`` are UTF-16 code units. Everything else
(``reverse``, ``truncate``) works on code points, which is what ``str``
indexes by.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from typing import Any

from samplelib.services.base import BaseService
from samplelib.services.contracts import (
    StringProcessInput,
    StringProcessOptions,
    StringProcessOutput,
)
from samplelib.services.result import ErrorCode, Result, fail, ok

EMPTY_INPUT_MESSAGE = "Input text cannot be empty"


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units needed to encode *text*.

    Examples:
        >>> utf16_length("abc")
        3
        >>> utf16_length("😀")
        2
    """
    return len(text.encode("utf-16-le")) // 2


def _is_alnum(char: str) -> bool:
    # Unicode letter (L*) or number (N*) categories
    return unicodedata.category(char)[0] in ("L", "N")


class StringService(BaseService):
    """Stateless text operations with optional debug logging."""

    def process(
        self,
        text: str,
        options: StringProcessOptions | Mapping[str, Any] | None = None,
    ) -> Result[StringProcessOutput]:
        """Apply trim, uppercase, prefix and suffix (in that order).

        Only the empty string is rejected; whitespace-only text is processed.
        """
        if not text:
            return fail(ErrorCode.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

        if options is None:
            opts = StringProcessOptions()
        elif isinstance(options, StringProcessOptions):
            opts = options
        else:
            opts = StringProcessOptions.model_validate(options)

        processed = text
        if opts.trim:
            processed = processed.strip()
        if opts.uppercase:
            processed = processed.upper()
        if opts.prefix:
            processed = opts.prefix + processed
        if opts.suffix:
            processed = processed + opts.suffix

        output = StringProcessOutput(
            original=text,
            processed=processed,
            length=utf16_length(processed),
        )
        request = StringProcessInput(text=text, options=opts)
        self._logger.debug(
            "Processed string",
            {"input": request.model_dump(), "output": output.model_dump()},
        )
        return ok(output)

    def reverse(self, text: str) -> str:
        """Reverse by code point; astral characters stay intact."""
        return text[::-1]

    def is_palindrome(self, text: str) -> bool:
        """Palindrome check ignoring case, punctuation and whitespace.

        The empty string (or one with no letters or digits) is a palindrome.
        """
        normalized = unicodedata.normalize("NFC", text.lower())
        normalized = "".join(ch for ch in normalized if _is_alnum(ch))
        return normalized == self.reverse(normalized)

    def count_words(self, text: str) -> int:
        """Count whitespace-separated words; runs of whitespace count once."""
        return len(text.split())

    def truncate(self, text: str, max_length: int, suffix: str = "...") -> str:
        """Shorten *text* to at most *max_length* characters.

        When truncation happens and the suffix fits, the result is exactly
        *max_length* long and ends with *suffix*. A suffix that does not fit
        is dropped entirely. Negative *max_length* yields ``""``.
        """
        if max_length < 0:
            return ""
        if len(text) <= max_length:
            return text
        if len(suffix) >= max_length:
            return text[:max_length]
        return text[: max_length - len(suffix)] + suffix
