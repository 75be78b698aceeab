"""Pure parsers for interactive loan input.

Each parser turns one line of text into a ``ParseResult``: either a value
or a human-readable error. Nothing here reads input or prints.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from loan_calc.models import RateChange

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing one line of input."""

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult[T]":
        return cls(error=error)


Parser = Callable[[str], ParseResult]

NUMBER_ERROR = "Invalid input. Please enter a number."
INTEGER_ERROR = "Invalid input. Please enter an integer."
YES_NO_ERROR = "Please answer y or n."

# Like a stream extraction: leading whitespace, then the longest numeric
# prefix; whatever follows on the line is ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(text: str) -> ParseResult[float]:
    """Parse the leading finite real number (``"12.5 %"`` gives 12.5)."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return ParseResult.failure(NUMBER_ERROR)
    value = float(match.group(1))
    if not math.isfinite(value):
        return ParseResult.failure(NUMBER_ERROR)
    return ParseResult.success(value)


def parse_int(text: str) -> ParseResult[int]:
    """Parse the leading base-10 integer (``"12 months"`` and ``"12.5"`` give 12)."""
    match = _INT_PREFIX.match(text)
    if match is None:
        return ParseResult.failure(INTEGER_ERROR)
    return ParseResult.success(int(match.group(1)))


def parse_yes_no(text: str) -> ParseResult[bool]:
    """``y``/``Y`` as the first non-blank character means yes; any other character no.

    A blank answer is not an answer and fails.
    """
    stripped = text.strip()
    if not stripped:
        return ParseResult.failure(YES_NO_ERROR)
    return ParseResult.success(stripped[0] in ("y", "Y"))


def parse_rate_change(text: str) -> ParseResult[RateChange]:
    """Parse ``MONTH:RATE``, e.g. ``13:7.25``. Both parts must be complete numbers."""
    month_text, sep, rate_text = text.partition(":")
    if not sep:
        return ParseResult.failure(f"Expected MONTH:RATE, got {text!r}.")

    try:
        month = int(month_text.strip(), 10)
    except ValueError:
        return ParseResult.failure(f"Invalid month in rate change {text!r}.")
    try:
        rate = float(rate_text.strip())
    except ValueError:
        return ParseResult.failure(f"Invalid rate in rate change {text!r}.")
    if not math.isfinite(rate):
        return ParseResult.failure(f"Invalid rate in rate change {text!r}.")

    return ParseResult.success(RateChange(month=month, annual_rate_percent=rate))
