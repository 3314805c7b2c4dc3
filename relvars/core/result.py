"""Result type for explicit error handling.

Every fallible step of a release resolution returns a Result instead of
raising, so the CLI boundary is the only place that turns a failure into a
process exit.

Usage:
    def parse_run_id(text: str) -> Result[int, str]:
        if not text.isdigit():
            return Err(f"invalid run id: {text}")
        return Ok(int(text))

    match parse_run_id("123456"):
        case Ok(value):
            print(f"run: {value}")
        case Err(error):
            print(f"error: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result holding an error payload."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
