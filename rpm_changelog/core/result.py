"""Result type for explicit error handling.

Every operation that can fail in a user-visible way returns either ``Ok``
carrying the value or ``Err`` carrying a structured error. Callers branch
with ``match`` or ``isinstance`` instead of wrapping calls in try/except.

Usage:
    match find_release_line(lines):
        case Ok(ref):
            print(ref.value)
        case Err(error):
            print(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
