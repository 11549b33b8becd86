"""Success/failure wrapper returned by every fallible step of the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """
    Failed outcome.

    - message: user-facing text, safe to render as-is
    - cause: optional underlying exception, for logs only
    """

    message: str
    cause: Optional[BaseException] = None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Ok[T] | Err

__all__ = ["Err", "Ok", "Result"]
