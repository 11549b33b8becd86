"""Domain model for users."""

from __future__ import annotations

from dataclasses import dataclass

MAX_NAME_LENGTH = 255


@dataclass(frozen=True, slots=True)
class User:
    """A validated user. Only the mapper creates these from wire data."""

    id: int
    name: str
    email: str


__all__ = ["MAX_NAME_LENGTH", "User"]
