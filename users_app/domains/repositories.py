"""Repository contracts the domain depends on."""

from __future__ import annotations

from typing import Protocol

from users_app.domains.result import Result
from users_app.domains.user import User


class UserRepository(Protocol):
    def get_users(self) -> Result[list[User]]:
        """Return validated users, or an `Err` with a user-facing message."""
        ...


__all__ = ["UserRepository"]
