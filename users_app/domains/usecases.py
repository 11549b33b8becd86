"""Use cases sitting between the state holder and data access."""

from __future__ import annotations

from users_app.domains.repositories import UserRepository
from users_app.domains.result import Result
from users_app.domains.user import User


class GetUsersUseCase:
    """
    Load the user list.

    Currently a pass-through to the repository. Filtering, caching or paging
    belong here so callers keep the same signature.
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def invoke(self) -> Result[list[User]]:
        return self._repository.get_users()

    def __call__(self) -> Result[list[User]]:
        return self.invoke()


__all__ = ["GetUsersUseCase"]
