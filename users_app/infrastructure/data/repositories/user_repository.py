"""
User repository backed by the remote users API.

Invalid records are dropped one by one; a bad record never fails the batch.
"""

from __future__ import annotations

from users_app.domains.result import Err, Ok, Result
from users_app.domains.user import User
from users_app.infrastructure.data.mapper import Accepted, validate
from users_app.infrastructure.data.sources.users_api import UsersApi
from users_app.utils.logger import get_logger

logger = get_logger()


class UserRepositoryImpl:
    """Fetch via a `UsersApi` and map each record to a domain `User`."""

    def __init__(self, api: UsersApi) -> None:
        self._api = api

    def get_users(self) -> Result[list[User]]:
        """
        Return validated users in the order received.

        Fetch failures are returned unchanged (same `Err` object).
        """
        result = self._api.fetch_users()
        if isinstance(result, Err):
            return result

        users: list[User] = []
        dropped = 0
        for dto in result.value:
            outcome = validate(dto)
            if isinstance(outcome, Accepted):
                users.append(outcome.user)
            else:
                dropped += 1
                logger.debug("Dropping user record id=%s: %s", dto.id, outcome.reason)
        if dropped:
            logger.info("Dropped %d of %d user records that failed validation", dropped, len(result.value))
        return Ok(users)


__all__ = ["UserRepositoryImpl"]
