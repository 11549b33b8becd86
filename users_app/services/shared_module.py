"""
Dependency wiring for the users screen.

Builds session -> API client -> repository -> use case -> state holder. A host
creates one `SharedModule` per base URL and asks it for state holders.
"""

from __future__ import annotations

import requests

from users_app.domains.usecases import GetUsersUseCase
from users_app.infrastructure.data.repositories.user_repository import UserRepositoryImpl
from users_app.infrastructure.data.sources.users_api import (
    HttpTimeouts,
    UsersApiClient,
    create_http_session,
)
from users_app.orchestration.dispatchers import AppDispatchers
from users_app.orchestration.users_state import UsersStateHolder
from users_app.utils.config import (
    http_connect_timeout,
    http_request_timeout,
    http_socket_timeout,
    users_api_base_url,
)
from users_app.utils.logger import get_logger

logger = get_logger()


class SharedModule:
    """
    Owns the HTTP session shared by every holder it provides.

    Args:
        base_url: Users API root.
        timeouts: HTTP timeouts; defaults to `HttpTimeouts()`.
        dispatchers: Passed to every holder. When None each holder gets its own
            thread pools, released by that holder's `clear()`.
        session: Pre-built session; when None one is created and closed by `close()`.
    """

    def __init__(
        self,
        base_url: str,
        timeouts: HttpTimeouts | None = None,
        dispatchers: AppDispatchers | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url must not be empty")
        self.base_url = base_url.strip().rstrip("/")
        self.timeouts = timeouts or HttpTimeouts()
        self._dispatchers = dispatchers
        self._owns_session = session is None
        self._session = session if session is not None else create_http_session()

    @classmethod
    def from_env(cls, dispatchers: AppDispatchers | None = None) -> "SharedModule":
        """Build from USERS_API_BASE_URL and the HTTP_*_TIMEOUT variables."""
        timeouts = HttpTimeouts(
            connect=http_connect_timeout(),
            request=http_request_timeout(),
            socket=http_socket_timeout(),
        )
        return cls(users_api_base_url(), timeouts=timeouts, dispatchers=dispatchers)

    def provide_users_api(self) -> UsersApiClient:
        return UsersApiClient(self._session, self.base_url, self.timeouts)

    def provide_get_users(self) -> GetUsersUseCase:
        return GetUsersUseCase(UserRepositoryImpl(self.provide_users_api()))

    def provide_users_state_holder(self) -> UsersStateHolder:
        logger.debug("Creating users state holder for %s", self.base_url)
        return UsersStateHolder(self.provide_get_users(), self._dispatchers)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()


__all__ = ["SharedModule"]
