"""Data sources: the remote users API."""

from users_app.infrastructure.data.sources.users_api import (
    HttpTimeouts,
    UsersApi,
    UsersApiClient,
    create_http_session,
)

__all__ = ["HttpTimeouts", "UsersApi", "UsersApiClient", "create_http_session"]
