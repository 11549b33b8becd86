"""Domain layer (business logic and domain models).

Domain modules should not depend on UI or on HTTP. Data access is injected
through the `UserRepository` protocol.
"""

from users_app.domains.result import Err, Ok, Result
from users_app.domains.user import User
from users_app.domains.repositories import UserRepository
from users_app.domains.usecases import GetUsersUseCase

__all__ = ["Err", "GetUsersUseCase", "Ok", "Result", "User", "UserRepository"]
