"""State management for the users screen: execution contexts, UI state and observers."""

from users_app.orchestration.dispatchers import AppDispatchers, ImmediateExecutor
from users_app.orchestration.state_observer import StateObserver
from users_app.orchestration.users_state import UsersStateHolder, UsersUiState

__all__ = [
    "AppDispatchers",
    "ImmediateExecutor",
    "StateObserver",
    "UsersStateHolder",
    "UsersUiState",
]
