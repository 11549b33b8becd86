"""
Tests for StateObserver: single active observation over a state holder.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from users_app.domains.result import Ok
from users_app.domains.user import User
from users_app.orchestration.dispatchers import AppDispatchers
from users_app.orchestration.state_observer import StateObserver
from users_app.orchestration.users_state import UsersStateHolder, UsersUiState


def _holder() -> UsersStateHolder:
    return UsersStateHolder(MagicMock(return_value=Ok([User(id=1, name="Bob", email="bob@x.com")])), AppDispatchers.immediate())


def test_observe_delivers_current_then_updates() -> None:
    """observe() sends the current state, then every later one."""
    holder = _holder()
    seen: list[UsersUiState] = []
    observer = StateObserver(holder)
    observer.observe(seen.append)
    holder.load()
    assert [s.is_loading for s in seen] == [True, True, False]
    assert observer.is_observing


def test_observe_replaces_previous_observation() -> None:
    """Only the latest callback keeps receiving values."""
    holder = _holder()
    first: list[UsersUiState] = []
    second: list[UsersUiState] = []
    observer = StateObserver(holder)
    observer.observe(first.append)
    observer.observe(second.append)
    holder.load()
    assert len(first) == 1
    assert len(second) == 3


def test_cancel_is_idempotent() -> None:
    """cancel() stops delivery and can be repeated."""
    holder = _holder()
    seen: list[UsersUiState] = []
    observer = StateObserver(holder)
    observer.observe(seen.append)
    observer.cancel()
    observer.cancel()
    holder.load()
    assert len(seen) == 1
    assert not observer.is_observing
