"""
UI state for the users screen and the holder that loads and publishes it.

The holder is the only writer of its state. Each `load()` publishes a loading
state right away, fetches on the io context and publishes the outcome on the
main context. Loads are numbered; only the most recent one may publish its
outcome, so a slow earlier response cannot overwrite a newer one.
"""

from __future__ import annotations

import dataclasses
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Callable, Optional

from users_app.domains.result import Ok, Result
from users_app.domains.user import User
from users_app.orchestration.dispatchers import AppDispatchers
from users_app.utils.logger import get_logger

logger = get_logger()

StateCallback = Callable[["UsersUiState"], None]


@dataclass(frozen=True)
class UsersUiState:
    """Snapshot rendered by the UI. Replaced wholesale, never mutated."""

    is_loading: bool = False
    users: list[User] = field(default_factory=list)
    error_message: Optional[str] = None


class UsersStateHolder:
    """
    Owns the current `UsersUiState` and notifies subscribers on every change.

    Args:
        get_users: Use case returning `Result[list[User]]`.
        dispatchers: Execution contexts. When omitted, default thread pools are
            created and shut down by `clear()`.
    """

    def __init__(
        self,
        get_users: Callable[[], Result[list[User]]],
        dispatchers: AppDispatchers | None = None,
    ) -> None:
        self._get_users = get_users
        self._owns_dispatchers = dispatchers is None
        self._dispatchers = dispatchers or AppDispatchers.default()
        self._lock = threading.RLock()
        self._state = UsersUiState(is_loading=True)
        self._subscribers: list[tuple[object, StateCallback]] = []
        self._pending: set[Future] = set()
        self._generation = 0
        self._cleared = False

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def current(self) -> UsersUiState:
        with self._lock:
            return self._state

    @property
    def state(self) -> UsersUiState:
        return self.current()

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """
        Register `callback` for every later state replacement.

        Callbacks run in registration order on the thread that publishes.
        Returns a handle that unregisters this subscription; calling it more
        than once is harmless.
        """
        token = object()
        with self._lock:
            if not self._cleared:
                self._subscribers.append((token, callback))

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers = [s for s in self._subscribers if s[0] is not token]

        return unsubscribe

    def _publish(self, new_state: UsersUiState) -> None:
        # Caller holds self._lock.
        self._state = new_state
        for _, callback in list(self._subscribers):
            try:
                callback(new_state)
            except Exception:
                logger.exception("Users state subscriber %r failed", callback)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self) -> None:
        """
        Start a load. Returns immediately; results arrive through subscribers.

        Raises:
            RuntimeError: If called after `clear()`.
        """
        with self._lock:
            if self._cleared:
                raise RuntimeError("state holder has been cleared")
            self._generation += 1
            generation = self._generation
            # Keep the previous users visible while reloading.
            self._publish(dataclasses.replace(self._state, is_loading=True, error_message=None))

            future = self._dispatchers.io.submit(self._get_users)
            self._pending.add(future)
        future.add_done_callback(lambda f: self._on_fetched(generation, f))

    def _on_fetched(self, generation: int, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)
            if future.cancelled():
                return
            exc = future.exception()
            if exc is not None:
                logger.error("Users load %d failed unexpectedly", generation, exc_info=exc)
                return
            if self._is_stale(generation):
                return
            main_future = self._dispatchers.main.submit(self._finish, generation, future.result())
            self._pending.add(main_future)
        main_future.add_done_callback(self._forget)

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)

    def _is_stale(self, generation: int) -> bool:
        if self._cleared or generation != self._generation:
            logger.debug(
                "Discarding users load %d (latest %d, cleared=%s)",
                generation,
                self._generation,
                self._cleared,
            )
            return True
        return False

    def _finish(self, generation: int, result: Result[list[User]]) -> None:
        with self._lock:
            if self._is_stale(generation):
                return
            if isinstance(result, Ok):
                self._publish(UsersUiState(is_loading=False, users=list(result.value)))
            else:
                self._publish(UsersUiState(is_loading=False, error_message=result.message))

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def clear(self) -> None:
        """Cancel outstanding work and drop subscribers. Safe to call repeatedly."""
        with self._lock:
            if self._cleared:
                return
            self._cleared = True
            self._generation += 1
            pending = list(self._pending)
            self._pending.clear()
            self._subscribers.clear()
        for future in pending:
            future.cancel()
        if self._owns_dispatchers:
            self._dispatchers.shutdown()

    @property
    def dispatchers(self) -> AppDispatchers:
        return self._dispatchers

    @property
    def is_cleared(self) -> bool:
        with self._lock:
            return self._cleared

    @property
    def has_pending_work(self) -> bool:
        with self._lock:
            return bool(self._pending)


__all__ = ["UsersStateHolder", "UsersUiState"]
