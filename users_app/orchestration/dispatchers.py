"""
Execution contexts used by the state holder.

`main` publishes state, `io` runs network calls and decoding. They are passed
in explicitly so tests can run everything inline.
"""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable


class ImmediateExecutor(Executor):
    """Runs each submitted callable on the calling thread and returns a finished Future."""

    def __init__(self) -> None:
        self._shutdown = False
        self._lock = threading.Lock()

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Future:
        with self._lock:
            if self._shutdown:
                raise RuntimeError("cannot schedule new futures after shutdown")
        future: Future = Future()
        if not future.set_running_or_notify_cancel():
            return future
        try:
            result = fn(*args, **kwargs)
        except BaseException as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future

    def shutdown(self, wait: bool = True, *, cancel_futures: bool = False) -> None:
        with self._lock:
            self._shutdown = True


@dataclass(frozen=True)
class AppDispatchers:
    """Named execution contexts. `owned` marks executors created here and closed by `shutdown`."""

    main: Executor
    io: Executor
    owned: bool = False

    @classmethod
    def default(cls, io_workers: int = 4) -> "AppDispatchers":
        return cls(
            main=ThreadPoolExecutor(max_workers=1, thread_name_prefix="users-main"),
            io=ThreadPoolExecutor(max_workers=io_workers, thread_name_prefix="users-io"),
            owned=True,
        )

    @classmethod
    def immediate(cls) -> "AppDispatchers":
        return cls(main=ImmediateExecutor(), io=ImmediateExecutor(), owned=True)

    def shutdown(self) -> None:
        """Stop owned executors without waiting; queued work is cancelled."""
        if not self.owned:
            return
        self.io.shutdown(wait=False, cancel_futures=True)
        self.main.shutdown(wait=False, cancel_futures=True)


__all__ = ["AppDispatchers", "ImmediateExecutor"]
