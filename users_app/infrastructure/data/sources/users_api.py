"""
HTTP client for the users endpoint.

Every failure is classified into one of three fixed user-facing messages. The
technical cause is logged and never returned to the caller. No retries: one
call to `fetch_users` makes exactly one HTTP request.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

import requests
from urllib3.exceptions import ProtocolError, ReadTimeoutError

from users_app.domains.result import Err, Ok, Result
from users_app.infrastructure.data.dto import PayloadFormatError, UserDto, parse_users_body
from users_app.utils.logger import get_logger

logger = get_logger()

MSG_TIMEOUT = "Request timed out. Check connection."
MSG_DATA_FORMAT = "Data format error."
MSG_NETWORK = "Network error. Check connection."

USER_AGENT = "users-app/0.1"
_CHUNK_SIZE = 8192


@dataclass(frozen=True, slots=True)
class HttpTimeouts:
    """Timeouts in seconds. `request` bounds the whole exchange including the body."""

    connect: float = 10.0
    request: float = 30.0
    socket: float = 30.0


class RequestDeadlineExceeded(requests.Timeout):
    """The overall request deadline passed while the body was still arriving."""


class UsersApi(Protocol):
    def fetch_users(self) -> Result[list[UserDto]]:
        ...


def create_http_session() -> requests.Session:
    """Session preconfigured for the JSON users API."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json", "User-Agent": USER_AGENT})
    return session


def _is_read_timeout(exc: BaseException) -> bool:
    # requests reports a stalled body read as ConnectionError(ReadTimeoutError(...)).
    if isinstance(exc, ReadTimeoutError):
        return True
    return isinstance(exc, requests.ConnectionError) and bool(exc.args) and isinstance(exc.args[0], ReadTimeoutError)


def classify_failure(exc: BaseException) -> str:
    """Map a technical failure to its user-facing message. First match wins."""
    if isinstance(exc, requests.Timeout) or _is_read_timeout(exc):
        return MSG_TIMEOUT
    if isinstance(exc, PayloadFormatError):
        return MSG_DATA_FORMAT
    return MSG_NETWORK


def _set_read_timeout(raw: object, seconds: float) -> None:
    """Bound the next socket read on an urllib3 response, if it still holds a socket."""
    sock = getattr(getattr(raw, "connection", None), "sock", None)
    if sock is not None:
        sock.settimeout(seconds)


class UsersApiClient:
    """
    Fetch `GET {base_url}/users` and decode it into `UserDto` records.

    Args:
        session: requests session (see `create_http_session`). Injected so tests
            can substitute a mock.
        base_url: API root; a trailing "/" is ignored.
        timeouts: connect/socket go to requests, request is enforced here.
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str,
        timeouts: HttpTimeouts | None = None,
    ) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeouts = timeouts or HttpTimeouts()

    @property
    def users_url(self) -> str:
        return f"{self._base_url}/users"

    def _deadline_exceeded(self) -> RequestDeadlineExceeded:
        return RequestDeadlineExceeded(f"request exceeded {self._timeouts.request}s while reading body")

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """
        Read the body with `read1`, which returns whatever bytes have arrived, so
        a slowly trickling server cannot hold a read past the deadline. Each read
        waits at most min(socket timeout, time left).
        """
        raw = response.raw
        chunks: list[bytes] = []
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise self._deadline_exceeded()
            _set_read_timeout(raw, min(self._timeouts.socket, remaining))
            try:
                chunk = raw.read1(_CHUNK_SIZE, decode_content=True)
            except ReadTimeoutError as e:
                if time.monotonic() >= deadline:
                    raise self._deadline_exceeded() from e
                raise requests.ReadTimeout(e) from e
            except requests.ConnectionError as e:
                if _is_read_timeout(e):
                    raise requests.ReadTimeout(e) from e
                raise
            except ProtocolError as e:
                raise requests.ConnectionError(e) from e
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def _get_body(self) -> bytes:
        deadline = time.monotonic() + self._timeouts.request
        response = self._session.get(
            self.users_url,
            headers={"Accept": "application/json"},
            timeout=(self._timeouts.connect, self._timeouts.socket),
            stream=True,
        )
        try:
            response.raise_for_status()
            return self._read_body(response, deadline)
        finally:
            response.close()

    def fetch_users(self) -> Result[list[UserDto]]:
        """
        Fetch and decode the user list.

        Returns:
            Ok(list of UserDto) or Err(message) with one of MSG_TIMEOUT,
            MSG_DATA_FORMAT, MSG_NETWORK. `Err.cause` is always None.
        """
        try:
            body = self._get_body()
            dtos = parse_users_body(body)
        except Exception as e:
            message = classify_failure(e)
            logger.warning("Users fetch from %s failed (%s): %r", self.users_url, message, e)
            return Err(message)

        logger.info("Fetched %d user records from %s", len(dtos), self.users_url)
        return Ok(dtos)


__all__ = [
    "HttpTimeouts",
    "MSG_DATA_FORMAT",
    "MSG_NETWORK",
    "MSG_TIMEOUT",
    "RequestDeadlineExceeded",
    "UsersApi",
    "UsersApiClient",
    "classify_failure",
    "create_http_session",
]
