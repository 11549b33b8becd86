"""
Wire shapes for the users endpoint and their decoding.

Decoding is forward compatible (unknown keys are ignored) and lenient about
scalar tokens: quoted integers are accepted for ids, and any non-null scalar
is accepted for string fields.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

_INT_TOKEN = re.compile(r"^[+-]?\d+$")
_REQUIRED_FIELDS = ("id", "name", "email")


class PayloadFormatError(ValueError):
    """Raised when a response body does not have the expected shape."""


@dataclass(frozen=True, slots=True)
class UserDto:
    """A user record as received. Untrusted; never handed to the UI."""

    id: int
    name: str
    email: str


def _coerce_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise PayloadFormatError(f"id must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and _INT_TOKEN.match(raw.strip()):
        return int(raw.strip())
    raise PayloadFormatError(f"id must be an integer, got {raw!r}")


def _coerce_str(field: str, raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bool, int, float)):
        # Lenient: bare scalars stand in for strings.
        return json.dumps(raw) if isinstance(raw, bool) else str(raw)
    raise PayloadFormatError(f"{field} must be a string, got {type(raw).__name__}")


def decode_user(record: Any) -> UserDto:
    """Decode one JSON object into a `UserDto`."""
    if not isinstance(record, dict):
        raise PayloadFormatError(f"expected an object, got {type(record).__name__}")
    missing = [k for k in _REQUIRED_FIELDS if k not in record]
    if missing:
        raise PayloadFormatError(f"missing field(s): {', '.join(missing)}")
    return UserDto(
        id=_coerce_id(record["id"]),
        name=_coerce_str("name", record["name"]),
        email=_coerce_str("email", record["email"]),
    )


def decode_users(payload: Any) -> list[UserDto]:
    """
    Decode a parsed JSON body into DTOs.

    Args:
        payload: Result of `json.loads` on the response body.

    Returns:
        DTOs in the order received.

    Raises:
        PayloadFormatError: If the body is not a list of user objects.
    """
    if not isinstance(payload, list):
        raise PayloadFormatError(f"expected a JSON array, got {type(payload).__name__}")
    return [decode_user(record) for record in payload]


def parse_users_body(body: bytes | str) -> list[UserDto]:
    """Parse raw response text (non-strict JSON) and decode it."""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise PayloadFormatError(f"body is not valid UTF-8: {e}") from e
    try:
        payload = json.loads(body, strict=False)
    except json.JSONDecodeError as e:
        raise PayloadFormatError(f"invalid JSON: {e}") from e
    return decode_users(payload)


__all__ = ["PayloadFormatError", "UserDto", "decode_user", "decode_users", "parse_users_body"]
