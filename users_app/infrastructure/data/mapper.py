"""
Validate wire records and map them to domain users.

`validate` reports why a record was rejected; `to_domain` is the plain
accept-or-drop form used by the repository. Neither raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from users_app.domains.user import MAX_NAME_LENGTH, User
from users_app.infrastructure.data.dto import UserDto

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$")

REASON_NON_POSITIVE_ID = "non-positive id"
REASON_BLANK_NAME = "blank name"
REASON_NAME_TOO_LONG = "name too long"
REASON_INVALID_EMAIL = "invalid email"


@dataclass(frozen=True, slots=True)
class Accepted:
    user: User


@dataclass(frozen=True, slots=True)
class Rejected:
    reason: str


MappingOutcome = Accepted | Rejected


def validate(dto: UserDto) -> MappingOutcome:
    """Apply the validation rules in order; the first failing rule wins."""
    if dto.id <= 0:
        return Rejected(REASON_NON_POSITIVE_ID)
    if not dto.name.strip():
        return Rejected(REASON_BLANK_NAME)
    if len(dto.name) > MAX_NAME_LENGTH:
        return Rejected(REASON_NAME_TOO_LONG)
    # fullmatch: "$" alone would accept a trailing newline
    if not EMAIL_PATTERN.fullmatch(dto.email):
        return Rejected(REASON_INVALID_EMAIL)

    return Accepted(
        User(
            id=dto.id,
            name=dto.name.strip()[:MAX_NAME_LENGTH],
            email=dto.email.lower().strip(),
        )
    )


def to_domain(dto: UserDto) -> User | None:
    """Return the mapped user, or None if the record is invalid."""
    outcome = validate(dto)
    if isinstance(outcome, Accepted):
        return outcome.user
    return None


__all__ = [
    "Accepted",
    "EMAIL_PATTERN",
    "MappingOutcome",
    "Rejected",
    "to_domain",
    "validate",
]
