"""Who is calling: an anonymous client or an authenticated user.

Identity is validated upstream; this service only receives the resulting
``{id, role}`` pair, or nothing at all for anonymous traffic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class UserRole(str, Enum):
    STANDARD = "standard"
    MODERATOR = "moderator"
    ADMINISTRATOR = "administrator"

    @property
    def is_elevated(self) -> bool:
        return self in (UserRole.MODERATOR, UserRole.ADMINISTRATOR)


@dataclass(frozen=True)
class Caller:
    id: int
    role: UserRole = UserRole.STANDARD


@dataclass(frozen=True)
class Anonymous:
    """No caller identity came with the request."""


@dataclass(frozen=True)
class Authenticated:
    caller: Caller


Principal = Union[Anonymous, Authenticated]

ANONYMOUS = Anonymous()
