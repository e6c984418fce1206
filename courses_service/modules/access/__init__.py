"""Caller identity and the access policy shared by every RPC."""

from .identity import ANONYMOUS, Anonymous, Authenticated, Caller, Principal, UserRole
from .policy import Action, Allow, Deny, authorize, decide

__all__ = [
    "ANONYMOUS",
    "Action",
    "Allow",
    "Anonymous",
    "Authenticated",
    "Caller",
    "Deny",
    "Principal",
    "UserRole",
    "authorize",
    "decide",
]
