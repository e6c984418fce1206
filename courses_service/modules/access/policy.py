"""Access policy for every courses RPC.

Reads are open to everyone. Writes on shared content (bookmarks, anchors,
track titles) need a moderator or administrator. User anchors can be
created by any signed-in user and removed by their owner or by an elevated
role. ``decide`` is pure; ``authorize`` is what the services call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ...infrastructure.logging import get_logger
from ..common.exceptions import PermissionDeniedError
from .identity import Anonymous, Authenticated, Caller, Principal

logger = get_logger(__name__)


class Action(str, Enum):
    READ = "read"
    UPDATE_TRACK_TITLE = "update_track_title"
    CREATE_BOOKMARK = "create_bookmark"
    DELETE_BOOKMARK = "delete_bookmark"
    CREATE_ANCHOR = "create_anchor"
    DELETE_ANCHOR = "delete_anchor"
    CREATE_USER_ANCHOR = "create_user_anchor"
    DELETE_USER_ANCHOR = "delete_user_anchor"


@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class Deny:
    reason: str


Decision = Union[Allow, Deny]

ALLOW = Allow()

# What the caller was trying to do, as it reads in a denial message.
_ACTION_PHRASES = {
    Action.UPDATE_TRACK_TITLE: "update tracks",
    Action.CREATE_BOOKMARK: "create bookmarks",
    Action.DELETE_BOOKMARK: "delete bookmarks",
    Action.CREATE_ANCHOR: "create anchors",
    Action.DELETE_ANCHOR: "delete anchors",
    Action.CREATE_USER_ANCHOR: "create user anchors",
    Action.DELETE_USER_ANCHOR: "delete user anchors",
}


def decide(action: Action, principal: Principal, owner: Optional[int] = None) -> Decision:
    """Decide whether ``principal`` may perform ``action``.

    Args:
        action: The operation being attempted
        principal: Anonymous or authenticated caller
        owner: Owning user id of the target row, for owned resources

    Returns:
        ``Allow()`` or ``Deny(reason)``
    """
    if action is Action.READ:
        return ALLOW

    if isinstance(principal, Anonymous):
        return Deny(f"You must be logged in to {_ACTION_PHRASES[action]}.")

    caller = principal.caller

    if action is Action.CREATE_USER_ANCHOR:
        return ALLOW

    if action is Action.DELETE_USER_ANCHOR:
        if caller.role.is_elevated or (owner is not None and caller.id == owner):
            return ALLOW
        return Deny("You may not delete other users' anchors.")

    if caller.role.is_elevated:
        return ALLOW
    return Deny(f"Only moderators may {_ACTION_PHRASES[action]}.")


def authorize(action: Action, principal: Principal, owner: Optional[int] = None) -> Optional[Caller]:
    """Enforce the policy for one operation.

    Returns:
        The authenticated caller, or None for an allowed anonymous read

    Raises:
        PermissionDeniedError: If the policy denies the action
    """
    decision = decide(action, principal, owner)

    if isinstance(decision, Deny):
        caller_id = principal.caller.id if isinstance(principal, Authenticated) else None
        logger.warning(
            f"Denied {action.value}: {decision.reason}",
            extra={"action": action.value, "caller_id": caller_id, "owner": owner},
        )
        raise PermissionDeniedError(decision.reason)

    if isinstance(principal, Authenticated):
        return principal.caller
    return None
