"""Wire shape of the caller identity carried by mutating requests."""

from typing import Optional

from pydantic import BaseModel, Field

from .identity import ANONYMOUS, Authenticated, Caller, Principal, UserRole


class ActiveUser(BaseModel):
    """Pre-validated identity of the user issuing the request."""

    id: int = Field(description="User id as issued by the identity service")
    role: UserRole = Field(default=UserRole.STANDARD, description="Role of the user")

    def to_caller(self) -> Caller:
        return Caller(id=self.id, role=self.role)


def principal_from(active_user: Optional[ActiveUser]) -> Principal:
    """Turn the optional wire identity into an explicit principal."""
    if active_user is None:
        return ANONYMOUS
    return Authenticated(active_user.to_caller())
