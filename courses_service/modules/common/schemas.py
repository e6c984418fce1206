"""Request and response shapes shared by several RPCs."""

from typing import Annotated, List

from pydantic import BaseModel, Field

from .constants import DEFAULT_PAGE_LIMIT


class PageRequest(BaseModel):
    """Pagination window for parent-scoped list reads."""

    limit: Annotated[int, Field(ge=0, description="Maximum number of rows to return")] = DEFAULT_PAGE_LIMIT
    offset: Annotated[int, Field(ge=0, description="Number of rows to skip")] = 0


class IdsRequest(BaseModel):
    """Batch lookup request; unknown ids are ignored."""

    ids: List[int] = Field(default_factory=list, description="Identifiers to resolve")


class DeleteResponse(BaseModel):
    success: bool
