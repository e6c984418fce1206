"""Batch retrieval and parent grouping for one-to-many lookups.

The aggregation layer resolves a field for N parent objects at once. These
helpers answer such a batch with a single query: either a flat list of the
rows whose ids were asked for, or a mapping from parent id to that parent's
children.
"""

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, Dict, List, TypeVar

from fastcrud import FastCRUD
from sqlalchemy import Row
from sqlalchemy.ext.asyncio import AsyncSession

from .store import fetch_all

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def group_by_parent(rows: Iterable[Any], key: Callable[[Any], K], build: Callable[[Any], T]) -> Dict[K, List[T]]:
    """Fold rows into ``{parent_key: [record, ...]}``.

    Records keep the order in which the rows arrive. Parents without rows
    never appear as keys; callers treat a missing key as "no children".

    Args:
        rows: Child rows, in store order
        key: Extracts the parent key from a row
        build: Converts a row into the record stored in the mapping
    """
    grouped: Dict[K, List[T]] = {}
    for row in rows:
        grouped.setdefault(key(row), []).append(build(row))
    return grouped


async def fetch_page(
    db: AsyncSession,
    crud: FastCRUD,
    limit: int,
    offset: int,
    **filters: Any,
) -> Sequence[Row]:
    """Fetch one LIMIT/OFFSET window of rows matching ``filters``, ordered by id."""
    stmt = await crud.select(sort_columns="id", **filters)
    return await fetch_all(db, stmt.offset(offset).limit(limit))


async def fetch_by_ids(db: AsyncSession, crud: FastCRUD, ids: Iterable[int]) -> Sequence[Row]:
    """Fetch the rows whose primary key is in ``ids``.

    Unknown ids are silently dropped, so the result may be shorter than the
    request. Row order is whatever the store returns.
    """
    stmt = await crud.select()
    return await fetch_all(db, stmt.where(crud.model.id.in_(list(ids))))


async def fetch_grouped_by_parent(
    db: AsyncSession,
    crud: FastCRUD,
    parent_column: str,
    parent_ids: Iterable[int],
    build: Callable[[Row], T],
) -> Dict[int, List[T]]:
    """Fetch all children of ``parent_ids`` in one query and group them by parent.

    Args:
        db: Database session
        crud: FastCRUD instance of the child model
        parent_column: Name of the child's foreign-key column
        parent_ids: Parent identifiers to resolve
        build: Converts a child row into the record placed in the mapping

    Returns:
        Mapping of parent id to its children; parents without children are absent
    """
    column = getattr(crud.model, parent_column)
    stmt = await crud.select()
    rows = await fetch_all(db, stmt.where(column.in_(list(parent_ids))))
    return group_by_parent(rows, key=lambda row: getattr(row, parent_column), build=build)
