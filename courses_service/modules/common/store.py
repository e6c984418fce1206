"""Single-statement access to the relational store.

Every RPC issues its statements through these helpers so that driver,
connection and constraint errors all surface as ``StoreFailureError``
and a failed write never leaves a half-open transaction behind.
"""

from typing import Any, Sequence

from sqlalchemy import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Executable

from .exceptions import StoreFailureError


async def fetch_all(db: AsyncSession, stmt: Executable) -> Sequence[Row]:
    """Run a read statement and return every row, in store order."""
    try:
        result = await db.execute(stmt)
        return result.fetchall()
    except SQLAlchemyError as exc:
        raise StoreFailureError(f"Read failed: {exc.__class__.__name__}: {exc}") from exc


async def fetch_scalar_one(db: AsyncSession, stmt: Executable) -> Any:
    """Run a read statement that must match exactly one row.

    Raises:
        StoreFailureError: If the statement fails or matches zero or many rows.
    """
    try:
        result = await db.execute(stmt)
        return result.scalar_one()
    except SQLAlchemyError as exc:
        raise StoreFailureError(f"Single-row read failed: {exc.__class__.__name__}: {exc}") from exc


async def write_returning_one(db: AsyncSession, stmt: Executable) -> Row:
    """Run a write with ``RETURNING`` that must affect exactly one row, then commit.

    Raises:
        StoreFailureError: If the write fails, violates a constraint or
            affects no row. The session is rolled back first.
    """
    try:
        result = await db.execute(stmt)
        row = result.one()
        await db.commit()
        return row
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreFailureError(f"Write failed: {exc.__class__.__name__}: {exc}") from exc


async def write(db: AsyncSession, stmt: Executable) -> int:
    """Run a write without ``RETURNING`` and commit.

    Returns:
        Number of rows the statement affected.
    """
    try:
        result = await db.execute(stmt)
        affected = result.rowcount
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreFailureError(f"Write failed: {exc.__class__.__name__}: {exc}") from exc

    return affected
