"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class PermissionDeniedError(DomainError):
    """Raised when the caller may not perform an action.

    Covers both an anonymous caller where one is required and a caller
    whose role or ownership does not satisfy the access rule. The message
    is the human-readable reason and is returned to the client as is.
    """

    pass


class StoreFailureError(DomainError):
    """Raised when the relational store could not complete a statement.

    Connection errors, constraint violations and single-row fetches that
    matched nothing all surface as this error. The originating
    ``SQLAlchemyError`` is kept as ``__cause__``; clients only ever see an
    opaque internal failure.
    """

    pass
