"""Errors raised by the ordering context.

``ValidationError`` and ``ObjectNotFoundError`` come from ``protean.exceptions``;
only storage failures are specific to this package.

Route handlers translate them into HTTP responses:
``ValidationError`` → 400 (409 for lifecycle transitions),
``ObjectNotFoundError`` → 404, ``StorageError`` → 500.
"""

from protean.exceptions import DatabaseError


class StorageError(DatabaseError):
    """The order store failed (constraint violation, driver or connection error)."""


def summarize(messages: dict[str, list[str]]) -> str:
    """One-line rendering of a ``ValidationError.messages`` mapping."""
    return "; ".join(f"{field}: {', '.join(problems)}" for field, problems in messages.items())
