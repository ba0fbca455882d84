"""Request-scoped principal used by permission-aware repositories."""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from uuid import UUID

_current_principal: ContextVar[UUID | None] = ContextVar(
    "current_principal", default=None
)


def get_current_principal() -> UUID | None:
    """Return the ID of the user acting in the current context, if any."""
    return _current_principal.get()


def set_current_principal(user_id: UUID | None) -> None:
    """Bind the acting user for the rest of the current context."""
    _current_principal.set(user_id)


@contextmanager
def acting_as(user_id: UUID | None) -> Iterator[None]:
    """Temporarily run as ``user_id``, restoring the previous principal on exit."""
    token = _current_principal.set(user_id)
    try:
        yield
    finally:
        _current_principal.reset(token)
