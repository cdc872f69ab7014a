from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from testtally.outcomes import UsageError


if TYPE_CHECKING:
    from testtally.session import RunSession


logger = logging.getLogger(__name__)

SESSION_CONTEXT: ContextVar[RunSession | None] = ContextVar("session_context", default=None)


def current_session() -> RunSession | None:
    """Get the active session, or None if ``tests_init`` has not run."""
    return SESSION_CONTEXT.get()


def get_session() -> RunSession:
    """Get the active session.

    Raises:
        UsageError: If no session has been initialized.
    """
    session = SESSION_CONTEXT.get()
    if session is None:
        message = "No test session is active: call tests_init() before any other harness call"
        logger.error(message)
        raise UsageError(message)
    return session


def set_session(session: RunSession | None) -> None:
    SESSION_CONTEXT.set(session)


@contextmanager
def session_scope(session: RunSession) -> Iterator[RunSession]:
    """Temporarily make ``session`` the active session for the ``with`` block.

    Parameters
    ----------
    session : RunSession
        The session the module-level API should operate on.
    """
    token = SESSION_CONTEXT.set(session)
    try:
        yield session
    finally:
        SESSION_CONTEXT.reset(token)
