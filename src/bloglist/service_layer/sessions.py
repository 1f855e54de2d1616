"""Issuing, resolving and revoking session credentials."""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from bloglist.domain.errors import InvalidSessionError
from bloglist.domain.model import Session
from bloglist.interfaces.errors import DuplicateTokenError
from bloglist.interfaces.id_generator import IdGenerator
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

MAX_TOKEN_ATTEMPTS = 5


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def issue(  # pylint: disable=too-many-arguments
    uow: AbstractUnitOfWork,
    user_id: str,
    token_generator: IdGenerator,
    *,
    clock: Clock,
    ttl_seconds: int,
) -> Session:
    """Open a new session for `user_id`.

    A fresh token is drawn until the store accepts one. The store rejects
    duplicates, so two sessions can never share a token even when another
    writer claims the same token between drawing and storing it.

    Raises:
        DuplicateTokenError: If no unused token was found after a few attempts.
    """
    expires_at = clock() + timedelta(seconds=ttl_seconds)
    for _ in range(MAX_TOKEN_ATTEMPTS):
        token = token_generator.new_id()
        session = Session(token=token, user_id=user_id, expires_at=expires_at)
        try:
            uow.sessions.add(session)
        except DuplicateTokenError:
            logger.warning("Session token collision; drawing a new token")
            continue
        return session
    raise DuplicateTokenError()


def resolve(uow: AbstractUnitOfWork, token: str | None, *, clock: Clock) -> str:
    """Return the id of the user a session token belongs to.

    Raises:
        InvalidSessionError: If the token is unknown, revoked or expired.
    """
    if not token or (session := uow.sessions.get(token)) is None:
        raise InvalidSessionError()
    if session.is_expired(clock()):
        logger.debug("Rejected expired session of user %s", session.user_id)
        raise InvalidSessionError()
    return session.user_id


def revoke(uow: AbstractUnitOfWork, token: str) -> bool:
    """End a session. Returns False if there was nothing to end."""
    return uow.sessions.remove(token)
