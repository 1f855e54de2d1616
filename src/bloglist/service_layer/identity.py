"""Registration and authentication of users.

These helpers operate on an already-entered unit of work; committing is the
caller's job.
"""

import logging

from bloglist.domain.errors import InvalidCredentialsError
from bloglist.domain.model import User, validate_registration
from bloglist.interfaces.id_generator import IdGenerator
from bloglist.interfaces.password_hasher import PasswordHasher
from bloglist.interfaces.unit_of_work import AbstractUnitOfWork

logger = logging.getLogger(__name__)


def register(  # pylint: disable=too-many-arguments
    uow: AbstractUnitOfWork,
    hasher: PasswordHasher,
    id_generator: IdGenerator,
    *,
    name: str,
    username: str,
    secret: str,
) -> User:
    """Create and store a new user.

    Raises:
        ValidationError: If the inputs break a registration rule.
        DuplicateUsernameError: If the username is already registered.
    """
    name, username = validate_registration(name, username, secret)
    user = User(
        user_id=id_generator.new_id(),
        name=name,
        username=username,
        secret_hash=hasher.hash(secret),
    )
    uow.users.add(user)
    return user


def authenticate(
    uow: AbstractUnitOfWork, hasher: PasswordHasher, username: str, secret: str
) -> User:
    """Return the user identified by `username` and `secret`.

    Raises:
        InvalidCredentialsError: If the username is unknown or the secret is
            wrong. Both cases are indistinguishable to the caller.
    """
    user = uow.users.get_by_username((username or "").strip())
    if user is None or not hasher.verify(user.secret_hash, secret or ""):
        logger.info("Failed login attempt for username %r", username)
        raise InvalidCredentialsError()
    return user
