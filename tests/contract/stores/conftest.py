"""Fixtures shared by the store contract tests.

Every test runs once per backend through the parametrized ``uow`` fixture.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.builders import make_user

if TYPE_CHECKING:
    from bloglist.domain.model import User
    from bloglist.interfaces.unit_of_work import AbstractUnitOfWork


@pytest.fixture
def owner(uow: AbstractUnitOfWork) -> User:
    """A committed user that can own blogs and sessions."""
    user = make_user(1, "owner")
    with uow:
        uow.users.add(user)
        uow.commit()
    return user
