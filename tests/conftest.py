"""Shared test fixtures."""

import pytest

from entities import Account, Entity, Grant, account_privilege
from permission_engine import Denial, Role


@pytest.fixture
def admin():
    return Account(id="account.1", is_admin=True)


@pytest.fixture
def member():
    return Account(id="account.2")


@pytest.fixture
def suspended():
    return Account(id="account.3", is_suspended=True, is_admin=True)


@pytest.fixture
def private_entity(admin):
    """Private, owned by the admin, no grants."""
    return Entity(id="entity.1", owner_id=admin.id, is_public=False)


@pytest.fixture
def public_entity(member):
    """Public, owned by the member, no grants."""
    return Entity(id="entity.2", owner_id=member.id, is_public=True)


@pytest.fixture
def shared_entity(admin, member):
    """Private, owned by the admin, the member holds a READ grant."""
    return Entity(
        id="entity.3",
        owner_id=admin.id,
        is_public=False,
        grants=(Grant(owner_id=member.id, value="READ"),),
    )


@pytest.fixture
def admin_privilege(admin):
    return account_privilege(admin)


@pytest.fixture
def member_privilege(member):
    return account_privilege(member)


@pytest.fixture
def role():
    return Role(error=Denial("role_error"))
