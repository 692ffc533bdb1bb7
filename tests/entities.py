"""A small host application used by the tests: accounts, entities and grants."""

from __future__ import annotations

from dataclasses import dataclass

from permission_engine import (
    Approval,
    Denial,
    DynamicPermission,
    DynamicPermit,
    DynamicPrivilege,
    FunctionPrivilege,
    PermitPermission,
    Privilege,
    ResultPermission,
    ResultPrivilege,
    Role,
    RolesPermit,
    SomePermission,
    StandardPermits,
)

# ── model ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Grant:
    owner_id: str
    value: str


@dataclass(frozen=True)
class Entity:
    id: str
    owner_id: str
    is_public: bool
    grants: tuple[Grant, ...] = ()


@dataclass(frozen=True)
class Account:
    id: str
    is_suspended: bool = False
    is_admin: bool = False


@dataclass
class Draft:
    author_id: str
    tags: list[str]


# ── roles ────────────────────────────────────────────────────


@dataclass(frozen=True)
class GrantRole(Role):
    value: str
    entity: Entity


@dataclass(frozen=True)
class OwnershipRole(Role):
    entity: Entity


@dataclass(frozen=True)
class DraftRole(Role):
    draft: Draft


# ── privileges ───────────────────────────────────────────────


def account_privilege(account: Account) -> Privilege:
    def decide(role: Role) -> Privilege:
        if account.is_suspended:
            return ResultPrivilege(False, Denial("account_suspended"))
        if account.is_admin:
            return ResultPrivilege(True)
        if isinstance(role, GrantRole):
            return ResultPrivilege(
                any(g.owner_id == account.id and g.value == role.value for g in role.entity.grants)
            )
        if isinstance(role, OwnershipRole):
            return ResultPrivilege(role.entity.owner_id == account.id)
        return ResultPrivilege(False)

    return DynamicPrivilege(decide)


def owner_only_privilege(account: Account) -> Privilege:
    """Answers ownership roles only; every other role is left unanswered."""

    def decide(role: Role) -> list[Approval]:
        if isinstance(role, OwnershipRole):
            return [Approval(role.entity.owner_id == account.id, role.error)]
        return []

    return FunctionPrivilege(decide)


# ── permits / permissions ────────────────────────────────────


class EntityPermits(StandardPermits[Entity]):
    @property
    def read(self):
        return DynamicPermit(
            lambda e: RolesPermit(GrantRole("READ", e, error=Denial("entity_read")))
        )

    @property
    def write(self):
        return DynamicPermit(
            lambda e: RolesPermit(GrantRole("WRITE", e, error=Denial("entity_write")))
        )

    @property
    def owner(self):
        return DynamicPermit(lambda e: RolesPermit(OwnershipRole(e, error=Denial("entity_owner"))))


permits = EntityPermits()

PUBLIC = DynamicPermission(
    lambda _, e: ResultPermission(e.is_public, Denial("entity_not_public"))
)

READ_OWNER = SomePermission(PermitPermission(permits.owner))
READ_GRANTED = SomePermission(PermitPermission(permits.read), READ_OWNER)
READ_ANONYMOUS = SomePermission(PUBLIC, READ_GRANTED)

WRITE_OWNER = SomePermission(PermitPermission(permits.owner))
WRITE_GRANTED = SomePermission(PermitPermission(permits.write), WRITE_OWNER)
