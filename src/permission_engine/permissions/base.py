"""Permission ABC — the top-level orchestrator of an authorization decision."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from permission_engine import evaluation

if TYPE_CHECKING:
    from permission_engine.approval import Approval
    from permission_engine.privileges.base import Privilege

T = TypeVar("T")


class Permission(ABC, Generic[T]):
    """Base class for every permission.

    A permission decides whether the actor behind a :class:`Privilege` may
    access a target.  It either resolves the target's roles and asks the
    privilege about each (:class:`PermitPermission`, :class:`RolePermission`)
    or applies its own logic directly (:class:`ResultPermission`,
    :class:`DynamicPermission`), and composes with :class:`EveryPermission`
    and :class:`SomePermission`.
    """

    @abstractmethod
    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        """Evaluate the permission for *target* on behalf of *privilege*."""
        ...

    # ── protocol ──────────────────────────────────────────────

    async def check(self, privilege: Privilege, target: T) -> Approval:
        return await evaluation.check_permission(self, privilege, target)

    async def test(self, privilege: Privilege, target: T) -> bool:
        return await evaluation.test_permission(self, privilege, target)

    async def require(self, privilege: Privilege, target: T) -> T:
        return await evaluation.require_permission(self, privilege, target)
