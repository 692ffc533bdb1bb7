"""Permit ABC — what a target requires before it can be accessed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from permission_engine import evaluation

if TYPE_CHECKING:
    from permission_engine.approval import Approval
    from permission_engine.privileges.base import Privilege
    from permission_engine.role import Role

T = TypeVar("T")


class Permit(ABC, Generic[T]):
    """Base class for every permit.

    A permit resolves the roles a target requires.  It knows nothing about
    the actor: pairing it with a :class:`Privilege` (through ``check`` or a
    :class:`~permission_engine.permissions.PermitPermission`) is what turns
    requirements into a verdict.
    """

    @abstractmethod
    async def __call__(self, target: T) -> list[Role]:
        """Return the roles *target* requires, in evaluation order."""
        ...

    # ── protocol ──────────────────────────────────────────────

    async def check(self, privilege: Privilege, target: T) -> Approval:
        return await evaluation.check_permit(self, privilege, target)

    async def test(self, privilege: Privilege, target: T) -> bool:
        return await evaluation.test_permit(self, privilege, target)

    async def require(self, privilege: Privilege, target: T) -> T:
        return await evaluation.require_permit(self, privilege, target)
