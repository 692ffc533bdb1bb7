"""AccessGuard — one actor's privilege, bound for the duration of a request."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from permission_engine import api, evaluation
from permission_engine.permissions.base import Permission
from permission_engine.permits.base import Permit
from permission_engine.privileges.cached import CachedPrivilege

if TYPE_CHECKING:
    from permission_engine.approval import Approval
    from permission_engine.privileges.base import Privilege
    from permission_engine.role import Role

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound="Role")


class AccessGuard:
    """Checks permissions and permits against a single actor-bound privilege.

    Build one once the actor is known (typically right after
    authentication) and reuse it for every check of that request.  The
    privilege is wrapped in a :class:`CachedPrivilege` so that a role asked
    about by several permissions is only resolved once.

    Parameters:
        privilege: The actor's privilege.
        cache:     Wrap *privilege* in a :class:`CachedPrivilege`.  Pass
                   ``False`` when the privilege must be consulted every
                   time or is already cached.
    """

    def __init__(self, privilege: Privilege, *, cache: bool = True) -> None:
        self._privilege: Privilege = CachedPrivilege(privilege) if cache else privilege

    @property
    def privilege(self) -> Privilege:
        return self._privilege

    # ── evaluation ───────────────────────────────────────────

    async def check(self, evaluator: Permission[T] | Permit[T], target: T) -> Approval:
        """Return the decisive approval of *evaluator* for *target*."""
        if not isinstance(evaluator, Permission | Permit):
            raise TypeError(f"Expected a Permission or Permit, got {type(evaluator).__name__}")

        approval = await api.check(evaluator, self._privilege, target)
        if not approval.value:
            logger.debug("%r denied access to %r: %r", evaluator, target, approval.error)
        return approval

    async def test(self, evaluator: Permission[T] | Permit[T], target: T) -> bool:
        return (await self.check(evaluator, target)).value

    async def require(self, evaluator: Permission[T] | Permit[T], target: T) -> T:
        """Return *target* if access is granted, raise the denial otherwise."""
        evaluation.raise_denied(await self.check(evaluator, target))
        return target

    # ── single roles ─────────────────────────────────────────

    async def check_role(self, role: Role) -> Approval:
        return await evaluation.check_privilege(self._privilege, role)

    async def test_role(self, role: Role) -> bool:
        return (await self.check_role(role)).value

    async def require_role(self, role: R) -> R:
        return await evaluation.require_privilege(self._privilege, role)

    def __repr__(self) -> str:
        return f"AccessGuard({self._privilege!r})"
