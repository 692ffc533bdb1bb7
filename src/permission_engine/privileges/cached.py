"""CachedPrivilege — memoizes another privilege's answers per role."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from permission_engine.privileges.base import Privilege

if TYPE_CHECKING:
    from permission_engine.approval import Approval
    from permission_engine.role import Role

logger = logging.getLogger(__name__)


class CachedPrivilege(Privilege):
    """Wraps a privilege and remembers the approvals it gave for each role.

    Roles are matched by value equality, so two equal role instances share
    one entry.  Entries are never evicted and live as long as the wrapper,
    which is normally scoped to one actor's request (see
    :class:`~permission_engine.guard.AccessGuard`).

    Concurrent evaluations sharing one wrapper may both miss and both call
    the wrapped privilege for the same role.  The first result stored wins
    and is returned to every caller, so memoization is at-least-once, not
    exactly-once.

    Roles that cannot be hashed (including frozen dataclasses holding a
    mutable field) are kept in a side list and matched with ``==``.

    A role's ``error`` takes part in its equality.  Roles rebuilt per
    evaluation only share an entry when their errors compare equal, which
    holds for :class:`~permission_engine.exceptions.Denial` (compared by
    reason) but not for most other exception types (compared by identity).
    """

    def __init__(self, privilege: Privilege) -> None:
        self._privilege = privilege
        self._cache: dict[Role, list[Approval]] = {}
        self._unhashable: list[tuple[Role, list[Approval]]] = []

    @property
    def cache(self) -> dict[Role, list[Approval]]:
        """Snapshot of the memoized hashable roles."""
        return dict(self._cache)

    def _lookup(self, role: Role) -> list[Approval] | None:
        if _is_hashable(role):
            return self._cache.get(role)
        for cached_role, approvals in self._unhashable:
            if cached_role == role:
                return approvals
        return None

    def _store(self, role: Role, approvals: list[Approval]) -> list[Approval]:
        if _is_hashable(role):
            return self._cache.setdefault(role, approvals)
        existing = self._lookup(role)
        if existing is not None:
            return existing
        self._unhashable.append((role, approvals))
        return approvals

    async def __call__(self, role: Role) -> list[Approval]:
        cached = self._lookup(role)
        if cached is not None:
            logger.debug("Cache hit for %r", role)
            return cached

        logger.debug("Cache miss for %r", role)
        approvals = await self._privilege(role)
        return self._store(role, approvals)

    def __repr__(self) -> str:
        return f"CachedPrivilege({self._privilege!r})"


def _is_hashable(role: Role) -> bool:
    try:
        hash(role)
    except TypeError:
        return False
    return True
