"""Constant permits — fixed requirements regardless of the target."""

from __future__ import annotations

from typing import Any

from permission_engine.permits.base import Permit
from permission_engine.role import Role


class EmptyPermit(Permit[Any]):
    """Requires nothing.  Checking it denies with ``Denial.no_checklist()``."""

    async def __call__(self, target: Any) -> list[Role]:
        return []

    def __repr__(self) -> str:
        return "EmptyPermit()"


class ErrorPermit(Permit[Any]):
    """Requires a single trivial role whose error is fixed.

    Useful as a placeholder requirement that only a privilege granting
    everything (an administrator, say) can satisfy.
    """

    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error

    async def __call__(self, target: Any) -> list[Role]:
        return [Role(error=self.error)]

    def __repr__(self) -> str:
        return f"ErrorPermit({self.error!r})"


class RolesPermit(Permit[Any]):
    """Always requires the given roles."""

    def __init__(self, *roles: Role) -> None:
        self._roles = list(roles)

    async def __call__(self, target: Any) -> list[Role]:
        return list(self._roles)

    def __repr__(self) -> str:
        return f"RolesPermit({', '.join(map(repr, self._roles))})"
