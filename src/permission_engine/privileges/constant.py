"""Constant privileges — fixed answers that ignore who is asking."""

from __future__ import annotations

from typing import TYPE_CHECKING

from permission_engine.approval import Approval
from permission_engine.privileges.base import Privilege

if TYPE_CHECKING:
    from permission_engine.role import Role


class EmptyPrivilege(Privilege):
    """Gives no answer at all, for any role."""

    async def __call__(self, role: Role) -> list[Approval]:
        return []

    def __repr__(self) -> str:
        return "EmptyPrivilege()"


class ResultPrivilege(Privilege):
    """Grants (or denies) every role.

    The approval carries *error* when given, otherwise the role's own error.
    """

    def __init__(self, value: bool, error: BaseException | None = None) -> None:
        self.value = value
        self.error = error

    async def __call__(self, role: Role) -> list[Approval]:
        return [Approval(self.value, self.error or role.error)]

    def __repr__(self) -> str:
        return f"ResultPrivilege({self.value!r})"


class ApprovalsPrivilege(Privilege):
    """Always returns the given approvals."""

    def __init__(self, *approvals: Approval) -> None:
        self._approvals = list(approvals)

    async def __call__(self, role: Role) -> list[Approval]:
        return list(self._approvals)

    def __repr__(self) -> str:
        return f"ApprovalsPrivilege({len(self._approvals)} approvals)"
