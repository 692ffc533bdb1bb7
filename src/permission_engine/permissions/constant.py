"""Constant permissions and permissions over fixed roles or permits."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from permission_engine.approval import Approval
from permission_engine.permissions.base import Permission

if TYPE_CHECKING:
    from permission_engine.permits.base import Permit
    from permission_engine.privileges.base import Privilege
    from permission_engine.role import Role

T = TypeVar("T")


class EmptyPermission(Permission[Any]):
    """Gives no approvals.  Checking it denies with ``Denial.no_results()``."""

    async def __call__(self, privilege: Privilege, target: Any) -> list[Approval]:
        return []

    def __repr__(self) -> str:
        return "EmptyPermission()"


class ResultPermission(Permission[Any]):
    """Always grants (or denies), regardless of actor and target."""

    def __init__(self, value: bool, error: BaseException | None = None) -> None:
        self.value = value
        self.error = error

    async def __call__(self, privilege: Privilege, target: Any) -> list[Approval]:
        return [Approval(self.value, self.error)]

    def __repr__(self) -> str:
        return f"ResultPermission({self.value!r})"


class ApprovalsPermission(Permission[Any]):
    """Always returns the given approvals."""

    def __init__(self, *approvals: Approval) -> None:
        self._approvals = list(approvals)

    async def __call__(self, privilege: Privilege, target: Any) -> list[Approval]:
        return list(self._approvals)

    def __repr__(self) -> str:
        return f"ApprovalsPermission({len(self._approvals)} approvals)"


class RolePermission(Permission[Any]):
    """Asks the privilege about each of the given roles.

    Every role's approvals are concatenated; nothing short-circuits.
    """

    def __init__(self, *roles: Role) -> None:
        self._roles = list(roles)

    async def __call__(self, privilege: Privilege, target: Any) -> list[Approval]:
        approvals: list[Approval] = []
        for role in self._roles:
            approvals.extend(await privilege(role))
        return approvals

    def __repr__(self) -> str:
        return f"RolePermission({', '.join(map(repr, self._roles))})"


class PermitPermission(Permission[T]):
    """Resolves each permit's roles for the target and asks the privilege about them.

    This is the bridge from permits into permissions: all approvals of all
    roles of all permits are concatenated in order, without short-circuit.
    """

    def __init__(self, *permits: Permit[T]) -> None:
        self._permits = list(permits)

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        approvals: list[Approval] = []
        for permit in self._permits:
            for role in await permit(target):
                approvals.extend(await privilege(role))
        return approvals

    def __repr__(self) -> str:
        return f"PermitPermission({', '.join(map(repr, self._permits))})"
