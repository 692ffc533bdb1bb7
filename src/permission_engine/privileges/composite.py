"""Composite privileges — concatenation and ALL / ANY combinators."""

from __future__ import annotations

from typing import TYPE_CHECKING

from permission_engine.approval import Approval
from permission_engine.privileges.base import Privilege

if TYPE_CHECKING:
    from permission_engine.role import Role


class CombinedPrivilege(Privilege):
    """Returns the approvals of every member, concatenated in order."""

    def __init__(self, *privileges: Privilege) -> None:
        self._privileges = list(privileges)

    async def __call__(self, role: Role) -> list[Approval]:
        approvals: list[Approval] = []
        for privilege in self._privileges:
            approvals.extend(await privilege(role))
        return approvals

    def __repr__(self) -> str:
        return f"CombinedPrivilege({', '.join(map(repr, self._privileges))})"


class EveryPrivilege(Privilege):
    """Grants only if **every** member grants.  Short-circuits on first denial.

    * No members: always grants, with the role's error.
    * A member that gives no answer denies the whole privilege.
    * The first failing approval is returned as-is and later members are
      never invoked.
    * On success the first approval seen is returned.
    """

    def __init__(self, *privileges: Privilege) -> None:
        self._privileges = list(privileges)

    async def __call__(self, role: Role) -> list[Approval]:
        if not self._privileges:
            return [Approval(True, role.error)]

        first_success: Approval | None = None

        for privilege in self._privileges:
            approvals = await privilege(role)

            if not approvals:
                return [Approval(False, role.error)]

            for approval in approvals:
                if not approval.value:
                    return [approval]

            if first_success is None:
                first_success = approvals[0]

        return [first_success or Approval(True, role.error)]

    def __repr__(self) -> str:
        return f"EveryPrivilege({', '.join(map(repr, self._privileges))})"


class SomePrivilege(Privilege):
    """Grants if **at least one** member grants.  Short-circuits on first grant.

    * No members: always denies, with the role's error.
    * The first granting approval is returned as-is and later members are
      never invoked.
    * When nothing grants, the first approval seen is returned.
    """

    def __init__(self, *privileges: Privilege) -> None:
        self._privileges = list(privileges)

    async def __call__(self, role: Role) -> list[Approval]:
        if not self._privileges:
            return [Approval(False, role.error)]

        first_failure: Approval | None = None

        for privilege in self._privileges:
            approvals = await privilege(role)

            for approval in approvals:
                if approval.value:
                    return [approval]

            if first_failure is None and approvals:
                first_failure = approvals[0]

        return [first_failure or Approval(False, role.error)]

    def __repr__(self) -> str:
        return f"SomePrivilege({', '.join(map(repr, self._privileges))})"
