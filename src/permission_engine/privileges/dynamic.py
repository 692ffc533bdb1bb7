"""Privileges built from host callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any

from permission_engine._internal.awaitable import resolve
from permission_engine.approval import Approval
from permission_engine.privileges.base import Privilege

if TYPE_CHECKING:
    from permission_engine.role import Role

# Builders and checks can be sync or async.
PrivilegeBuilder = Callable[["Role"], Privilege] | Callable[["Role"], Awaitable[Privilege]]
CheckFn = Callable[["Role"], Any]


class DynamicPrivilege(Privilege):
    """Picks the privilege to evaluate from the role itself.

    *builder* is called with the role and must return a privilege, which is
    then invoked with the same role::

        def account_privilege(account):
            def decide(role):
                if account.is_admin:
                    return ResultPrivilege(True)
                if isinstance(role, OwnershipRole):
                    return ResultPrivilege(role.entity.owner_id == account.id)
                return ResultPrivilege(False)

            return DynamicPrivilege(decide)
    """

    def __init__(self, builder: PrivilegeBuilder) -> None:
        self._builder = builder

    async def __call__(self, role: Role) -> list[Approval]:
        privilege: Privilege = await resolve(self._builder(role))
        return await privilege(role)

    def __repr__(self) -> str:
        return f"DynamicPrivilege({getattr(self._builder, '__name__', self._builder)!r})"


class FunctionPrivilege(Privilege):
    """Wraps a plain callable as a privilege — no subclassing required.

    *fn* receives the role and may return:

    * a ``bool`` — becomes ``Approval(value, role.error)``;
    * a single :class:`Approval`;
    * a list, tuple or other sequence of approvals (empty is "no answer").

    Any other result raises ``TypeError``.  It may be sync or async.
    """

    def __init__(self, fn: CheckFn) -> None:
        self._fn = fn

    async def __call__(self, role: Role) -> list[Approval]:
        result = await resolve(self._fn(role))

        if isinstance(result, bool):
            return [Approval(result, role.error)]
        if isinstance(result, Approval):
            return [result]
        if isinstance(result, Sequence) and not isinstance(result, str | bytes):
            return list(result)
        raise TypeError(
            f"{self!r} returned {type(result).__name__}; expected bool, Approval or approvals"
        )

    def __repr__(self) -> str:
        return f"FunctionPrivilege({getattr(self._fn, '__name__', self._fn)!r})"
