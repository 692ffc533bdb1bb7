"""Composite permissions — concatenation, mapping, late dispatch and ALL / ANY."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from permission_engine._internal.awaitable import resolve
from permission_engine.approval import Approval
from permission_engine.exceptions import Denial
from permission_engine.permissions.base import Permission

if TYPE_CHECKING:
    from permission_engine.privileges.base import Privilege

T = TypeVar("T")
U = TypeVar("U")

# Mappers and builders can be sync or async.
Mapper = Callable[[Any], Any] | Callable[[Any], Awaitable[Any]]
PermissionBuilder = (
    Callable[["Privilege", Any], "Permission[Any]"]
    | Callable[["Privilege", Any], Awaitable["Permission[Any]"]]
)


class CombinedPermission(Permission[T]):
    """Returns the approvals of every member, concatenated in order."""

    def __init__(self, *permissions: Permission[T]) -> None:
        self._permissions = list(permissions)

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        approvals: list[Approval] = []
        for permission in self._permissions:
            approvals.extend(await permission(privilege, target))
        return approvals

    def __repr__(self) -> str:
        return f"CombinedPermission({', '.join(map(repr, self._permissions))})"


class MappedPermission(Permission[T], Generic[T, U]):
    """Maps the target with *mapper*, then combines *permissions* over the result."""

    def __init__(self, mapper: Mapper, *permissions: Permission[U]) -> None:
        self._mapper = mapper
        self._permissions = list(permissions)

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        mapped: U = await resolve(self._mapper(target))
        approvals: list[Approval] = []
        for permission in self._permissions:
            approvals.extend(await permission(privilege, mapped))
        return approvals

    def __repr__(self) -> str:
        return f"MappedPermission({', '.join(map(repr, self._permissions))})"


class DynamicPermission(Permission[T]):
    """Picks the permission to evaluate from the privilege and target.

    *builder* receives ``(privilege, target)`` and returns a permission,
    which is then invoked with the same arguments::

        Public = DynamicPermission(
            lambda _, entity: ResultPermission(entity.is_public, Denial("entity_not_public"))
        )
    """

    def __init__(self, builder: PermissionBuilder) -> None:
        self._builder = builder

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        permission: Permission[T] = await resolve(self._builder(privilege, target))
        return await permission(privilege, target)

    def __repr__(self) -> str:
        return f"DynamicPermission({getattr(self._builder, '__name__', self._builder)!r})"


class EveryPermission(Permission[T]):
    """Grants only if **every** member grants.  Short-circuits on first denial.

    * No members: always grants, tagged ``Denial.no_checklist()``.
    * A member that gives no approvals denies with ``Denial.no_results()``.
    * The first failing approval is returned as-is and later members are
      never invoked.
    """

    def __init__(self, *permissions: Permission[T]) -> None:
        self._permissions = list(permissions)

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        if not self._permissions:
            return [Approval(True, Denial.no_checklist())]

        first_success: Approval | None = None

        for permission in self._permissions:
            approvals = await permission(privilege, target)

            if not approvals:
                return [Approval(False, Denial.no_results())]

            for approval in approvals:
                if not approval.value:
                    return [approval]

            if first_success is None:
                first_success = approvals[0]

        return [first_success or Approval(True, Denial.no_results())]

    def __repr__(self) -> str:
        return f"EveryPermission({', '.join(map(repr, self._permissions))})"


class SomePermission(Permission[T]):
    """Grants if **at least one** member grants.  Short-circuits on first grant.

    * No members: always denies with ``Denial.no_checklist()``.
    * When nothing grants, the first approval seen is returned, or a denial
      tagged ``Denial.no_results()`` if no member answered at all.
    """

    def __init__(self, *permissions: Permission[T]) -> None:
        self._permissions = list(permissions)

    async def __call__(self, privilege: Privilege, target: T) -> list[Approval]:
        if not self._permissions:
            return [Approval(False, Denial.no_checklist())]

        first_failure: Approval | None = None

        for permission in self._permissions:
            approvals = await permission(privilege, target)

            for approval in approvals:
                if approval.value:
                    return [approval]

            if first_failure is None and approvals:
                first_failure = approvals[0]

        return [first_failure or Approval(False, Denial.no_results())]

    def __repr__(self) -> str:
        return f"SomePermission({', '.join(map(repr, self._permissions))})"
