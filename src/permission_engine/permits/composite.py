"""Composite permits — concatenation, target mapping and late dispatch."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from permission_engine._internal.awaitable import resolve
from permission_engine.permits.base import Permit

if TYPE_CHECKING:
    from permission_engine.role import Role

T = TypeVar("T")
U = TypeVar("U")

# Mappers and builders can be sync or async.
Mapper = Callable[[Any], Any] | Callable[[Any], Awaitable[Any]]
PermitBuilder = Callable[[Any], "Permit[Any]"] | Callable[[Any], Awaitable["Permit[Any]"]]


class CombinedPermit(Permit[T]):
    """Requires the roles of every member, concatenated in member order."""

    def __init__(self, *permits: Permit[T]) -> None:
        self._permits = list(permits)

    async def __call__(self, target: T) -> list[Role]:
        roles: list[Role] = []
        for permit in self._permits:
            roles.extend(await permit(target))
        return roles

    def __repr__(self) -> str:
        return f"CombinedPermit({', '.join(map(repr, self._permits))})"


class MappedPermit(Permit[T], Generic[T, U]):
    """Maps the target with *mapper*, then combines *permits* over the result.

    The mapper runs once per evaluation::

        OwnerOfParent = MappedPermit(lambda doc: doc.folder, FolderPermits.owner)
    """

    def __init__(self, mapper: Mapper, *permits: Permit[U]) -> None:
        self._mapper = mapper
        self._permits = list(permits)

    async def __call__(self, target: T) -> list[Role]:
        mapped: U = await resolve(self._mapper(target))
        roles: list[Role] = []
        for permit in self._permits:
            roles.extend(await permit(mapped))
        return roles

    def __repr__(self) -> str:
        return f"MappedPermit({', '.join(map(repr, self._permits))})"


class DynamicPermit(Permit[T]):
    """Picks the permit to evaluate from the target's value.

    *builder* is called with the target and must return a permit, which is
    then invoked with the same target::

        Read = DynamicPermit(lambda entity: RolesPermit(GrantRole("READ", entity)))
    """

    def __init__(self, builder: PermitBuilder) -> None:
        self._builder = builder

    async def __call__(self, target: T) -> list[Role]:
        permit: Permit[T] = await resolve(self._builder(target))
        return await permit(target)

    def __repr__(self) -> str:
        return f"DynamicPermit({getattr(self._builder, '__name__', self._builder)!r})"
