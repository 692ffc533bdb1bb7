"""Privilege ABC — actor-bound decisions about single roles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

from permission_engine import evaluation

if TYPE_CHECKING:
    from permission_engine.approval import Approval
    from permission_engine.role import Role

R = TypeVar("R", bound="Role")


class Privilege(ABC):
    """Base class for every privilege.

    A privilege answers "does the current actor satisfy this role?".  It is
    usually built once an actor has been identified and then reused for
    every check of that request.

    Subclasses implement ``__call__``.  Returning an empty list means "no
    answer", which is distinct from a denial: the combinators and the
    evaluation protocol decide what an unanswered role amounts to.
    """

    @abstractmethod
    async def __call__(self, role: Role) -> list[Approval]:
        """Evaluate the privilege for *role*."""
        ...

    # ── protocol ──────────────────────────────────────────────

    async def check(self, role: Role) -> Approval:
        return await evaluation.check_privilege(self, role)

    async def test(self, role: Role) -> bool:
        return await evaluation.test_privilege(self, role)

    async def require(self, role: R) -> R:
        return await evaluation.require_privilege(self, role)
