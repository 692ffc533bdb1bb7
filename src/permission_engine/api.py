"""Generic ``check`` / ``test`` / ``require`` that dispatch on the evaluator kind.

    await check(privilege, role)
    await check(permit, privilege, target)
    await check(permission, privilege, target)
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any

from permission_engine import evaluation
from permission_engine.approval import Approval
from permission_engine.permissions.base import Permission
from permission_engine.permits.base import Permit
from permission_engine.privileges.base import Privilege


def _unsupported(evaluator: Any) -> TypeError:
    return TypeError(
        f"Expected a Privilege, Permit or Permission, got {type(evaluator).__name__}"
    )


@singledispatch
async def check(evaluator: Any, *args: Any) -> Approval:
    """Reduce *evaluator*'s results to the decisive approval.  Never raises on denial."""
    raise _unsupported(evaluator)


@check.register
async def _(evaluator: Privilege, role: Any) -> Approval:
    return await evaluation.check_privilege(evaluator, role)


@check.register
async def _(evaluator: Permit, privilege: Privilege, target: Any) -> Approval:
    return await evaluation.check_permit(evaluator, privilege, target)


@check.register
async def _(evaluator: Permission, privilege: Privilege, target: Any) -> Approval:
    return await evaluation.check_permission(evaluator, privilege, target)


async def test(evaluator: Any, *args: Any) -> bool:
    """``True`` if *evaluator* grants."""
    return (await check(evaluator, *args)).value


async def require(evaluator: Any, *args: Any) -> Any:
    """Return the checked role or target, raising the decisive error on denial."""
    evaluation.raise_denied(await check(evaluator, *args))
    return args[-1]
