"""The check / test / require protocol.

Every evaluator kind reduces its list of partial results to exactly one
:class:`Approval`:

* ``check``   — returns the decisive approval.  Never raises on denial.
* ``test``    — ``check(...).value``.
* ``require`` — raises the decisive approval's error (or
  :meth:`Denial.unspecified`) on denial, otherwise returns its input for
  chaining.

Privilege- and permission-level checks work on a flat approval list and
return the first failure as-is.  The permit-level check walks roles one by
one and records every success it saw so far as suppressed diagnostics on
the approval it returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from permission_engine.approval import Approval
from permission_engine.exceptions import Denial

if TYPE_CHECKING:
    from permission_engine.permissions.base import Permission
    from permission_engine.permits.base import Permit
    from permission_engine.privileges.base import Privilege
    from permission_engine.role import Role

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R", bound="Role")


def _first_failure(approvals: list[Approval]) -> Approval:
    for approval in approvals:
        if not approval.value:
            return approval
    return approvals[0]


def raise_denied(approval: Approval) -> None:
    """Raise *approval*'s error, or ``Denial.unspecified()``, if it is a denial."""
    if not approval.value:
        raise approval.error or Denial.unspecified()


# ── Privilege ────────────────────────────────────────────────


async def check_privilege(privilege: Privilege, role: Role) -> Approval:
    """Ask *privilege* about *role* and reduce the answers to one approval."""
    approvals = await privilege(role)

    if not approvals:
        logger.debug("Privilege %r gave no approvals for %r", privilege, role)
        return Approval(False, role.error or Denial.no_results())

    return _first_failure(approvals)


async def test_privilege(privilege: Privilege, role: Role) -> bool:
    return (await check_privilege(privilege, role)).value


async def require_privilege(privilege: Privilege, role: R) -> R:
    raise_denied(await check_privilege(privilege, role))
    return role


# ── Permit ───────────────────────────────────────────────────


async def check_permit(permit: Permit[T], privilege: Privilege, target: T) -> Approval:
    """Resolve the roles *permit* requires for *target* and ask *privilege* about each.

    Roles are evaluated in order and the walk stops at the first role that
    is denied or left unanswered.  Approvals of the roles that passed before
    it are attached to the returned approval as ``suppressed``.
    """
    roles = await permit(target)

    if not roles:
        logger.debug("Permit %r required no roles for %r", permit, target)
        return Approval(False, Denial.no_checklist())

    successes: list[Approval] = []

    for role in roles:
        approvals = await privilege(role)

        if not approvals:
            logger.debug("Privilege %r gave no approvals for %r", privilege, role)
            return Approval(False, role.error, tuple(successes))

        failure = next((i for i, a in enumerate(approvals) if not a.value), -1)

        if failure >= 0:
            others = [a for i, a in enumerate(approvals) if i != failure]
            logger.debug("Privilege %r denied %r", privilege, role)
            return approvals[failure].suppress(successes + others)

        successes.extend(approvals)

    if not successes:
        return Approval(True, roles[0].error)

    return successes[0].suppress(successes[1:])


async def test_permit(permit: Permit[T], privilege: Privilege, target: T) -> bool:
    return (await check_permit(permit, privilege, target)).value


async def require_permit(permit: Permit[T], privilege: Privilege, target: T) -> T:
    raise_denied(await check_permit(permit, privilege, target))
    return target


# ── Permission ───────────────────────────────────────────────


async def check_permission(
    permission: Permission[T],
    privilege: Privilege,
    target: T,
) -> Approval:
    """Evaluate *permission* for *target* and reduce its approvals to one."""
    approvals = await permission(privilege, target)

    if not approvals:
        logger.debug("Permission %r gave no approvals for %r", permission, target)
        return Approval(False, Denial.no_results())

    return _first_failure(approvals)


async def test_permission(permission: Permission[T], privilege: Privilege, target: T) -> bool:
    return (await check_permission(permission, privilege, target)).value


async def require_permission(permission: Permission[T], privilege: Privilege, target: T) -> T:
    raise_denied(await check_permission(permission, privilege, target))
    return target
