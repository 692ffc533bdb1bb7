"""Tests for EveryPermission and SomePermission."""

from unittest.mock import AsyncMock

from permission_engine import (
    Approval,
    ApprovalsPermission,
    Denial,
    EmptyPermission,
    EveryPermission,
    ResultPermission,
    ResultPrivilege,
    SomePermission,
)


def _returning(*approvals):
    return AsyncMock(return_value=list(approvals))


# ── EveryPermission ──────────────────────────────────────────


async def test_every_empty_grants_tagged_no_checklist():
    [approval] = await EveryPermission()(ResultPrivilege(False), "t")
    assert approval.value is True
    assert approval.error == Denial.no_checklist()


async def test_every_all_grant_returns_first_success():
    first = Approval(True, Denial("first"))
    permission = EveryPermission(ApprovalsPermission(first), ResultPermission(True))
    assert await permission(ResultPrivilege(False), "t") == [first]


async def test_every_returns_first_denial_and_short_circuits():
    denial = Approval(False, Denial("denied"))
    later = _returning(Approval(True))

    permission = EveryPermission(ResultPermission(True), ApprovalsPermission(denial), later)

    assert await permission(ResultPrivilege(True), "t") == [denial]
    later.assert_not_awaited()


async def test_every_member_without_results_denies():
    later = _returning(Approval(True))
    permission = EveryPermission(EmptyPermission(), later)

    [approval] = await permission(ResultPrivilege(True), "t")
    assert approval.value is False
    assert approval.error == Denial.no_results()
    later.assert_not_awaited()


# ── SomePermission ───────────────────────────────────────────


async def test_some_empty_denies_tagged_no_checklist():
    [approval] = await SomePermission()(ResultPrivilege(True), "t")
    assert approval.value is False
    assert approval.error == Denial.no_checklist()


async def test_some_returns_first_grant_and_short_circuits():
    grant = Approval(True, Denial("grant"))
    first = _returning(Approval(False))
    later = _returning(Approval(True))

    permission = SomePermission(first, ApprovalsPermission(grant), later)

    assert await permission(ResultPrivilege(False), "t") == [grant]
    first.assert_awaited_once()
    later.assert_not_awaited()


async def test_some_all_deny_returns_first_failure():
    first = Approval(False, Denial("first"))
    permission = SomePermission(EmptyPermission(), ApprovalsPermission(first), ResultPermission(False))
    assert await permission(ResultPrivilege(True), "t") == [first]


async def test_some_nothing_answered_denies_with_no_results():
    [approval] = await SomePermission(EmptyPermission())(ResultPrivilege(True), "t")
    assert approval.value is False
    assert approval.error == Denial.no_results()
