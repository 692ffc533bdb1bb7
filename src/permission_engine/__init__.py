"""permission_engine — composable, asynchronous authorization decisions.

A target's *permits* say which roles it requires, an actor's *privilege*
says which roles it satisfies, and *permissions* combine the two into one
verdict.  Combinators evaluate members in order and stop at the first
decisive result.
"""

from permission_engine.api import check, require, test
from permission_engine.approval import Approval
from permission_engine.audit import ApprovalRecord
from permission_engine.exceptions import Denial, PermissionEngineError
from permission_engine.guard import AccessGuard
from permission_engine.permissions import (
    ApprovalsPermission,
    CombinedPermission,
    DynamicPermission,
    EmptyPermission,
    EveryPermission,
    MappedPermission,
    Permission,
    PermitPermission,
    ResultPermission,
    RolePermission,
    SomePermission,
)
from permission_engine.permits import (
    CombinedPermit,
    DynamicPermit,
    EmptyPermit,
    ErrorPermit,
    MappedPermit,
    Permit,
    RolesPermit,
)
from permission_engine.privileges import (
    ApprovalsPrivilege,
    CachedPrivilege,
    CombinedPrivilege,
    DynamicPrivilege,
    EmptyPrivilege,
    EveryPrivilege,
    FunctionPrivilege,
    Privilege,
    ResultPrivilege,
    SomePrivilege,
)
from permission_engine.role import Role
from permission_engine.standard import StandardPermissions, StandardPermits

__all__ = [
    "AccessGuard",
    "Approval",
    "ApprovalRecord",
    "ApprovalsPermission",
    "ApprovalsPrivilege",
    "CachedPrivilege",
    "CombinedPermission",
    "CombinedPermit",
    "CombinedPrivilege",
    "Denial",
    "DynamicPermission",
    "DynamicPermit",
    "DynamicPrivilege",
    "EmptyPermission",
    "EmptyPermit",
    "EmptyPrivilege",
    "ErrorPermit",
    "EveryPermission",
    "EveryPrivilege",
    "FunctionPrivilege",
    "MappedPermission",
    "MappedPermit",
    "Permission",
    "PermissionEngineError",
    "Permit",
    "PermitPermission",
    "Privilege",
    "ResultPermission",
    "ResultPrivilege",
    "Role",
    "RolePermission",
    "RolesPermit",
    "SomePermission",
    "SomePrivilege",
    "StandardPermissions",
    "StandardPermits",
    "check",
    "require",
    "test",
]
