"""Built-in permission implementations."""

from permission_engine.permissions.base import Permission
from permission_engine.permissions.composite import (
    CombinedPermission,
    DynamicPermission,
    EveryPermission,
    MappedPermission,
    SomePermission,
)
from permission_engine.permissions.constant import (
    ApprovalsPermission,
    EmptyPermission,
    PermitPermission,
    ResultPermission,
    RolePermission,
)

__all__ = [
    "ApprovalsPermission",
    "CombinedPermission",
    "DynamicPermission",
    "EmptyPermission",
    "EveryPermission",
    "MappedPermission",
    "Permission",
    "PermitPermission",
    "ResultPermission",
    "RolePermission",
    "SomePermission",
]
