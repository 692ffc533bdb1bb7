"""Built-in permit implementations."""

from permission_engine.permits.base import Permit
from permission_engine.permits.composite import CombinedPermit, DynamicPermit, MappedPermit
from permission_engine.permits.constant import EmptyPermit, ErrorPermit, RolesPermit

__all__ = [
    "CombinedPermit",
    "DynamicPermit",
    "EmptyPermit",
    "ErrorPermit",
    "MappedPermit",
    "Permit",
    "RolesPermit",
]
