"""Built-in privilege implementations."""

from permission_engine.privileges.base import Privilege
from permission_engine.privileges.cached import CachedPrivilege
from permission_engine.privileges.composite import CombinedPrivilege, EveryPrivilege, SomePrivilege
from permission_engine.privileges.constant import ApprovalsPrivilege, EmptyPrivilege, ResultPrivilege
from permission_engine.privileges.dynamic import DynamicPrivilege, FunctionPrivilege

__all__ = [
    "ApprovalsPrivilege",
    "CachedPrivilege",
    "CombinedPrivilege",
    "DynamicPrivilege",
    "EmptyPrivilege",
    "EveryPrivilege",
    "FunctionPrivilege",
    "Privilege",
    "ResultPrivilege",
    "SomePrivilege",
]
