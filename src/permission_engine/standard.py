"""Optional base classes that standardize per-type access sets.

Using them is never required; they give every resource type the same
vocabulary (read / write / owner) so that hosts can look permissions up
uniformly::

    class DocumentPermits(StandardPermits[Document]):
        @property
        def read(self) -> Permit[Document]:
            return DynamicPermit(lambda doc: RolesPermit(GrantRole("READ", doc)))

Anything a subclass does not override falls back to a requirement that
only an all-granting privilege can meet (permits) or to a denial
(permissions).
"""

from __future__ import annotations

from typing import Generic, TypeVar

from permission_engine.exceptions import Denial
from permission_engine.permissions.base import Permission
from permission_engine.permissions.constant import ResultPermission
from permission_engine.permits.base import Permit
from permission_engine.permits.constant import ErrorPermit

T = TypeVar("T")


class StandardPermits(Generic[T]):
    """Written permits for reading, writing and owning ``T``."""

    @property
    def read(self) -> Permit[T]:
        return ErrorPermit(Denial("READ"))

    @property
    def write(self) -> Permit[T]:
        return ErrorPermit(Denial("WRITE"))

    @property
    def owner(self) -> Permit[T]:
        return ErrorPermit(Denial("OWNER"))


class StandardPermissions(Generic[T]):
    """Read / write permissions for ``T`` at anonymous, default and owner level.

    Each level falls back to the next stricter one:
    ``anonymous_read -> read -> owner_read -> deny`` and likewise for writes.
    """

    @property
    def anonymous_read(self) -> Permission[T]:
        return self.read

    @property
    def anonymous_write(self) -> Permission[T]:
        return self.write

    @property
    def read(self) -> Permission[T]:
        return self.owner_read

    @property
    def write(self) -> Permission[T]:
        return self.owner_write

    @property
    def owner_read(self) -> Permission[T]:
        return ResultPermission(False)

    @property
    def owner_write(self) -> Permission[T]:
        return ResultPermission(False)
