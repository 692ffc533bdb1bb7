"""Role — an application-defined capability requirement."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Role:
    """Base class for every role a permit can require.

    Host applications subclass this as frozen dataclasses, one subclass per
    kind of requirement::

        @dataclass(frozen=True)
        class OwnershipRole(Role):
            entity: Entity

    Dataclass equality makes roles comparable by value, which is what
    :class:`~permission_engine.privileges.CachedPrivilege` keys on.  The
    ``error`` field takes part in that equality: use
    :class:`~permission_engine.exceptions.Denial` (compared by reason) when
    roles rebuilt per evaluation should share a cache entry.

    Attributes:
        error: Default denial reason used when the deciding privilege gives
               no explicit one.
    """

    error: BaseException | None = None
