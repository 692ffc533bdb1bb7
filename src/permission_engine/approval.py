"""Approval — the outcome of a single authorization decision."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Approval:
    """Immutable verdict produced by privileges and permissions.

    Attributes:
        value:      ``True`` if access is approved.
        error:      The error explaining the verdict (mainly useful on denial).
                    Any exception instance; the engine only checks whether one
                    is present.
        suppressed: Other approvals that were considered while reducing a
                    list of approvals to this one.  Diagnostic only, never
                    affects ``value``.
    """

    value: bool
    error: BaseException | None = None
    suppressed: tuple[Approval, ...] = ()

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def grant(error: BaseException | None = None) -> Approval:
        return Approval(True, error)

    @staticmethod
    def deny(error: BaseException | None = None) -> Approval:
        return Approval(False, error)

    # ── Diagnostics ──────────────────────────────────────────

    def suppress(self, more: Sequence[Approval]) -> Approval:
        """Return a copy carrying *more* as additional suppressed approvals.

        Returns ``self`` unchanged when *more* is empty.
        """
        if not more:
            return self
        return replace(self, suppressed=self.suppressed + tuple(more))
