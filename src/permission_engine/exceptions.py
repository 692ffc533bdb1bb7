"""Custom exceptions for the permission_engine package."""

from __future__ import annotations


class PermissionEngineError(Exception):
    """Base exception for all permission_engine errors."""


class Denial(PermissionEngineError):
    """Raised when a permission got denied and nothing more specific was attached.

    Three well-known reasons are used by the engine itself:

    * ``UNSPECIFIED``  — ``require`` failed but no error was attached anywhere.
    * ``NO_RESULTS``   — an evaluator produced zero approvals.
    * ``NO_CHECKLIST`` — an evaluator produced zero roles or members.

    The factory classmethods return a fresh instance on every call so that
    raising one never mutates a shared traceback.  Two denials of the same
    class and reason compare equal.
    """

    UNSPECIFIED = "Unspecified"
    NO_RESULTS = "No Result"
    NO_CHECKLIST = "No Checklist"

    def __init__(self, reason: str = "") -> None:
        self.reason = reason
        super().__init__(reason)

    @classmethod
    def unspecified(cls) -> Denial:
        return cls(cls.UNSPECIFIED)

    @classmethod
    def no_results(cls) -> Denial:
        return cls(cls.NO_RESULTS)

    @classmethod
    def no_checklist(cls) -> Denial:
        return cls(cls.NO_CHECKLIST)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Denial):
            return NotImplemented
        return type(self) is type(other) and self.reason == other.reason

    def __hash__(self) -> int:
        return hash((type(self), self.reason))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"
