"""Serialisable audit records for approvals.

These Pydantic models turn an :class:`Approval` tree (decisive verdict plus
suppressed diagnostics) into plain JSON for audit logs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from permission_engine.approval import Approval
from permission_engine.exceptions import Denial


class ApprovalRecord(BaseModel):
    """JSON-friendly snapshot of an approval.

    Attributes:
        value: Whether access was approved
        error: Error message (empty when no error was attached)
        error_type: Error class name (empty when no error was attached)
        reason: ``Denial.reason`` when the error is a :class:`Denial`
        suppressed: Records of the approvals suppressed by this one
    """

    value: bool
    error: str = ""
    error_type: str = ""
    reason: str = ""
    suppressed: list[ApprovalRecord] = Field(default_factory=list)

    @classmethod
    def from_approval(cls, approval: Approval) -> ApprovalRecord:
        error = approval.error
        return cls(
            value=approval.value,
            error=str(error) if error is not None else "",
            error_type=type(error).__name__ if error is not None else "",
            reason=error.reason if isinstance(error, Denial) else "",
            suppressed=[cls.from_approval(a) for a in approval.suppressed],
        )

    def flatten(self) -> list[ApprovalRecord]:
        """Return this record followed by every nested suppressed record, depth-first."""
        records = [self]
        for record in self.suppressed:
            records.extend(record.flatten())
        return records
