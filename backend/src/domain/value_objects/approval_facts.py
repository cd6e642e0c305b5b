"""Approval facts value object - the reviewer-mutable part of an application."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.enums import ApplicationStatus


def derive_status(cancelled: bool, rejected: bool, hod_approved: bool) -> ApplicationStatus:
    """Total mapping from the approval flags to a lifecycle status."""
    if cancelled:
        return ApplicationStatus.CANCELLED
    if rejected:
        return ApplicationStatus.REJECTED
    if hod_approved:
        return ApplicationStatus.APPROVED
    return ApplicationStatus.PENDING


@dataclass(frozen=True)
class ApprovalFacts:
    """
    Immutable snapshot of every field a reviewer (or the owner, on cancel)
    may change.

    ``status`` is computed from these flags and is the only place the
    mapping lives.
    """

    faculty_approved: bool = False
    faculty_approved_by: Optional[str] = None
    faculty_approved_at: Optional[datetime] = None
    faculty_remarks: Optional[str] = None

    hod_approved: bool = False
    hod_approved_by: Optional[str] = None
    hod_approved_at: Optional[datetime] = None
    hod_remarks: Optional[str] = None

    rejected: bool = False
    rejected_by: Optional[str] = None
    rejected_at: Optional[datetime] = None

    cancelled: bool = False
    cancelled_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate that recorded facts are coherent."""
        if self.hod_approved and not self.faculty_approved:
            raise ValueError("HOD approval cannot exist without faculty approval")
        if self.faculty_approved and not self.faculty_approved_by:
            raise ValueError("Faculty approval must record the approver")
        if self.hod_approved and not self.hod_approved_by:
            raise ValueError("HOD approval must record the approver")
        if self.rejected and self.cancelled:
            raise ValueError("An application cannot be both rejected and cancelled")

    @property
    def status(self) -> ApplicationStatus:
        """Derive the lifecycle status from the approval flags."""
        return derive_status(self.cancelled, self.rejected, self.hod_approved)

    @property
    def awaiting_faculty(self) -> bool:
        return self.status == ApplicationStatus.PENDING and not self.faculty_approved

    @property
    def awaiting_hod(self) -> bool:
        return self.status == ApplicationStatus.PENDING and self.faculty_approved
