"""OD workflow Pydantic schemas."""

from datetime import date, datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, Field

from application.use_cases import BatchResult, StudentStats, TransitionOutcome
from domain.entities import ODApplication
from domain.enums import ApplicationStatus, ODType, Transition


class ApplicationCreateRequest(BaseModel):
    """Request schema for submitting an OD application."""
    
    student_name: str = Field(..., min_length=1, max_length=255)
    year: Optional[int] = Field(None, ge=1, description="Defaults to the student's own year")
    section: Optional[str] = Field(None, max_length=16, description="Defaults to the student's own section")
    department: Optional[str] = Field(None, max_length=255)
    od_type: ODType = Field(..., description="internal (club) or external (college)")
    club_name: Optional[str] = Field(None, max_length=255)
    college_name: Optional[str] = Field(None, max_length=255)
    role: str = Field(..., min_length=1, max_length=255, description="Role held at the event")
    event_name: str = Field(..., min_length=1, max_length=255)
    event_description: Optional[str] = Field(None, max_length=5000)
    start_date: date
    end_date: date
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "student_name": "Priya S",
                    "year": 3,
                    "section": "A",
                    "od_type": "internal",
                    "club_name": "Coding Club",
                    "role": "Organizer",
                    "event_name": "Hackathon 2025",
                    "start_date": "2025-10-20",
                    "end_date": "2025-10-22"
                }
            ]
        }
    }


class ReviewRequest(BaseModel):
    """Optional remarks attached to an approve/reject."""
    
    remarks: Optional[str] = Field(None, max_length=1000)


class BatchTransitionRequest(BaseModel):
    """Request schema for applying one transition to many applications."""
    
    ids: list[UUID] = Field(..., min_length=1, description="Application ids; duplicates are ignored")
    transition: Transition
    remarks: Optional[str] = Field(None, max_length=1000)
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "ids": ["6f1c1e4e-8d0e-4c3a-9a59-1d2b8f0b6a11"],
                    "transition": "facultyApprove",
                    "remarks": "Verified with club coordinator"
                }
            ]
        }
    }


class ErrorDetail(BaseModel):
    """Structured domain error."""
    
    code: str
    message: str
    current_status: Optional[str] = None
    transition: Optional[str] = None
    guard: Optional[str] = None


class ApplicationResponse(BaseModel):
    """Response schema for a single OD application."""
    
    id: UUID
    student_identity: str
    student_name: str
    year: int
    section: str
    department: Optional[str] = None
    od_type: ODType
    club_name: Optional[str] = None
    college_name: Optional[str] = None
    role: str
    event_name: str
    event_description: Optional[str] = None
    start_date: date
    end_date: date
    duration: str
    duration_days: int
    status: ApplicationStatus
    faculty_approved: bool
    faculty_approved_by: Optional[str] = None
    faculty_approved_at: Optional[datetime] = None
    faculty_remarks: Optional[str] = None
    hod_approved: bool
    hod_approved_by: Optional[str] = None
    hod_approved_at: Optional[datetime] = None
    hod_remarks: Optional[str] = None
    submitted_at: datetime
    updated_at: Optional[datetime] = None
    version: int
    
    @classmethod
    def from_entity(cls, application: ODApplication) -> "ApplicationResponse":
        approval = application.approval
        return cls(
            id=application.id,
            student_identity=application.student_identity,
            student_name=application.student_name,
            year=application.year,
            section=application.section,
            department=application.department,
            od_type=application.od_type,
            club_name=application.club_name,
            college_name=application.college_name,
            role=application.role,
            event_name=application.event_name,
            event_description=application.event_description,
            start_date=application.start_date,
            end_date=application.end_date,
            duration=application.duration,
            duration_days=application.duration_days,
            status=application.status,
            faculty_approved=approval.faculty_approved,
            faculty_approved_by=approval.faculty_approved_by,
            faculty_approved_at=approval.faculty_approved_at,
            faculty_remarks=approval.faculty_remarks,
            hod_approved=approval.hod_approved,
            hod_approved_by=approval.hod_approved_by,
            hod_approved_at=approval.hod_approved_at,
            hod_remarks=approval.hod_remarks,
            submitted_at=application.submitted_at,
            updated_at=application.updated_at,
            version=application.version,
        )


class TransitionOutcomeResponse(BaseModel):
    """Per-id result inside a batch response."""
    
    application_id: UUID
    success: bool
    changed: bool = False
    status: Optional[ApplicationStatus] = None
    error: Optional[ErrorDetail] = None
    
    @classmethod
    def from_outcome(cls, outcome: TransitionOutcome) -> "TransitionOutcomeResponse":
        return cls(
            application_id=outcome.application_id,
            success=outcome.success,
            changed=outcome.changed,
            status=outcome.application.status if outcome.application else None,
            error=ErrorDetail(**outcome.error.to_dict()) if outcome.error else None,
        )


class BatchTransitionResponse(BaseModel):
    """Aggregated batch result."""
    
    transition: Transition
    succeeded: int
    failed: int
    outcomes: list[TransitionOutcomeResponse]
    
    @classmethod
    def from_result(cls, result: BatchResult) -> "BatchTransitionResponse":
        return cls(
            transition=result.transition,
            succeeded=result.succeeded,
            failed=result.failed,
            outcomes=[TransitionOutcomeResponse.from_outcome(o) for o in result.outcomes],
        )


class StudentStatsResponse(BaseModel):
    """Per-status counts of a student's applications."""
    
    total: int
    pending: int
    approved: int
    rejected: int
    cancelled: int
    
    @classmethod
    def from_stats(cls, stats: StudentStats) -> "StudentStatsResponse":
        return cls(
            total=stats.total,
            pending=stats.pending,
            approved=stats.approved,
            rejected=stats.rejected,
            cancelled=stats.cancelled,
        )


class RosterResponse(BaseModel):
    """Applications on duty for a reference date."""
    
    reference_date: date
    count: int
    applications: list[ApplicationResponse]


class RosterFacetsResponse(BaseModel):
    """Distinct filter values present in the store."""
    
    years: list[int]
    sections: list[str]
