"""OD application SQLAlchemy model."""

from datetime import date, datetime
from uuid import UUID, uuid4
from sqlalchemy import Boolean, Date, DateTime, Integer, String, Text, Uuid, case, CheckConstraint
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.elements import ColumnElement

from domain.enums import ApplicationStatus
from domain.value_objects import derive_status
from infrastructure.database.session import Base


class ODApplicationModel(Base):
    """SQLAlchemy model for OD applications."""
    
    __tablename__ = "od_applications"
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_od_applications_date_order"),
        CheckConstraint(
            "(od_type = 'internal' AND club_name IS NOT NULL AND college_name IS NULL) OR "
            "(od_type = 'external' AND college_name IS NOT NULL AND club_name IS NULL)",
            name="ck_od_applications_classification",
        ),
    )
    
    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    
    # Subject data
    student_identity: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    student_name: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    section: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    
    # Classification
    od_type: Mapped[str] = mapped_column(String(16), nullable=False)
    club_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    college_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    
    # Event metadata
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    event_name: Mapped[str] = mapped_column(String(255), nullable=False)
    event_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    
    # Faculty approval
    faculty_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    faculty_approved_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    faculty_approved_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    faculty_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # HOD approval
    hod_approved: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    hod_approved_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    hod_approved_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    hod_remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Terminal markers
    rejected: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    rejected_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    rejected_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    cancelled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    # Timestamps and optimistic concurrency
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
        index=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    version: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    
    @hybrid_property
    def status(self) -> str:
        """Derived status; there is no status column."""
        return derive_status(self.cancelled, self.rejected, self.hod_approved).value
    
    @status.inplace.expression
    @classmethod
    def _status_expression(cls) -> ColumnElement[str]:
        return case(
            (cls.cancelled, ApplicationStatus.CANCELLED.value),
            (cls.rejected, ApplicationStatus.REJECTED.value),
            (cls.hod_approved, ApplicationStatus.APPROVED.value),
            else_=ApplicationStatus.PENDING.value,
        )
    
    def __repr__(self) -> str:
        return f"<ODApplicationModel(id={self.id}, student={self.student_identity}, v{self.version})>"
