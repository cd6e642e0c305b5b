"""SQLAlchemy implementation of the OD application repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional
from uuid import UUID
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import ODApplication
from domain.enums import ApplicationStatus, ODType
from domain.exceptions import ConcurrentModificationError, NotFoundError
from domain.repositories import IODApplicationRepository
from domain.value_objects import ApprovalFacts, RosterQuery, derive_status
from infrastructure.database.models import ODApplicationModel


APPROVAL_COLUMNS = (
    "faculty_approved",
    "faculty_approved_by",
    "faculty_approved_at",
    "faculty_remarks",
    "hod_approved",
    "hod_approved_by",
    "hod_approved_at",
    "hod_remarks",
    "rejected",
    "rejected_by",
    "rejected_at",
    "cancelled",
    "cancelled_at",
)


class SQLAlchemyODApplicationRepository(IODApplicationRepository):
    """Concrete implementation of IODApplicationRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, application: ODApplication) -> ODApplication:
        """Insert a newly submitted application."""
        model = self._entity_to_model(application)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._model_to_entity(model)
    
    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run the block inside a SAVEPOINT on the request session."""
        async with self.session.begin_nested():
            yield
    
    async def get_by_id(self, application_id: UUID) -> Optional[ODApplication]:
        """Retrieve an application by ID, bypassing any stale identity-map copy."""
        stmt = (
            select(ODApplicationModel)
            .where(ODApplicationModel.id == application_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def compare_and_set(
        self,
        application_id: UUID,
        expected_version: int,
        approval: ApprovalFacts,
    ) -> ODApplication:
        """
        Conditional UPDATE keyed on (id, version). The database applies the
        check and the write atomically, so only one of two racing writers
        can match the expected version.
        """
        values = {column: getattr(approval, column) for column in APPROVAL_COLUMNS}
        stmt = (
            update(ODApplicationModel)
            .where(
                ODApplicationModel.id == application_id,
                ODApplicationModel.version == expected_version,
            )
            .values(**values, version=expected_version + 1, updated_at=datetime.utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        
        if result.rowcount == 0:
            exists = await self.session.scalar(
                select(ODApplicationModel.id).where(ODApplicationModel.id == application_id)
            )
            if exists is None:
                raise NotFoundError(application_id)
            raise ConcurrentModificationError(application_id, expected_version)
        
        updated = await self.get_by_id(application_id)
        if updated is None:
            raise NotFoundError(application_id)
        return updated
    
    async def query(self, roster_query: RosterQuery) -> list[ODApplication]:
        """Translate a roster query to SQL."""
        day = roster_query.reference_date
        stmt = select(ODApplicationModel).where(
            ODApplicationModel.start_date <= day,
            ODApplicationModel.end_date >= day,
        )
        if roster_query.year is not None:
            stmt = stmt.where(ODApplicationModel.year == roster_query.year)
        if roster_query.section is not None:
            stmt = stmt.where(ODApplicationModel.section == roster_query.section)
        if roster_query.od_type is not None:
            stmt = stmt.where(ODApplicationModel.od_type == roster_query.od_type.value)
        if roster_query.status is not None:
            stmt = stmt.where(ODApplicationModel.status == roster_query.status.value)
        stmt = stmt.order_by(ODApplicationModel.submitted_at, ODApplicationModel.id)
        
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def list_by_student(self, student_identity: str) -> list[ODApplication]:
        stmt = (
            select(ODApplicationModel)
            .where(ODApplicationModel.student_identity == student_identity)
            .order_by(ODApplicationModel.submitted_at.desc(), ODApplicationModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    async def list_pending_faculty(self, department: Optional[str] = None) -> list[ODApplication]:
        return await self._pending(faculty_approved=False, department=department)
    
    async def list_pending_hod(self, department: Optional[str] = None) -> list[ODApplication]:
        return await self._pending(faculty_approved=True, department=department)
    
    async def count_by_status(self, student_identity: str) -> dict[ApplicationStatus, int]:
        """Group on the raw flags and derive status in Python."""
        stmt = (
            select(
                ODApplicationModel.cancelled,
                ODApplicationModel.rejected,
                ODApplicationModel.hod_approved,
                func.count(ODApplicationModel.id),
            )
            .where(ODApplicationModel.student_identity == student_identity)
            .group_by(
                ODApplicationModel.cancelled,
                ODApplicationModel.rejected,
                ODApplicationModel.hod_approved,
            )
        )
        result = await self.session.execute(stmt)
        
        counts: dict[ApplicationStatus, int] = {}
        for cancelled, rejected, hod_approved, total in result.all():
            status = derive_status(cancelled, rejected, hod_approved)
            counts[status] = counts.get(status, 0) + total
        return counts
    
    async def distinct_facets(self) -> dict[str, list]:
        years = await self.session.scalars(select(ODApplicationModel.year).distinct())
        sections = await self.session.scalars(select(ODApplicationModel.section).distinct())
        return {"years": list(years.all()), "sections": list(sections.all())}
    
    async def _pending(self, faculty_approved: bool, department: Optional[str]) -> list[ODApplication]:
        stmt = select(ODApplicationModel).where(
            ODApplicationModel.status == ApplicationStatus.PENDING.value,
            ODApplicationModel.faculty_approved == faculty_approved,
        )
        if department is not None:
            stmt = stmt.where(
                (ODApplicationModel.department == department)
                | (ODApplicationModel.department.is_(None))
            )
        stmt = stmt.order_by(ODApplicationModel.submitted_at, ODApplicationModel.id)
        result = await self.session.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]
    
    def _entity_to_model(self, entity: ODApplication) -> ODApplicationModel:
        """Convert domain entity to ORM model."""
        model = ODApplicationModel(
            id=entity.id,
            student_identity=entity.student_identity,
            student_name=entity.student_name,
            year=entity.year,
            section=entity.section,
            department=entity.department,
            od_type=entity.od_type.value,
            club_name=entity.club_name,
            college_name=entity.college_name,
            role=entity.role,
            event_name=entity.event_name,
            event_description=entity.event_description,
            start_date=entity.start_date,
            end_date=entity.end_date,
            submitted_at=entity.submitted_at,
            updated_at=entity.updated_at,
            version=entity.version,
        )
        for column in APPROVAL_COLUMNS:
            setattr(model, column, getattr(entity.approval, column))
        return model
    
    def _model_to_entity(self, model: ODApplicationModel) -> ODApplication:
        """Convert ORM model to domain entity."""
        approval = ApprovalFacts(**{column: getattr(model, column) for column in APPROVAL_COLUMNS})
        
        return ODApplication(
            id=model.id,
            student_identity=model.student_identity,
            student_name=model.student_name,
            year=model.year,
            section=model.section,
            department=model.department,
            od_type=ODType(model.od_type),
            club_name=model.club_name,
            college_name=model.college_name,
            role=model.role,
            event_name=model.event_name,
            event_description=model.event_description,
            start_date=model.start_date,
            end_date=model.end_date,
            submitted_at=model.submitted_at,
            updated_at=model.updated_at,
            approval=approval,
            version=model.version,
        )
