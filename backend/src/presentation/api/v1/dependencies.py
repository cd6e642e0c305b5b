"""FastAPI dependency injection setup."""

from typing import AsyncGenerator, Optional
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import INotificationService
from application.use_cases import (
    BatchTransitionCoordinator,
    ExportRosterUseCase,
    ListApplicationsUseCase,
    RosterQueryEngine,
    SubmitApplicationUseCase,
)
from domain.enums import ActorRole
from domain.repositories import INotificationRepository, IODApplicationRepository
from domain.services import ApprovalStateMachine, AuthorizationGate
from domain.value_objects import Actor
from infrastructure.config import Settings, get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyNotificationRepository,
    SQLAlchemyODApplicationRepository,
)
from infrastructure.notifications import InAppNotificationService
from infrastructure.reporting import RosterCSVExporter


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Identity collaborator: the actor is asserted by the upstream gateway
async def get_current_actor(
    x_actor_role: Optional[str] = Header(None),
    x_actor_id: Optional[str] = Header(None),
    x_actor_year: Optional[str] = Header(None),
    x_actor_section: Optional[str] = Header(None),
    x_actor_department: Optional[str] = Header(None),
) -> Actor:
    """Build the calling actor from trusted identity headers."""
    if not x_actor_role or not x_actor_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Actor-Role and X-Actor-Id headers are required",
        )
    try:
        return Actor(
            role=ActorRole(x_actor_role.strip().lower()),
            identity=x_actor_id.strip(),
            year=int(x_actor_year) if x_actor_year else None,
            section=x_actor_section,
            department=x_actor_department,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


# Repository dependencies
def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IODApplicationRepository:
    """Get OD application repository dependency."""
    return SQLAlchemyODApplicationRepository(session)


def get_notification_repository(
    session: AsyncSession = Depends(get_db_session),
) -> INotificationRepository:
    """Get notification repository dependency."""
    return SQLAlchemyNotificationRepository(session)


def get_notification_service(
    session: AsyncSession = Depends(get_db_session),
    repository: INotificationRepository = Depends(get_notification_repository),
) -> INotificationService:
    """Get notification collaborator dependency."""
    return InAppNotificationService(session, repository)


# Domain services
def get_authorization_gate(settings: Settings = Depends(get_settings)) -> AuthorizationGate:
    return AuthorizationGate(restrict_to_department=settings.restrict_reviewers_to_department)


# Use case dependencies
def get_submit_use_case(
    repository: IODApplicationRepository = Depends(get_application_repository),
    notification_service: INotificationService = Depends(get_notification_service),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> SubmitApplicationUseCase:
    return SubmitApplicationUseCase(repository, notification_service, gate)


def get_transition_coordinator(
    repository: IODApplicationRepository = Depends(get_application_repository),
    notification_service: INotificationService = Depends(get_notification_service),
    gate: AuthorizationGate = Depends(get_authorization_gate),
    settings: Settings = Depends(get_settings),
) -> BatchTransitionCoordinator:
    return BatchTransitionCoordinator(
        repository,
        notification_service,
        state_machine=ApprovalStateMachine(),
        gate=gate,
        batch_max_size=settings.batch_max_size,
    )


def get_list_use_case(
    repository: IODApplicationRepository = Depends(get_application_repository),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> ListApplicationsUseCase:
    return ListApplicationsUseCase(repository, gate)


def get_roster_engine(
    repository: IODApplicationRepository = Depends(get_application_repository),
) -> RosterQueryEngine:
    return RosterQueryEngine(repository)


def get_export_use_case(
    engine: RosterQueryEngine = Depends(get_roster_engine),
    settings: Settings = Depends(get_settings),
) -> ExportRosterUseCase:
    return ExportRosterUseCase(engine, RosterCSVExporter(settings.export_filename_prefix))
