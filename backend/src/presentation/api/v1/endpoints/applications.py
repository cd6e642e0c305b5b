"""OD application endpoints - submission, review and cancellation."""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from application.use_cases import (
    ApplicationDraft,
    BatchTransitionCoordinator,
    ListApplicationsUseCase,
    SubmitApplicationUseCase,
    review_transition_for,
)
from domain.enums import Transition
from domain.exceptions import AuthorizationError, DomainError
from domain.value_objects import Actor
from infrastructure.config import get_logger
from presentation.api.v1.dependencies import (
    get_current_actor,
    get_list_use_case,
    get_submit_use_case,
    get_transition_coordinator,
)
from presentation.api.v1.errors import to_http_exception
from presentation.schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
    BatchTransitionRequest,
    BatchTransitionResponse,
    ReviewRequest,
    StudentStatsResponse,
)

router = APIRouter(prefix="/applications", tags=["applications"])
logger = get_logger(__name__)


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def submit_application(
    request: ApplicationCreateRequest,
    actor: Actor = Depends(get_current_actor),
    use_case: SubmitApplicationUseCase = Depends(get_submit_use_case),
) -> ApplicationResponse:
    """Submit a new OD application (students only)."""
    draft = ApplicationDraft(**request.model_dump())
    try:
        application = await use_case.execute(actor, draft)
    except DomainError as e:
        logger.warning(f"Submission by {actor} refused: {e.message}")
        raise to_http_exception(e)
    return ApplicationResponse.from_entity(application)


@router.get("/mine", response_model=list[ApplicationResponse])
async def list_my_applications(
    actor: Actor = Depends(get_current_actor),
    use_case: ListApplicationsUseCase = Depends(get_list_use_case),
) -> list[ApplicationResponse]:
    """The calling student's applications, newest first."""
    try:
        applications = await use_case.mine(actor)
    except DomainError as e:
        raise to_http_exception(e)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.get("/mine/stats", response_model=StudentStatsResponse)
async def my_application_stats(
    actor: Actor = Depends(get_current_actor),
    use_case: ListApplicationsUseCase = Depends(get_list_use_case),
) -> StudentStatsResponse:
    try:
        stats = await use_case.stats(actor)
    except DomainError as e:
        raise to_http_exception(e)
    return StudentStatsResponse.from_stats(stats)


@router.get("/review-queue", response_model=list[ApplicationResponse])
async def review_queue(
    actor: Actor = Depends(get_current_actor),
    use_case: ListApplicationsUseCase = Depends(get_list_use_case),
) -> list[ApplicationResponse]:
    """Faculty queue for staff, HOD queue for HOD."""
    try:
        applications = await use_case.review_queue(actor)
    except DomainError as e:
        raise to_http_exception(e)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.post("/batch", response_model=BatchTransitionResponse)
async def batch_transition(
    request: BatchTransitionRequest,
    actor: Actor = Depends(get_current_actor),
    coordinator: BatchTransitionCoordinator = Depends(get_transition_coordinator),
) -> BatchTransitionResponse:
    """
    Apply one transition to many applications.

    Per-item failures are reported in the outcome list; the call itself
    only fails for call-level validation problems.
    """
    try:
        result = await coordinator.execute(actor, request.ids, request.transition, request.remarks)
    except DomainError as e:
        raise to_http_exception(e)
    return BatchTransitionResponse.from_result(result)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: UUID,
    actor: Actor = Depends(get_current_actor),
    use_case: ListApplicationsUseCase = Depends(get_list_use_case),
) -> ApplicationResponse:
    try:
        application = await use_case.get(actor, application_id)
    except DomainError as e:
        raise to_http_exception(e)
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/approve", response_model=ApplicationResponse)
async def approve_application(
    application_id: UUID,
    request: ReviewRequest = ReviewRequest(),
    actor: Actor = Depends(get_current_actor),
    coordinator: BatchTransitionCoordinator = Depends(get_transition_coordinator),
) -> ApplicationResponse:
    """Faculty or HOD approval depending on the reviewer's role."""
    return await _review(coordinator, actor, application_id, approve=True, remarks=request.remarks)


@router.post("/{application_id}/reject", response_model=ApplicationResponse)
async def reject_application(
    application_id: UUID,
    request: ReviewRequest = ReviewRequest(),
    actor: Actor = Depends(get_current_actor),
    coordinator: BatchTransitionCoordinator = Depends(get_transition_coordinator),
) -> ApplicationResponse:
    """Faculty or HOD rejection depending on the reviewer's role."""
    return await _review(coordinator, actor, application_id, approve=False, remarks=request.remarks)


@router.post("/{application_id}/cancel", response_model=ApplicationResponse)
async def cancel_application(
    application_id: UUID,
    actor: Actor = Depends(get_current_actor),
    coordinator: BatchTransitionCoordinator = Depends(get_transition_coordinator),
) -> ApplicationResponse:
    """Withdraw a pending application (owner only)."""
    try:
        application = await coordinator.execute_one(actor, application_id, Transition.CANCEL)
    except DomainError as e:
        raise to_http_exception(e)
    return ApplicationResponse.from_entity(application)


async def _review(
    coordinator: BatchTransitionCoordinator,
    actor: Actor,
    application_id: UUID,
    approve: bool,
    remarks: str | None,
) -> ApplicationResponse:
    try:
        if not actor.is_reviewer:
            raise AuthorizationError("only staff and HOD can review applications")
        transition = review_transition_for(actor, approve)
        application = await coordinator.execute_one(actor, application_id, transition, remarks)
    except DomainError as e:
        raise to_http_exception(e)
    return ApplicationResponse.from_entity(application)
