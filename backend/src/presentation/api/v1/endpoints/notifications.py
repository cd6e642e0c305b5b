"""In-app notification endpoints."""

from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status

from domain.repositories import INotificationRepository
from domain.value_objects import Actor
from presentation.api.v1.dependencies import get_current_actor, get_notification_repository
from presentation.schemas import MarkReadResponse, NotificationResponse, UnreadCountResponse

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    unread_only: bool = False,
    actor: Actor = Depends(get_current_actor),
    repository: INotificationRepository = Depends(get_notification_repository),
) -> list[NotificationResponse]:
    notifications = await repository.list_for_recipient(actor.identity, unread_only=unread_only)
    return [NotificationResponse.from_entity(n) for n in notifications]


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    actor: Actor = Depends(get_current_actor),
    repository: INotificationRepository = Depends(get_notification_repository),
) -> UnreadCountResponse:
    return UnreadCountResponse(unread=await repository.count_unread(actor.identity))


@router.post("/read-all", response_model=MarkReadResponse)
async def mark_all_read(
    actor: Actor = Depends(get_current_actor),
    repository: INotificationRepository = Depends(get_notification_repository),
) -> MarkReadResponse:
    return MarkReadResponse(updated=await repository.mark_all_read(actor.identity))


@router.post("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: UUID,
    actor: Actor = Depends(get_current_actor),
    repository: INotificationRepository = Depends(get_notification_repository),
) -> MarkReadResponse:
    if not await repository.mark_read(notification_id, actor.identity):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return MarkReadResponse(updated=1)
