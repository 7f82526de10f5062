from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.notifications import NotificationRepository
from src.api.schemas.notification import NotificationCreate, NotificationResponse

router = APIRouter()


@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification_data: NotificationCreate,
    db: AsyncSession = Depends(get_db)
):
    return await NotificationRepository(db).create(notification_data)


@router.get("/user/{user_id}", response_model=list[NotificationResponse])
async def get_user_notifications(
    user_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    List a user's notifications, newest first
    """
    return await NotificationRepository(db).list_for_user(user_id)
