from typing import List, Optional
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.notification import Notification
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.notification import NotificationCreate

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository):
    model = Notification
    label = "Notification"

    async def create(self, data: NotificationCreate) -> Notification:
        await self._require(User, data.user_id, "User")

        notification = Notification(
            user_id=data.user_id,
            title=data.title,
            message=data.message,
            notification_type=data.notification_type,
            is_read=False
        )
        notification = await commit_and_refresh(self.session, notification)
        logger.info(f"Queued {notification.notification_type} notification {notification.id} for user {notification.user_id}")
        return notification

    async def list_for_user(self, user_id: int, limit: Optional[int] = None) -> List[Notification]:
        query = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())
