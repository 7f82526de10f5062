from typing import List
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.community import CommunityEvent
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.community import CommunityEventCreate

logger = logging.getLogger(__name__)


class CommunityEventRepository(BaseRepository):
    model = CommunityEvent
    label = "Community event"

    async def create(self, data: CommunityEventCreate) -> CommunityEvent:
        await self._require(User, data.created_by, "Creator")

        event = CommunityEvent(
            title=data.title,
            description=data.description,
            event_type=data.event_type,
            event_date=data.event_date,
            location=data.location,
            fee=data.fee,
            max_participants=data.max_participants,
            current_participants=0,
            is_active=True,
            created_by=data.created_by
        )
        event = await commit_and_refresh(self.session, event)
        logger.info(f"Created {event.event_type} event {event.id} on {event.event_date}")
        return event

    async def list_active(self) -> List[CommunityEvent]:
        result = await self.session.execute(
            select(CommunityEvent)
            .where(CommunityEvent.is_active.is_(True))
            .order_by(CommunityEvent.event_date.desc(), CommunityEvent.id.desc())
        )
        return list(result.scalars().all())
