from typing import List
import logging

from sqlalchemy import select, and_, or_

from src.api.core.database import commit_and_refresh
from src.api.models.chat import ChatMessage
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.chat import ChatMessageCreate

logger = logging.getLogger(__name__)


class ChatMessageRepository(BaseRepository):
    model = ChatMessage
    label = "Chat message"

    async def send(self, data: ChatMessageCreate) -> ChatMessage:
        await self._require(User, data.sender_id, "Sender")
        await self._require(User, data.receiver_id, "Receiver")

        chat_message = ChatMessage(
            sender_id=data.sender_id,
            receiver_id=data.receiver_id,
            message=data.message,
            is_read=False
        )
        chat_message = await commit_and_refresh(self.session, chat_message)
        logger.info(f"Chat message {chat_message.id} sent from {chat_message.sender_id} to {chat_message.receiver_id}")
        return chat_message

    async def conversation(self, user_id1: int, user_id2: int) -> List[ChatMessage]:
        """Messages exchanged between two users in either direction, oldest first"""
        result = await self.session.execute(
            select(ChatMessage)
            .where(
                or_(
                    and_(ChatMessage.sender_id == user_id1, ChatMessage.receiver_id == user_id2),
                    and_(ChatMessage.sender_id == user_id2, ChatMessage.receiver_id == user_id1)
                )
            )
            .order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc())
        )
        return list(result.scalars().all())
