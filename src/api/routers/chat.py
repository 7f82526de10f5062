from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.chat_messages import ChatMessageRepository
from src.api.schemas.chat import ChatMessageCreate, ChatMessageResponse

router = APIRouter()


@router.post("/messages", response_model=ChatMessageResponse, status_code=status.HTTP_201_CREATED)
async def send_chat_message(
    message_data: ChatMessageCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Send a chat message from one user to another
    """
    return await ChatMessageRepository(db).send(message_data)


@router.get("/messages", response_model=list[ChatMessageResponse])
async def get_chat_messages(
    user_id1: int = Query(...),
    user_id2: int = Query(...),
    db: AsyncSession = Depends(get_db)
):
    """
    Get the conversation between two users, oldest message first
    """
    return await ChatMessageRepository(db).conversation(user_id1, user_id2)
