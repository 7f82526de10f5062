from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class ChatMessageCreate(BaseModel):
    """Schema for sending a chat message"""
    sender_id: int
    receiver_id: int
    message: str = Field(..., min_length=1, max_length=2000)


class ChatMessageResponse(BaseModel):
    """Schema for individual chat message"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    receiver_id: int
    message: str
    is_read: bool
    created_at: datetime
