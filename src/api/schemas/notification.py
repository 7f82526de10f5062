from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from src.api.models.enums import NotificationType


class NotificationCreate(BaseModel):
    """Schema for creating a notification"""
    user_id: int
    title: str = Field(..., min_length=1, max_length=255)
    message: str
    notification_type: NotificationType


class NotificationResponse(BaseModel):
    """Schema for notification response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    message: str
    notification_type: NotificationType
    is_read: bool
    created_at: datetime
