from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from src.api.models.enums import EventType
from src.api.schemas.common import DecimalNumber


class CommunityEventCreate(BaseModel):
    """Schema for creating a community event"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    event_type: EventType
    event_date: datetime
    location: str = Field(..., min_length=1, max_length=255)
    fee: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    max_participants: Optional[int] = Field(None, gt=0)
    created_by: int


class CommunityEventResponse(BaseModel):
    """Schema for community event response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    event_type: EventType
    event_date: datetime
    location: str
    fee: DecimalNumber
    max_participants: Optional[int]
    current_participants: int
    is_active: bool
    created_by: int
    created_at: datetime
