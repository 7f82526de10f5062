from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from src.api.models.enums import ActivityType
from src.api.schemas.common import DecimalNumber


class FarmPlotCreate(BaseModel):
    """Schema for creating a farm plot"""
    partnership_id: int
    plot_name: str = Field(..., min_length=1, max_length=255)
    location_coordinates: str = Field(..., min_length=1, description="JSON string for lat/lng")
    area_hectares: Decimal = Field(..., gt=0, max_digits=10, decimal_places=4)
    soil_type: Optional[str] = Field(None, max_length=100)


class FarmPlotResponse(BaseModel):
    """Schema for farm plot response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    partnership_id: int
    plot_name: str
    location_coordinates: str
    area_hectares: DecimalNumber
    soil_type: Optional[str]
    created_at: datetime
    updated_at: datetime


class FarmActivityCreate(BaseModel):
    """Schema for logging a farm activity"""
    farm_plot_id: int
    activity_type: ActivityType
    description: str
    activity_date: datetime
    photos: Optional[List[str]] = None
    videos: Optional[List[str]] = None
    created_by: int


class FarmActivityResponse(BaseModel):
    """Schema for farm activity response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    farm_plot_id: int
    activity_type: ActivityType
    description: str
    activity_date: datetime
    photos: Optional[List[str]]
    videos: Optional[List[str]]
    created_by: int
    created_at: datetime


class RecentActivity(FarmActivityResponse):
    """Farm activity with its creator's display name, as shown on dashboards"""
    creator_name: str
