from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

from src.api.models.enums import RiskType


class RiskAlertCreate(BaseModel):
    """Schema for raising a risk alert on a farm plot"""
    farm_plot_id: int
    risk_type: RiskType
    severity_level: int = Field(..., ge=1, le=5, description="1 (lowest) to 5 (highest)")
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    alert_date: datetime


class RiskAlertResponse(BaseModel):
    """Schema for risk alert response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    farm_plot_id: int
    risk_type: RiskType
    severity_level: int
    title: str
    description: str
    alert_date: datetime
    is_resolved: bool
    created_at: datetime
