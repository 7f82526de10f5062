from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime
from decimal import Decimal

from src.api.models.enums import PartnershipStatus
from src.api.schemas.common import DecimalNumber


class PartnershipCreate(BaseModel):
    """Schema for creating a partnership"""
    partner_id: int
    investment_amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    start_date: date
    end_date: date
    estimated_return: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)

    @model_validator(mode='after')
    def check_date_range(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class PartnershipResponse(BaseModel):
    """Schema for partnership response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    partner_id: int
    investment_amount: DecimalNumber
    start_date: date
    end_date: date
    estimated_return: DecimalNumber
    current_progress: DecimalNumber
    current_phase: str
    status: PartnershipStatus
    created_at: datetime
    updated_at: datetime
