from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, Dict
from datetime import date, datetime
from decimal import Decimal

from src.api.models.enums import ExpenseType
from src.api.schemas.common import DecimalNumber


# Financial record schemas
class FinancialRecordCreate(BaseModel):
    """Schema for recording an expense against a partnership"""
    partnership_id: int
    expense_type: ExpenseType
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
    description: str
    transaction_date: datetime
    receipt_url: Optional[str] = None


class FinancialRecordResponse(BaseModel):
    """Schema for financial record response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    partnership_id: int
    expense_type: ExpenseType
    amount: DecimalNumber
    description: str
    transaction_date: datetime
    receipt_url: Optional[str]
    created_at: datetime


class ExpenseSummary(BaseModel):
    """Expense totals for one partnership"""
    total_expenses: DecimalNumber
    expense_breakdown: Dict[ExpenseType, DecimalNumber]


class FinancialSummary(ExpenseSummary):
    """Expense totals plus the revenue projection for one partnership"""
    estimated_yield: DecimalNumber = Field(..., description="Tons per hectare")
    current_market_price: DecimalNumber = Field(..., description="Currency per ton")
    projected_revenue: DecimalNumber


# Insurance schemas
class InsurancePolicyCreate(BaseModel):
    """Schema for creating an insurance policy"""
    partnership_id: int
    policy_number: str = Field(..., min_length=1, max_length=100)
    coverage_amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    premium_amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    start_date: date
    end_date: date
    coverage_details: str

    @model_validator(mode='after')
    def check_date_range(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class InsurancePolicyResponse(BaseModel):
    """Schema for insurance policy response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    partnership_id: int
    policy_number: str
    coverage_amount: DecimalNumber
    premium_amount: DecimalNumber
    start_date: date
    end_date: date
    coverage_details: str
    is_active: bool
    created_at: datetime
