from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.financial_records import FinancialRecordRepository
from src.api.schemas.finance import FinancialRecordCreate, FinancialRecordResponse, FinancialSummary
from src.api.services.financial_summary import FinancialSummaryService

router = APIRouter()


@router.post("/records", response_model=FinancialRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_financial_record(
    record_data: FinancialRecordCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record an expense against a partnership
    """
    return await FinancialRecordRepository(db).create(record_data)


@router.get("/summary/{partnership_id}", response_model=FinancialSummary)
async def get_financial_summary(
    partnership_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    Get the financial summary of a partnership

    Returns total expenses, the per-type breakdown, the yield and price
    assumptions, and the projected revenue of all its plots.
    """
    return await FinancialSummaryService(db).compute(partnership_id)
