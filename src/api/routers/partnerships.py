from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from src.api.core.database import get_db
from src.api.repositories.partnerships import PartnershipRepository
from src.api.schemas.dashboard import PartnerDashboardData
from src.api.schemas.partnership import PartnershipCreate, PartnershipResponse
from src.api.services.dashboard import DashboardService

router = APIRouter()


@router.post("/", response_model=PartnershipResponse, status_code=status.HTTP_201_CREATED)
async def create_partnership(
    partnership_data: PartnershipCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a partnership for a partner-role user

    New partnerships start at 0% progress, phase "planning", status "pending".
    """
    return await PartnershipRepository(db).create(partnership_data)


@router.get("/dashboard/{partner_id}", response_model=PartnerDashboardData)
async def get_partner_dashboard(
    partner_id: int,
    partnership_id: Optional[int] = Query(None, description="Show this partnership instead of the partner's first one"),
    db: AsyncSession = Depends(get_db)
):
    """
    Get the dashboard for a partner

    Includes the partnership, its farm plots, the 10 most recent activities,
    the expense summary, the 20 most recent notifications and all risk alerts.
    """
    return await DashboardService(db).get_partner_dashboard(partner_id, partnership_id)
