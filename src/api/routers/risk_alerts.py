from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from src.api.core.database import get_db
from src.api.repositories.risk_alerts import RiskAlertRepository
from src.api.schemas.risk import RiskAlertCreate, RiskAlertResponse

router = APIRouter()


@router.post("/", response_model=RiskAlertResponse, status_code=status.HTTP_201_CREATED)
async def create_risk_alert(
    alert_data: RiskAlertCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Raise a risk alert on a farm plot

    severity_level ranges from 1 (lowest) to 5 (highest).
    """
    return await RiskAlertRepository(db).create(alert_data)


@router.get("/", response_model=list[RiskAlertResponse])
async def get_risk_alerts(
    farm_plot_id: Optional[int] = Query(None, description="Only alerts for this farm plot"),
    db: AsyncSession = Depends(get_db)
):
    """
    List risk alerts, most severe first, newest first within a severity
    """
    return await RiskAlertRepository(db).list_alerts(farm_plot_id)
