from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.farm_activities import FarmActivityRepository
from src.api.schemas.farm import FarmActivityCreate, FarmActivityResponse

router = APIRouter()


@router.post("/", response_model=FarmActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_farm_activity(
    activity_data: FarmActivityCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Log an activity on a farm plot

    Both the farm plot and the creating user must exist.
    """
    return await FarmActivityRepository(db).create(activity_data)


@router.get("/plot/{farm_plot_id}", response_model=list[FarmActivityResponse])
async def get_farm_activities(
    farm_plot_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    List the activities of a farm plot, latest activity date first
    """
    return await FarmActivityRepository(db).list_for_plot(farm_plot_id)
