from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.database import get_db
from src.api.repositories.farm_plots import FarmPlotRepository
from src.api.schemas.farm import FarmPlotCreate, FarmPlotResponse

router = APIRouter()


@router.post("/", response_model=FarmPlotResponse, status_code=status.HTTP_201_CREATED)
async def create_farm_plot(
    plot_data: FarmPlotCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Create a farm plot under an existing partnership
    """
    return await FarmPlotRepository(db).create(plot_data)
