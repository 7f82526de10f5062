from typing import List
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.farm import FarmPlot
from src.api.models.partnership import Partnership
from src.api.repositories.base import BaseRepository
from src.api.schemas.farm import FarmPlotCreate

logger = logging.getLogger(__name__)


class FarmPlotRepository(BaseRepository):
    model = FarmPlot
    label = "Farm plot"

    async def create(self, data: FarmPlotCreate) -> FarmPlot:
        await self._require(Partnership, data.partnership_id, "Partnership")

        plot = FarmPlot(
            partnership_id=data.partnership_id,
            plot_name=data.plot_name,
            location_coordinates=data.location_coordinates,
            area_hectares=data.area_hectares,
            soil_type=data.soil_type or None
        )
        plot = await commit_and_refresh(self.session, plot)
        logger.info(f"Created farm plot {plot.id} for partnership {plot.partnership_id}")
        return plot

    async def list_for_partnership(self, partnership_id: int) -> List[FarmPlot]:
        result = await self.session.execute(
            select(FarmPlot)
            .where(FarmPlot.partnership_id == partnership_id)
            .order_by(FarmPlot.id)
        )
        return list(result.scalars().all())
