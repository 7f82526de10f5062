from typing import List, Sequence, Tuple
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.farm import FarmActivity, FarmPlot
from src.api.models.user import User
from src.api.repositories.base import BaseRepository
from src.api.schemas.farm import FarmActivityCreate

logger = logging.getLogger(__name__)


class FarmActivityRepository(BaseRepository):
    model = FarmActivity
    label = "Farm activity"

    async def create(self, data: FarmActivityCreate) -> FarmActivity:
        await self._require(FarmPlot, data.farm_plot_id, "Farm plot")
        await self._require(User, data.created_by, "Creator")

        activity = FarmActivity(
            farm_plot_id=data.farm_plot_id,
            activity_type=data.activity_type,
            description=data.description,
            activity_date=data.activity_date,
            photos=data.photos,
            videos=data.videos,
            created_by=data.created_by
        )
        activity = await commit_and_refresh(self.session, activity)
        logger.info(f"Logged {activity.activity_type} activity {activity.id} on plot {activity.farm_plot_id}")
        return activity

    async def list_for_plot(self, farm_plot_id: int) -> List[FarmActivity]:
        """Activities on one plot, latest activity_date first"""
        result = await self.session.execute(
            select(FarmActivity)
            .join(User, FarmActivity.created_by == User.id)
            .where(FarmActivity.farm_plot_id == farm_plot_id)
            .order_by(FarmActivity.activity_date.desc(), FarmActivity.id.desc())
        )
        return list(result.scalars().all())

    async def recent_for_plots(
        self,
        farm_plot_ids: Sequence[int],
        limit: int
    ) -> List[Tuple[FarmActivity, str]]:
        """Most recently logged activities across plots, paired with the creator's name"""
        if not farm_plot_ids:
            return []

        result = await self.session.execute(
            select(FarmActivity, User.full_name)
            .join(User, FarmActivity.created_by == User.id)
            .where(FarmActivity.farm_plot_id.in_(farm_plot_ids))
            .order_by(FarmActivity.created_at.desc(), FarmActivity.id.desc())
            .limit(limit)
        )
        return [(activity, creator_name) for activity, creator_name in result.all()]
