from typing import List, Optional, Sequence
import logging

from sqlalchemy import select

from src.api.core.database import commit_and_refresh
from src.api.models.farm import FarmPlot
from src.api.models.risk import RiskAlert
from src.api.repositories.base import BaseRepository
from src.api.schemas.risk import RiskAlertCreate

logger = logging.getLogger(__name__)


class RiskAlertRepository(BaseRepository):
    model = RiskAlert
    label = "Risk alert"

    async def create(self, data: RiskAlertCreate) -> RiskAlert:
        await self._require(FarmPlot, data.farm_plot_id, "Farm plot")

        alert = RiskAlert(
            farm_plot_id=data.farm_plot_id,
            risk_type=data.risk_type,
            severity_level=data.severity_level,
            title=data.title,
            description=data.description,
            alert_date=data.alert_date,
            is_resolved=False
        )
        alert = await commit_and_refresh(self.session, alert)
        logger.info(f"Raised {alert.risk_type} alert {alert.id} (severity {alert.severity_level}) on plot {alert.farm_plot_id}")
        return alert

    async def list_alerts(self, farm_plot_id: Optional[int] = None) -> List[RiskAlert]:
        """Alerts ranked by severity, newest first within a severity"""
        query = select(RiskAlert)
        if farm_plot_id is not None:
            query = query.where(RiskAlert.farm_plot_id == farm_plot_id)

        query = query.order_by(
            RiskAlert.severity_level.desc(),
            RiskAlert.created_at.desc(),
            RiskAlert.id.desc()
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_for_plots(self, farm_plot_ids: Sequence[int]) -> List[RiskAlert]:
        """Alerts across several plots, newest first"""
        if not farm_plot_ids:
            return []

        result = await self.session.execute(
            select(RiskAlert)
            .where(RiskAlert.farm_plot_id.in_(farm_plot_ids))
            .order_by(RiskAlert.created_at.desc(), RiskAlert.id.desc())
        )
        return list(result.scalars().all())
