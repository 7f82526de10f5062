"""
Partner dashboard composition

Resolves the partner's partnership, then gathers plots, recent activity,
expenses, notifications and risk alerts into one PartnerDashboardData.
Any failing fetch aborts the whole call; no partial dashboard is returned.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.config import settings
from src.api.core.exceptions import NotFoundError
from src.api.models.partnership import Partnership
from src.api.repositories.farm_activities import FarmActivityRepository
from src.api.repositories.farm_plots import FarmPlotRepository
from src.api.repositories.financial_records import FinancialRecordRepository
from src.api.repositories.notifications import NotificationRepository
from src.api.repositories.partnerships import PartnershipRepository
from src.api.repositories.risk_alerts import RiskAlertRepository
from src.api.schemas.dashboard import PartnerDashboardData
from src.api.schemas.farm import FarmActivityResponse, FarmPlotResponse, RecentActivity
from src.api.schemas.notification import NotificationResponse
from src.api.schemas.partnership import PartnershipResponse
from src.api.schemas.risk import RiskAlertResponse
from src.api.services.financial_summary import summarize_expenses
from src.utils.logger import get_logger

logger = get_logger(__name__)


class DashboardService:
    """Builds the partner dashboard from the per-entity repositories"""

    def __init__(
        self,
        session: AsyncSession,
        activities_limit: Optional[int] = None,
        notifications_limit: Optional[int] = None
    ):
        self.partnerships = PartnershipRepository(session)
        self.plots = FarmPlotRepository(session)
        self.activities = FarmActivityRepository(session)
        self.records = FinancialRecordRepository(session)
        self.notifications = NotificationRepository(session)
        self.risk_alerts = RiskAlertRepository(session)
        self.activities_limit = activities_limit or settings.DASHBOARD_RECENT_ACTIVITIES_LIMIT
        self.notifications_limit = notifications_limit or settings.DASHBOARD_NOTIFICATIONS_LIMIT

    async def resolve_partnership(
        self,
        partner_id: int,
        partnership_id: Optional[int] = None
    ) -> Partnership:
        """
        Pick the partnership the dashboard is about

        A partner may own several partnerships. An explicit partnership_id
        must be one of them; otherwise the oldest one is used.
        """
        partnerships = await self.partnerships.list_for_partner(partner_id)
        if not partnerships:
            raise NotFoundError("Partnership not found for this partner")

        if partnership_id is None:
            if len(partnerships) > 1:
                logger.info(
                    f"Partner {partner_id} owns {len(partnerships)} partnerships; "
                    f"showing partnership {partnerships[0].id}"
                )
            return partnerships[0]

        for partnership in partnerships:
            if partnership.id == partnership_id:
                return partnership

        raise NotFoundError(f"Partnership {partnership_id} not found for partner {partner_id}")

    async def get_partner_dashboard(
        self,
        partner_id: int,
        partnership_id: Optional[int] = None
    ) -> PartnerDashboardData:
        partnership = await self.resolve_partnership(partner_id, partnership_id)

        farm_plots = await self.plots.list_for_partnership(partnership.id)
        plot_ids = [plot.id for plot in farm_plots]

        recent = await self.activities.recent_for_plots(plot_ids, self.activities_limit)
        recent_activities = [
            RecentActivity(
                **FarmActivityResponse.model_validate(activity).model_dump(),
                creator_name=creator_name
            )
            for activity, creator_name in recent
        ]

        financial_summary = summarize_expenses(await self.records.list_for_partnership(partnership.id))
        notifications = await self.notifications.list_for_user(partner_id, limit=self.notifications_limit)
        risk_alerts = await self.risk_alerts.list_for_plots(plot_ids)

        logger.info(
            f"Dashboard for partner {partner_id}: partnership {partnership.id}, "
            f"{len(farm_plots)} plots, {len(recent_activities)} activities, "
            f"{len(notifications)} notifications, {len(risk_alerts)} alerts"
        )

        return PartnerDashboardData(
            partnership=PartnershipResponse.model_validate(partnership),
            farm_plots=[FarmPlotResponse.model_validate(plot) for plot in farm_plots],
            recent_activities=recent_activities,
            financial_summary=financial_summary,
            notifications=[NotificationResponse.model_validate(n) for n in notifications],
            risk_alerts=[RiskAlertResponse.model_validate(alert) for alert in risk_alerts]
        )
