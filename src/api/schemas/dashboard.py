from pydantic import BaseModel
from typing import List

from src.api.schemas.partnership import PartnershipResponse
from src.api.schemas.farm import FarmPlotResponse, RecentActivity
from src.api.schemas.finance import ExpenseSummary
from src.api.schemas.notification import NotificationResponse
from src.api.schemas.risk import RiskAlertResponse


class PartnerDashboardData(BaseModel):
    """Everything a partner's dashboard shows, in one payload"""
    partnership: PartnershipResponse
    farm_plots: List[FarmPlotResponse]
    recent_activities: List[RecentActivity]
    financial_summary: ExpenseSummary
    notifications: List[NotificationResponse]
    risk_alerts: List[RiskAlertResponse]
