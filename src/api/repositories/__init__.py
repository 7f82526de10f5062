"""
Repository layer: one session-injected class per entity
"""

from src.api.repositories.base import BaseRepository
from src.api.repositories.users import UserRepository
from src.api.repositories.partnerships import PartnershipRepository
from src.api.repositories.farm_plots import FarmPlotRepository
from src.api.repositories.farm_activities import FarmActivityRepository
from src.api.repositories.financial_records import FinancialRecordRepository
from src.api.repositories.insurance_policies import InsurancePolicyRepository
from src.api.repositories.risk_alerts import RiskAlertRepository
from src.api.repositories.community_events import CommunityEventRepository
from src.api.repositories.notifications import NotificationRepository
from src.api.repositories.chat_messages import ChatMessageRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PartnershipRepository",
    "FarmPlotRepository",
    "FarmActivityRepository",
    "FinancialRecordRepository",
    "InsurancePolicyRepository",
    "RiskAlertRepository",
    "CommunityEventRepository",
    "NotificationRepository",
    "ChatMessageRepository",
]
