"""
ORM models for the AgriPartner API

Importing this package registers every table on Base.metadata.
"""

from .user import User
from .partnership import Partnership
from .farm import FarmPlot, FarmActivity
from .finance import FinancialRecord, InsurancePolicy
from .risk import RiskAlert
from .community import CommunityEvent
from .notification import Notification
from .chat import ChatMessage

__all__ = [
    'User',
    'Partnership',
    'FarmPlot',
    'FarmActivity',
    'FinancialRecord',
    'InsurancePolicy',
    'RiskAlert',
    'CommunityEvent',
    'Notification',
    'ChatMessage'
]
