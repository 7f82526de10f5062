"""Closed value sets shared by the ORM models and the request schemas"""

from typing import Literal, get_args

from sqlalchemy import Enum

UserRole = Literal["admin", "partner", "farmer", "management"]
PartnershipStatus = Literal["pending", "active", "completed", "cancelled"]
ActivityType = Literal["planting", "fertilizing", "watering", "pest_control", "harvesting", "other"]
ExpenseType = Literal["equipment", "labor", "land_rental", "seeds", "fertilizer", "insurance", "other"]
RiskType = Literal["weather", "pest", "disease", "flood", "drought", "other"]
EventType = Literal["farm_visit", "workshop", "meeting", "harvest_celebration", "other"]
NotificationType = Literal["payment", "progress_update", "risk_alert", "event", "general"]


def sql_enum(values, name: str) -> Enum:
    """Named SQL enum built from a Literal alias"""
    return Enum(*get_args(values), name=name)
