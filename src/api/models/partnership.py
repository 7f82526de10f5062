from sqlalchemy import Column, String, Integer, Numeric, Date, DateTime, ForeignKey
from sqlalchemy.sql import func

from src.api.core.database import Base
from src.api.models.enums import PartnershipStatus, sql_enum


class Partnership(Base):
    __tablename__ = "partnerships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    partner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    investment_amount = Column(Numeric(15, 2), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    estimated_return = Column(Numeric(15, 2), nullable=False)
    current_progress = Column(Numeric(5, 2), default=0, nullable=False)
    current_phase = Column(String(100), default="planning", nullable=False)
    status = Column(sql_enum(PartnershipStatus, "partnership_status"), default="pending", nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Partnership {self.id} - partner {self.partner_id} - {self.status}>"
