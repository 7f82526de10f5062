from sqlalchemy import Column, String, Integer, Text, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func

from src.api.core.database import Base
from src.api.models.enums import RiskType, sql_enum


class RiskAlert(Base):
    __tablename__ = "risk_alerts"
    __table_args__ = (
        CheckConstraint("severity_level BETWEEN 1 AND 5", name="ck_risk_alerts_severity_level"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    farm_plot_id = Column(Integer, ForeignKey("farm_plots.id"), nullable=False, index=True)
    risk_type = Column(sql_enum(RiskType, "risk_type"), nullable=False)
    severity_level = Column(Integer, nullable=False, index=True)  # 1-5 scale
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    alert_date = Column(DateTime(timezone=True), nullable=False)
    is_resolved = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<RiskAlert {self.farm_plot_id} - {self.risk_type} - {self.severity_level}>"
