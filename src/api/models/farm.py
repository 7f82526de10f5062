from sqlalchemy import Column, String, Integer, Numeric, Text, DateTime, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from src.api.core.database import Base
from src.api.models.enums import ActivityType, sql_enum

# JSONB on PostgreSQL, plain JSON elsewhere
MediaList = JSON().with_variant(JSONB(), "postgresql")


class FarmPlot(Base):
    __tablename__ = "farm_plots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    partnership_id = Column(Integer, ForeignKey("partnerships.id"), nullable=False, index=True)
    plot_name = Column(String(255), nullable=False)
    location_coordinates = Column(Text, nullable=False)  # JSON string for lat/lng
    area_hectares = Column(Numeric(10, 4), nullable=False)
    soil_type = Column(String(100))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<FarmPlot {self.plot_name}>"


class FarmActivity(Base):
    __tablename__ = "farm_activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    farm_plot_id = Column(Integer, ForeignKey("farm_plots.id"), nullable=False, index=True)
    activity_type = Column(sql_enum(ActivityType, "activity_type"), nullable=False)
    description = Column(Text, nullable=False)
    activity_date = Column(DateTime(timezone=True), nullable=False, index=True)
    photos = Column(MediaList)
    videos = Column(MediaList)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<FarmActivity {self.id} - {self.activity_type}>"
