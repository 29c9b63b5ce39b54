from sqlalchemy import Column, Integer, Boolean, JSON
from app.database import Base

class GenerationSetting(Base):
    """Single-row table holding the generate panel's last used values."""
    __tablename__ = "generation_settings"

    id = Column(Integer, primary_key=True)

    max_results = Column(Integer, nullable=False, default=50)
    include_optional = Column(Boolean, nullable=False, default=True)
    min_credits = Column(Integer, nullable=False, default=12)
    max_credits = Column(Integer, nullable=False, default=18)
    blocked_days = Column(JSON, nullable=False, default=list)
    # NULL 代表不限制；預設值由 GenerationSettingsOut 給，這裡不能設 default
    earliest_start = Column(Integer, nullable=True)
    latest_end = Column(Integer, nullable=True)
    min_gap_minutes = Column(Integer, nullable=False, default=10)
