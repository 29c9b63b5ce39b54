from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON
from sqlalchemy.orm import relationship
from app.database import Base

class SectionMeeting(Base):
    __tablename__ = "planner_meetings"

    id = Column(String(36), primary_key=True)
    section_id = Column(String(36), ForeignKey("planner_sections.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(100), nullable=False, default="Lecture")
    # ["Mon", "Wed"]
    days = Column(JSON, nullable=False, default=list)
    # 分鐘數（從 00:00 起算），未設定為 NULL
    start = Column(Integer)
    end = Column(Integer)
    location = Column(String(100), nullable=False, default="")
    mode = Column(String(32), nullable=False, default="in-person")
    is_async = Column(Boolean, nullable=False, default=False)

    position = Column(Integer, nullable=False, default=0)

    section = relationship("CourseSection", back_populates="meetings")
