from sqlalchemy import Column, String, Integer, Boolean
from sqlalchemy.orm import relationship
from app.database import Base

class PlannerCourse(Base):
    __tablename__ = "planner_courses"

    id = Column(String(36), primary_key=True)

    code = Column(String(32), nullable=False, default="")
    name = Column(String(255), nullable=False, default="")

    credits = Column(Integer, nullable=False, default=3)
    required = Column(Boolean, nullable=False, default=False)
    priority = Column(Integer, nullable=False, default=3)

    # 課程列表的顯示順序
    position = Column(Integer, nullable=False, default=0)

    # relationship
    sections = relationship(
        "CourseSection",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="CourseSection.position",
    )
