from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class CourseSection(Base):
    __tablename__ = "planner_sections"

    id = Column(String(36), primary_key=True)
    course_id = Column(String(36), ForeignKey("planner_courses.id", ondelete="CASCADE"), nullable=False, index=True)

    label = Column(String(32), nullable=False, default="001")
    position = Column(Integer, nullable=False, default=0)

    course = relationship("PlannerCourse", back_populates="sections")
    meetings = relationship(
        "SectionMeeting",
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="SectionMeeting.position",
    )
