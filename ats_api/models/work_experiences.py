"""WorkExperience model."""

from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from ats_api.config.database import Base


class WorkExperience(Base):
    """Jobs held by a candidate."""

    __tablename__ = "work_experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    description = Column(String(200), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # NULL for the current job

    candidate_id = Column(
        Integer,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # Relationships
    candidate = relationship("Candidate", back_populates="work_experiences")

    def __repr__(self) -> str:
        return f"<WorkExperience(id={self.id}, company={self.company})>"
