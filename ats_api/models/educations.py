"""Education model."""

from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from ats_api.config.database import Base


class Education(Base):
    """Education entries on a candidate's profile."""

    __tablename__ = "educations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    institution = Column(String(100), nullable=False)
    title = Column(String(250), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)  # NULL while studying

    candidate_id = Column(
        Integer,
        ForeignKey("candidates.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # Relationships
    candidate = relationship("Candidate", back_populates="educations")

    def __repr__(self) -> str:
        return f"<Education(id={self.id}, institution={self.institution})>"
