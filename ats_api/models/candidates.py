"""Candidate model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class Candidate(BaseModel):
    """
    A person in the hiring pipeline.

    Education and work experience rows are deleted with the candidate.
    """

    __tablename__ = "candidates"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Identity
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(15), nullable=True)
    address = Column(String(100), nullable=True)

    # Relationships
    educations = relationship(
        "Education",
        back_populates="candidate",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Education.start_date",
    )
    work_experiences = relationship(
        "WorkExperience",
        back_populates="candidate",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkExperience.start_date",
    )

    def __repr__(self) -> str:
        return f"<Candidate(id={self.id}, email={self.email})>"
