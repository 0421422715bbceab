"""Position model for job openings."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Text, Float

from .base import BaseModel


class Position(BaseModel):
    """
    Job openings candidates can be considered for.
    """

    __tablename__ = "positions"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic info
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)  # Brief for listings
    status = Column(String(50), nullable=False, default="Borrador")  # Open, Contratado, Cerrado, Borrador
    is_visible = Column(Boolean, nullable=False, default=False)
    location = Column(String(255), nullable=True)

    # Full job description
    job_description = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    responsibilities = Column(Text, nullable=True)
    benefits = Column(Text, nullable=True)

    # Terms
    salary_min = Column(Float, nullable=True)
    salary_max = Column(Float, nullable=True)
    employment_type = Column(String(50), nullable=True)
    application_deadline = Column(DateTime, nullable=True)
    contact_info = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Position(id={self.id}, title={self.title})>"
