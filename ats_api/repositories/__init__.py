"""Persistence backends over SQLAlchemy sessions."""

from .base import RecordNotFoundError, SqlAlchemyRepository
from .candidates import CandidateRepository, EducationRepository, WorkExperienceRepository
from .positions import PositionRepository

__all__ = [
    "RecordNotFoundError",
    "SqlAlchemyRepository",
    "CandidateRepository",
    "EducationRepository",
    "WorkExperienceRepository",
    "PositionRepository",
]
