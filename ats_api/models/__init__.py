"""SQLAlchemy ORM models for the ATS API.

All models are imported here to ensure they're registered with Base.metadata
before any database operations.
"""

# Import base first
from ats_api.config.database import Base

# Candidate models
from .candidates import Candidate
from .educations import Education
from .work_experiences import WorkExperience

# Openings
from .positions import Position

__all__ = [
    "Base",
    # Candidates
    "Candidate",
    "Education",
    "WorkExperience",
    # Openings
    "Position",
]
