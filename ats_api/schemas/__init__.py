"""Pydantic schemas for API request/response validation.

All schemas use CamelCase for JSON field names (via alias_generator).
"""

from .base import CamelModel, ErrorResponse

# Re-export all schemas
from .candidates import (
    CandidateCreate,
    CandidateUpdate,
    CandidateResponse,
    EducationCreate,
    EducationResponse,
    WorkExperienceCreate,
    WorkExperienceResponse,
)
from .positions import (
    PositionListItem,
    PositionResponse,
)

__all__ = [
    # Base
    "CamelModel",
    "ErrorResponse",
    # Candidates
    "CandidateCreate",
    "CandidateUpdate",
    "CandidateResponse",
    "EducationCreate",
    "EducationResponse",
    "WorkExperienceCreate",
    "WorkExperienceResponse",
    # Positions
    "PositionListItem",
    "PositionResponse",
]
