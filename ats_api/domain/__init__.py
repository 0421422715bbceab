"""Domain records for candidates and their history."""

from .base import RecordBackend, UpsertableRecord
from .candidate import Candidate
from .education import Education
from .exceptions import InvalidDateError, MissingFieldError, RecordError
from .work_experience import WorkExperience

__all__ = [
    "RecordBackend",
    "UpsertableRecord",
    "Candidate",
    "Education",
    "WorkExperience",
    "RecordError",
    "InvalidDateError",
    "MissingFieldError",
]
