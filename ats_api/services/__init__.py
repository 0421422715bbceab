"""Business logic services for the ATS API."""

from .candidate_service import CandidateService

__all__ = ["CandidateService"]
