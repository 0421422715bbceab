"""Pydantic schemas for Position endpoints."""

from datetime import datetime
from typing import Optional

from .base import CamelModel


class PositionListItem(CamelModel):
    """Schema for position in list response."""

    id: int
    title: str
    status: str
    is_visible: bool
    location: Optional[str] = None
    employment_type: Optional[str] = None
    application_deadline: Optional[datetime] = None


class PositionResponse(PositionListItem):
    """Schema for full position response."""

    description: Optional[str] = None
    job_description: Optional[str] = None
    requirements: Optional[str] = None
    responsibilities: Optional[str] = None
    benefits: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    contact_info: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
