"""Pydantic schemas for Candidate endpoints."""

from datetime import date, datetime
from typing import Optional, Union

from pydantic import EmailStr, Field

from .base import CamelModel

# Dates are passed through as sent; domain records parse them
DateInput = Union[date, str]


class EducationCreate(CamelModel):
    """Education entry submitted with a candidate."""

    institution: str = Field(max_length=100)
    title: str = Field(max_length=250)
    start_date: DateInput
    end_date: Optional[DateInput] = None


class WorkExperienceCreate(CamelModel):
    """Work experience entry submitted with a candidate."""

    company: str = Field(max_length=100)
    position: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=200)
    start_date: DateInput
    end_date: Optional[DateInput] = None


class CandidateBase(CamelModel):
    """Base candidate fields."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=15)
    address: Optional[str] = Field(default=None, max_length=100)


class CandidateCreate(CandidateBase):
    """Schema for creating a candidate with nested history."""

    educations: list[EducationCreate] = []
    work_experiences: list[WorkExperienceCreate] = []


class CandidateUpdate(CandidateBase):
    """Schema for replacing a candidate's own fields."""


class EducationResponse(CamelModel):
    id: int
    institution: str
    title: str
    start_date: date
    end_date: Optional[date] = None
    candidate_id: Optional[int] = None


class WorkExperienceResponse(CamelModel):
    id: int
    company: str
    position: str
    description: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    candidate_id: Optional[int] = None


class CandidateResponse(CandidateBase):
    """Schema for candidate response."""

    id: int
    educations: list[EducationResponse] = []
    work_experiences: list[WorkExperienceResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
