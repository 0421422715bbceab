"""Candidate CRUD endpoints."""

import structlog
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ats_api.config.database import get_db
from ats_api.schemas.base import ErrorResponse
from ats_api.schemas.candidates import (
    CandidateCreate,
    CandidateUpdate,
    CandidateResponse,
)
from ats_api.services.candidate_service import CandidateService

logger = structlog.get_logger()
router = APIRouter()


@router.get("", response_model=list[CandidateResponse])
async def list_candidates(
    db: Session = Depends(get_db),
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """List candidates with their education and work history."""
    candidates = CandidateService(db).list_candidates(offset=offset, limit=limit)
    return [CandidateResponse.model_validate(c) for c in candidates]


@router.get(
    "/{candidate_id}",
    response_model=CandidateResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_candidate(
    candidate_id: int,
    db: Session = Depends(get_db),
):
    """Get a candidate by ID."""
    candidate = CandidateService(db).get_candidate(candidate_id)
    return CandidateResponse.model_validate(candidate)


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=201,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_candidate(
    data: CandidateCreate,
    db: Session = Depends(get_db),
):
    """Create a candidate with nested education and work experience."""
    candidate = CandidateService(db).add_candidate(data)
    return CandidateResponse.model_validate(candidate)


@router.put(
    "/{candidate_id}",
    response_model=CandidateResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_candidate(
    candidate_id: int,
    data: CandidateUpdate,
    db: Session = Depends(get_db),
):
    """Replace a candidate's personal details."""
    candidate = CandidateService(db).update_candidate(candidate_id, data)
    return CandidateResponse.model_validate(candidate)


@router.delete(
    "/{candidate_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_candidate(
    candidate_id: int,
    db: Session = Depends(get_db),
):
    """Delete a candidate and their history."""
    CandidateService(db).delete_candidate(candidate_id)
    return Response(status_code=204)
