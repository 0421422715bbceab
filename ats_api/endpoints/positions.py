"""Position read endpoints."""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ats_api.config.database import get_db
from ats_api.middleware.error_handler import NotFoundError
from ats_api.repositories import PositionRepository
from ats_api.schemas.base import ErrorResponse
from ats_api.schemas.positions import PositionListItem, PositionResponse

logger = structlog.get_logger()
router = APIRouter()


@router.get("", response_model=list[PositionListItem])
async def list_positions(
    db: Session = Depends(get_db),
):
    """List positions visible to the frontend."""
    positions = PositionRepository(db).list_visible()
    return [PositionListItem.model_validate(p) for p in positions]


@router.get(
    "/{position_id}",
    response_model=PositionResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_position(
    position_id: int,
    db: Session = Depends(get_db),
):
    """Get a position by ID."""
    position = PositionRepository(db).get(position_id)
    if not position:
        raise NotFoundError("Position", position_id)
    return PositionResponse.model_validate(position)
