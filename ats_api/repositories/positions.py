"""Repository for job positions."""

from ats_api.models import Position

from .base import SqlAlchemyRepository


class PositionRepository(SqlAlchemyRepository[Position]):
    model = Position

    def list_visible(self) -> list[Position]:
        """Positions published to the frontend, newest first."""
        return (
            self.session.query(Position)
            .filter(Position.is_visible.is_(True))
            .order_by(Position.id.desc())
            .all()
        )
