"""Repositories for candidates and their nested rows."""

from typing import Optional

from sqlalchemy.orm import selectinload

from ats_api.models import Candidate, Education, WorkExperience

from .base import SqlAlchemyRepository


class CandidateRepository(SqlAlchemyRepository[Candidate]):
    """Candidates, loaded together with education and work experience."""

    model = Candidate

    def get(self, record_id: int) -> Optional[Candidate]:
        return (
            self.session.query(Candidate)
            .options(
                selectinload(Candidate.educations),
                selectinload(Candidate.work_experiences),
            )
            .filter(Candidate.id == record_id)
            .first()
        )

    def get_all(self, offset: int = 0, limit: Optional[int] = None) -> list[Candidate]:
        query = (
            self.session.query(Candidate)
            .options(
                selectinload(Candidate.educations),
                selectinload(Candidate.work_experiences),
            )
            .order_by(Candidate.id)
            .offset(offset)
        )
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_by_email(self, email: str) -> Optional[Candidate]:
        return self.session.query(Candidate).filter(Candidate.email == email).first()


class EducationRepository(SqlAlchemyRepository[Education]):
    model = Education

    def for_candidate(self, candidate_id: int) -> list[Education]:
        return (
            self.session.query(Education)
            .filter(Education.candidate_id == candidate_id)
            .order_by(Education.start_date)
            .all()
        )


class WorkExperienceRepository(SqlAlchemyRepository[WorkExperience]):
    model = WorkExperience

    def for_candidate(self, candidate_id: int) -> list[WorkExperience]:
        return (
            self.session.query(WorkExperience)
            .filter(WorkExperience.candidate_id == candidate_id)
            .order_by(WorkExperience.start_date)
            .all()
        )
