"""Candidate service: writes a candidate and its history in one transaction.

The candidate row is saved first so its id can be handed to each education
and work experience record as ``candidate_id``. Everything is flushed
through the repositories and committed once at the end; any failure rolls
the whole candidate back.
"""

from typing import Optional

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ats_api import domain, models
from ats_api.middleware.error_handler import ConflictError, NotFoundError
from ats_api.repositories import (
    CandidateRepository,
    EducationRepository,
    WorkExperienceRepository,
)
from ats_api.schemas.candidates import CandidateCreate, CandidateUpdate

logger = structlog.get_logger()


class CandidateService:
    """Create, update and remove candidates."""

    def __init__(self, db: Session):
        self.db = db
        self.candidates = CandidateRepository(db)
        self.educations = EducationRepository(db)
        self.work_experiences = WorkExperienceRepository(db)

    def list_candidates(self, offset: int = 0, limit: Optional[int] = None) -> list[models.Candidate]:
        return self.candidates.get_all(offset=offset, limit=limit)

    def get_candidate(self, candidate_id: int) -> models.Candidate:
        candidate = self.candidates.get(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", candidate_id)
        return candidate

    def add_candidate(self, data: CandidateCreate) -> models.Candidate:
        """Save a new candidate together with its education and work history."""
        if self.candidates.get_by_email(data.email):
            raise ConflictError("Email already exists", field="email")

        try:
            record = domain.Candidate(
                data.model_dump(exclude={"educations", "work_experiences"}),
                backend=self.candidates,
            )
            saved = record.save()

            for education in data.educations:
                domain.Education(
                    {**education.model_dump(), "candidate_id": saved.id},
                    backend=self.educations,
                ).save()

            for experience in data.work_experiences:
                domain.WorkExperience(
                    {**experience.model_dump(), "candidate_id": saved.id},
                    backend=self.work_experiences,
                ).save()

            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Candidate rejected by database", email=data.email, error=str(e.orig))
            raise ConflictError("Email already exists", field="email") from e
        except Exception:
            self.db.rollback()
            raise

        logger.info(
            "Candidate created",
            id=saved.id,
            educations=len(data.educations),
            work_experiences=len(data.work_experiences),
        )
        return self.get_candidate(saved.id)

    def update_candidate(self, candidate_id: int, data: CandidateUpdate) -> models.Candidate:
        """Replace a candidate's own fields. Nested rows are left as they are."""
        existing = self.candidates.get_by_email(data.email)
        if existing and existing.id != candidate_id:
            raise ConflictError("Email already exists", field="email")

        record = domain.Candidate(
            {**data.model_dump(), "id": candidate_id},
            backend=self.candidates,
        )
        try:
            record.save()
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError("Email already exists", field="email") from e
        except Exception:
            self.db.rollback()
            raise

        logger.info("Candidate updated", id=candidate_id)
        return self.get_candidate(candidate_id)

    def delete_candidate(self, candidate_id: int) -> None:
        """Delete a candidate; education and work rows go with it."""
        try:
            self.candidates.delete(candidate_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Candidate deleted", id=candidate_id)
