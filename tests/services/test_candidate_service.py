"""Tests for CandidateService."""

from datetime import date

import pytest

from ats_api import models
from ats_api.domain import InvalidDateError
from ats_api.middleware.error_handler import ConflictError, NotFoundError
from ats_api.repositories import RecordNotFoundError
from ats_api.schemas.candidates import CandidateCreate, CandidateUpdate
from ats_api.services.candidate_service import CandidateService


@pytest.fixture
def service(db_session):
    return CandidateService(db_session)


def test_add_candidate_with_history(service, candidate_payload):
    candidate = service.add_candidate(CandidateCreate(**candidate_payload))

    assert candidate.id is not None
    assert candidate.email == "edu.test@example.com"
    assert len(candidate.educations) == 1
    assert len(candidate.work_experiences) == 1
    assert candidate.educations[0].candidate_id == candidate.id
    assert candidate.educations[0].start_date == date(2020, 1, 1)
    assert candidate.work_experiences[0].company == "Test Company"


def test_add_candidate_without_history(service):
    candidate = service.add_candidate(CandidateCreate(
        first_name="Solo",
        last_name="Test",
        email="solo@example.com",
    ))

    assert candidate.educations == []
    assert candidate.work_experiences == []


def test_duplicate_email_is_a_conflict(service, candidate_payload):
    service.add_candidate(CandidateCreate(**candidate_payload))

    with pytest.raises(ConflictError) as excinfo:
        service.add_candidate(CandidateCreate(**candidate_payload))

    assert excinfo.value.status_code == 409


def test_bad_nested_date_rolls_back_candidate(service, db_session, candidate_payload):
    candidate_payload["educations"][0]["startDate"] = "not-a-date"

    with pytest.raises(InvalidDateError):
        service.add_candidate(CandidateCreate(**candidate_payload))

    assert db_session.query(models.Candidate).count() == 0
    assert db_session.query(models.Education).count() == 0


def test_update_candidate(service, candidate_payload):
    created = service.add_candidate(CandidateCreate(**candidate_payload))

    updated = service.update_candidate(created.id, CandidateUpdate(
        first_name="Renamed",
        last_name="Test",
        email="edu.test@example.com",
    ))

    assert updated.id == created.id
    assert updated.first_name == "Renamed"
    assert updated.phone is None
    assert len(updated.educations) == 1


def test_update_to_taken_email_is_a_conflict(service, candidate_payload):
    service.add_candidate(CandidateCreate(**candidate_payload))
    other = service.add_candidate(CandidateCreate(
        first_name="Other", last_name="Person", email="other@example.com",
    ))

    with pytest.raises(ConflictError):
        service.update_candidate(other.id, CandidateUpdate(
            first_name="Other", last_name="Person", email="edu.test@example.com",
        ))


def test_update_missing_candidate(service):
    with pytest.raises(RecordNotFoundError):
        service.update_candidate(404, CandidateUpdate(
            first_name="No", last_name="One", email="nobody@example.com",
        ))


def test_delete_candidate(service, db_session, candidate_payload):
    created = service.add_candidate(CandidateCreate(**candidate_payload))

    service.delete_candidate(created.id)

    with pytest.raises(NotFoundError):
        service.get_candidate(created.id)
    assert db_session.query(models.WorkExperience).count() == 0
