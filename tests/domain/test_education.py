"""Tests for the Education record: construction and save()."""

from datetime import date, datetime, timezone
from unittest.mock import Mock

import pytest

from ats_api.domain import Education, InvalidDateError, MissingFieldError


@pytest.fixture
def backend():
    """Backend double exposing only create/update."""
    return Mock(spec=["create", "update"])


class UniqueConstraintError(Exception):
    """Stand-in for a driver error carrying a code."""

    def __init__(self, code: str, message: str):
        self.code = code
        super().__init__(message)


class TestConstruction:
    def test_all_properties(self):
        education = Education({
            "id": 1,
            "institution": "Test University",
            "title": "Bachelor of Science",
            "startDate": "2020-01-01",
            "endDate": "2024-01-01",
            "candidateId": 5,
        })

        assert education.id == 1
        assert education.institution == "Test University"
        assert education.title == "Bachelor of Science"
        assert education.start_date == date(2020, 1, 1)
        assert education.end_date == date(2024, 1, 1)
        assert education.candidate_id == 5

    def test_minimal_properties(self):
        education = Education({
            "institution": "Test University",
            "title": "Bachelor of Science",
            "start_date": "2020-01-01",
        })

        assert education.id is None
        assert education.end_date is None
        assert education.candidate_id is None
        assert education.is_persisted is False

    def test_date_objects_are_kept(self):
        start = date(2020, 1, 1)
        end = datetime(2024, 1, 1, 12, 30)

        education = Education({
            "institution": "U",
            "title": "T",
            "start_date": start,
            "end_date": end,
        })

        assert education.start_date is start
        assert education.end_date is end

    def test_text_and_date_inputs_normalize_the_same(self):
        from_text = Education({
            "institution": "U", "title": "T",
            "start_date": "2020-01-01", "end_date": "2024-06-30",
        })
        from_dates = Education({
            "institution": "U", "title": "T",
            "start_date": date(2020, 1, 1), "end_date": date(2024, 6, 30),
        })

        assert from_text.start_date == from_dates.start_date
        assert from_text.end_date == from_dates.end_date

    def test_timestamp_text_parses_to_datetime(self):
        education = Education({
            "institution": "U", "title": "T",
            "start_date": "2020-01-01T00:00:00.000Z",
        })

        assert education.start_date == datetime(2020, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("data", [
        {"end_date": None},
        {"endDate": None},
        {},
    ])
    def test_missing_or_null_end_date_is_absent(self, data):
        education = Education({"institution": "U", "title": "T", "start_date": "2020-01-01", **data})

        assert education.end_date is None

    def test_unparseable_start_date(self):
        with pytest.raises(InvalidDateError) as excinfo:
            Education({"institution": "U", "title": "T", "start_date": "not-a-date"})

        assert excinfo.value.field == "start_date"
        assert excinfo.value.value == "not-a-date"

    @pytest.mark.parametrize("value", ["", "2020-13-45", 20200101])
    def test_unparseable_end_date(self, value):
        with pytest.raises(InvalidDateError):
            Education({"institution": "U", "title": "T", "start_date": "2020-01-01", "end_date": value})

    def test_missing_start_date(self):
        with pytest.raises(MissingFieldError):
            Education({"institution": "U", "title": "T"})

    def test_empty_strings_are_kept(self):
        education = Education({"institution": "", "title": "", "start_date": "2020-01-01"})

        assert education.institution == ""
        assert education.title == ""

    def test_long_and_special_strings_are_copied_verbatim(self):
        long_name = "A" * 1000
        special = "Bachelor of Science: Computer Science & Engineering"

        education = Education({
            "institution": long_name,
            "title": special,
            "start_date": "2020-01-01",
        })

        assert education.institution == long_name
        assert education.title == special

    def test_same_start_and_end_date(self):
        education = Education({
            "institution": "U", "title": "T",
            "start_date": "2020-01-01", "end_date": "2020-01-01",
        })

        assert education.start_date == education.end_date == date(2020, 1, 1)


class TestSaveCreate:
    def test_creates_when_id_is_absent(self, backend):
        created = {"id": 1, "institution": "U"}
        backend.create.return_value = created

        education = Education(
            {"institution": "U", "title": "T", "start_date": "2020-01-01", "end_date": "2024-01-01"},
            backend=backend,
        )
        result = education.save()

        backend.create.assert_called_once_with({
            "institution": "U",
            "title": "T",
            "start_date": date(2020, 1, 1),
            "end_date": date(2024, 1, 1),
        })
        backend.update.assert_not_called()
        assert result is created

    def test_includes_candidate_id_when_set(self, backend):
        education = Education(
            {"institution": "U", "title": "T", "start_date": "2020-01-01", "candidate_id": 5},
            backend=backend,
        )
        education.save()

        payload = backend.create.call_args.args[0]
        assert payload["candidate_id"] == 5

    def test_excludes_candidate_id_when_missing(self, backend):
        Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save()

        payload = backend.create.call_args.args[0]
        assert "candidate_id" not in payload

    def test_candidate_id_zero_is_dropped(self, backend):
        Education(
            {"institution": "U", "title": "T", "start_date": "2020-01-01", "candidate_id": 0},
            backend=backend,
        ).save()

        payload = backend.create.call_args.args[0]
        assert "candidate_id" not in payload

    def test_missing_end_date_is_sent_as_none(self, backend):
        Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save()

        payload = backend.create.call_args.args[0]
        assert "end_date" in payload
        assert payload["end_date"] is None

    def test_record_is_not_mutated(self, backend):
        backend.create.return_value = {"id": 42, "candidate_id": 7}

        education = Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend)
        education.save()

        assert education.id is None
        assert education.candidate_id is None

    def test_backend_passed_to_save_wins(self, backend):
        other = Mock(spec=["create", "update"])

        Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save(other)

        other.create.assert_called_once()
        backend.create.assert_not_called()

    def test_save_without_backend(self):
        education = Education({"institution": "U", "title": "T", "start_date": "2020-01-01"})

        with pytest.raises(RuntimeError):
            education.save()


class TestSaveUpdate:
    def test_updates_when_id_is_present(self, backend):
        updated = object()
        backend.update.return_value = updated

        education = Education(
            {"id": 5, "institution": "U", "title": "T", "start_date": date(2020, 1, 1), "candidate_id": 10},
            backend=backend,
        )
        result = education.save()

        backend.update.assert_called_once_with(5, {
            "institution": "U",
            "title": "T",
            "start_date": date(2020, 1, 1),
            "end_date": None,
            "candidate_id": 10,
        })
        backend.create.assert_not_called()
        assert result is updated

    def test_excludes_candidate_id_when_missing(self, backend):
        Education({"id": 5, "institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save()

        record_id, payload = backend.update.call_args.args
        assert record_id == 5
        assert "candidate_id" not in payload


class TestSaveErrors:
    def test_create_error_propagates_unchanged(self, backend):
        error = RuntimeError("Database error")
        backend.create.side_effect = error

        education = Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend)

        with pytest.raises(RuntimeError) as excinfo:
            education.save()

        assert excinfo.value is error
        assert backend.create.call_count == 1

    def test_update_error_propagates_unchanged(self, backend):
        error = RuntimeError("Update failed")
        backend.update.side_effect = error

        education = Education({"id": 1, "institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend)

        with pytest.raises(RuntimeError, match="Update failed") as excinfo:
            education.save()

        assert excinfo.value is error
        assert backend.update.call_count == 1

    def test_connection_error_propagates(self, backend):
        backend.create.side_effect = ConnectionError("Connection timeout")

        with pytest.raises(ConnectionError, match="Connection timeout"):
            Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save()

    def test_constraint_error_keeps_its_shape(self, backend):
        error = UniqueConstraintError("P2002", "Unique constraint failed")
        backend.create.side_effect = error

        with pytest.raises(UniqueConstraintError) as excinfo:
            Education({"institution": "U", "title": "T", "start_date": "2020-01-01"}, backend=backend).save()

        assert excinfo.value is error
        assert excinfo.value.code == "P2002"
