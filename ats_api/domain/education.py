"""Education record."""

from datetime import date
from typing import Any, Mapping, Optional

from .base import RecordBackend, UpsertableRecord, read_field
from .dates import normalize_date, normalize_optional_date


class Education(UpsertableRecord):
    """An education entry, optionally owned by a candidate."""

    fields = ("institution", "title", "start_date", "end_date", "candidate_id")

    def __init__(
        self,
        data: Mapping[str, Any],
        backend: Optional[RecordBackend] = None,
    ):
        super().__init__(data, backend)
        self.institution: str = read_field(data, "institution")
        self.title: str = read_field(data, "title")
        self.start_date: date = normalize_date(read_field(data, "start_date"), "start_date")
        self.end_date: Optional[date] = normalize_optional_date(
            read_field(data, "end_date", None), "end_date"
        )
        self.candidate_id: Optional[int] = read_field(data, "candidate_id", None)

    def to_payload(self) -> dict[str, Any]:
        payload = {
            "institution": self.institution,
            "title": self.title,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }
        # A candidate_id of 0 is dropped along with None
        if self.candidate_id:
            payload["candidate_id"] = self.candidate_id
        return payload
