"""Work experience record."""

from datetime import date
from typing import Any, Mapping, Optional

from .base import RecordBackend, UpsertableRecord, read_field
from .dates import normalize_date, normalize_optional_date


class WorkExperience(UpsertableRecord):
    """A past or current job, optionally owned by a candidate."""

    fields = ("company", "position", "description", "start_date", "end_date", "candidate_id")

    def __init__(
        self,
        data: Mapping[str, Any],
        backend: Optional[RecordBackend] = None,
    ):
        super().__init__(data, backend)
        self.company: str = read_field(data, "company")
        self.position: str = read_field(data, "position")
        self.description: Optional[str] = read_field(data, "description", None)
        self.start_date: date = normalize_date(read_field(data, "start_date"), "start_date")
        self.end_date: Optional[date] = normalize_optional_date(
            read_field(data, "end_date", None), "end_date"
        )
        self.candidate_id: Optional[int] = read_field(data, "candidate_id", None)

    def to_payload(self) -> dict[str, Any]:
        payload = {
            "company": self.company,
            "position": self.position,
            "description": self.description,
            "start_date": self.start_date,
            "end_date": self.end_date,
        }
        if self.candidate_id:
            payload["candidate_id"] = self.candidate_id
        return payload
