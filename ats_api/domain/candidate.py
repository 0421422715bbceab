"""Candidate record."""

from typing import Any, Mapping, Optional

from .base import RecordBackend, UpsertableRecord, read_field


class Candidate(UpsertableRecord):
    """
    A candidate's own fields.

    Education and work experience rows are separate records that point back
    at the candidate through ``candidate_id``; they are not part of this
    payload.
    """

    fields = ("first_name", "last_name", "email", "phone", "address")

    def __init__(
        self,
        data: Mapping[str, Any],
        backend: Optional[RecordBackend] = None,
    ):
        super().__init__(data, backend)
        self.first_name: str = read_field(data, "first_name")
        self.last_name: str = read_field(data, "last_name")
        self.email: str = read_field(data, "email")
        self.phone: Optional[str] = read_field(data, "phone", None)
        self.address: Optional[str] = read_field(data, "address", None)

    def to_payload(self) -> dict[str, Any]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
        }
