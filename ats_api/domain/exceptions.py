"""Exceptions raised while building domain records."""

from typing import Any


class RecordError(ValueError):
    """Base class for errors in caller-supplied record data."""


class InvalidDateError(RecordError):
    """A date-like value could not be parsed into a date."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid date for {field}: {value!r}")


class MissingFieldError(RecordError):
    """A required field was not supplied."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")
