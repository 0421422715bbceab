"""Upsertable records: in-memory entities that persist themselves.

A record either carries an ``id`` (it refers to an existing row) or it
does not (it has never been persisted). ``save()`` turns that into exactly
one backend call: ``create(payload)`` without an id, ``update(id, payload)``
with one. Whatever the backend returns is handed back untouched and the
record itself is never modified, so moving from transient to persisted
means building a new record from the returned row (see ``from_persisted``).

The backend is injected rather than created here, which keeps records free
of any session or engine handling.
"""

from typing import Any, Mapping, Optional, Protocol

import structlog
from humps import camelize

from .exceptions import MissingFieldError

logger = structlog.get_logger()

_MISSING = object()


class RecordBackend(Protocol):
    """Persistence capability a record saves through."""

    def create(self, payload: dict[str, Any]) -> Any:
        ...

    def update(self, record_id: int, payload: dict[str, Any]) -> Any:
        ...


def read_field(data: Mapping[str, Any], name: str, default: Any = _MISSING) -> Any:
    """
    Read ``name`` from caller data, accepting snake_case or camelCase keys.

    Raises MissingFieldError when the field is absent and no default is given.
    """
    if name in data:
        return data[name]
    camel = camelize(name)
    if camel in data:
        return data[camel]
    if default is _MISSING:
        raise MissingFieldError(name)
    return default


class UpsertableRecord:
    """
    Base class for records that insert or update depending on ``id``.

    Subclasses set ``fields`` (attribute names used by ``from_persisted``)
    and implement ``to_payload``.
    """

    fields: tuple[str, ...] = ()

    def __init__(
        self,
        data: Mapping[str, Any],
        backend: Optional[RecordBackend] = None,
    ):
        self.id: Optional[int] = read_field(data, "id", None)
        self._backend = backend

    def to_payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def save(self, backend: Optional[RecordBackend] = None) -> Any:
        """
        Persist the record through the backend.

        Returns the backend's persisted representation unchanged. Backend
        errors propagate as raised.
        """
        backend = backend or self._backend
        if backend is None:
            raise RuntimeError(f"{type(self).__name__} has no backend to save through")

        payload = self.to_payload()
        if self.id is None:
            logger.debug("Creating record", record=type(self).__name__)
            return backend.create(payload)

        logger.debug("Updating record", record=type(self).__name__, id=self.id)
        return backend.update(self.id, payload)

    @classmethod
    def from_persisted(cls, persisted: Any, backend: Optional[RecordBackend] = None):
        """Build a record from a backend row (ORM instance or mapping)."""
        if isinstance(persisted, Mapping):
            data = {name: persisted.get(name) for name in ("id",) + cls.fields}
        else:
            data = {name: getattr(persisted, name, None) for name in ("id",) + cls.fields}
        return cls(data, backend=backend)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
