"""Team and opportunity repositories.

The scoring pipeline never touches storage; the matching engine and the
API go through these interfaces. The in-memory implementations back the
demo deployment and the tests.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from models.schemas.opportunity import Opportunity
from models.schemas.team import Team

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Team, Opportunity)


class RecordStore(ABC, Generic[RecordT]):
    """CRUD interface shared by the team and opportunity stores."""

    @abstractmethod
    def get(self, record_id: str) -> RecordT | None:
        """Return the record, or None if it does not exist."""

    @abstractmethod
    def list(self) -> list[RecordT]:
        """Return all records in insertion order."""

    @abstractmethod
    def add(self, record: RecordT) -> RecordT:
        """Insert a record, assigning an id if it has none."""

    @abstractmethod
    def update(self, record_id: str, record: RecordT) -> RecordT:
        """Replace a record. Raises KeyError if missing."""

    @abstractmethod
    def delete(self, record_id: str) -> None:
        """Remove a record. Raises KeyError if missing."""

    def __len__(self) -> int:
        return len(self.list())


class TeamStore(RecordStore[Team], ABC):
    pass


class OpportunityStore(RecordStore[Opportunity], ABC):
    pass


class _InMemoryStore:
    kind = "record"

    def __init__(self, records=()) -> None:
        self._records: dict = {}
        for record in records:
            self.add(record)

    def get(self, record_id: str):
        return self._records.get(record_id)

    def list(self):
        return list(self._records.values())

    def add(self, record):
        if not record.id:
            record = record.model_copy(update={"id": uuid.uuid4().hex})
        if record.id in self._records:
            raise ValueError(f"{self.kind} {record.id} already exists")
        self._records[record.id] = record
        logger.debug("Added %s %s", self.kind, record.id)
        return record

    def update(self, record_id: str, record):
        if record_id not in self._records:
            raise KeyError(record_id)
        record = record.model_copy(update={"id": record_id})
        self._records[record_id] = record
        return record

    def delete(self, record_id: str) -> None:
        if record_id not in self._records:
            raise KeyError(record_id)
        del self._records[record_id]
        logger.debug("Deleted %s %s", self.kind, record_id)

    def __len__(self) -> int:
        return len(self._records)


class InMemoryTeamStore(_InMemoryStore, TeamStore):
    kind = "team"


class InMemoryOpportunityStore(_InMemoryStore, OpportunityStore):
    kind = "opportunity"
