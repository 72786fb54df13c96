"""Ordered in-memory record storage with copy-on-read and copy-on-write."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from hr_console.models.base import HRRecord

RecordT = TypeVar("RecordT", bound=HRRecord)


class EntityStore(Generic[RecordT]):
    """Backing list for one entity type.

    Callers never see the live list or the stored model instances: every read
    hands out deep copies and every write stores a deep copy of its input.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: list[RecordT] = []

    def __len__(self) -> int:
        return len(self._records)

    def seed(self, records: Iterable[RecordT]) -> None:
        self._records = [record.model_copy(deep=True) for record in records]

    def snapshot(self) -> list[RecordT]:
        return [record.model_copy(deep=True) for record in self._records]

    def index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    def find(self, record_id: int) -> RecordT | None:
        index = self.index_of(record_id)
        if index == -1:
            return None
        return self._records[index].model_copy(deep=True)

    def at(self, index: int) -> RecordT:
        return self._records[index].model_copy(deep=True)

    def next_id(self) -> int:
        return max((record.id for record in self._records), default=0) + 1

    def append(self, record: RecordT) -> RecordT:
        self._records.append(record.model_copy(deep=True))
        return record.model_copy(deep=True)

    def replace(self, index: int, record: RecordT) -> RecordT:
        self._records[index] = record.model_copy(deep=True)
        return record.model_copy(deep=True)

    def remove(self, index: int) -> None:
        del self._records[index]
