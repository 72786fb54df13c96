"""Generic list/get/create/update/delete service over an EntityStore."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, Generic

from hr_console.core.config import Settings
from hr_console.core.latency import (
    OP_CREATE,
    OP_DELETE,
    OP_GET,
    OP_LIST,
    OP_UPDATE,
    LatencyStrategy,
    NoDelay,
    latency_from_settings,
)
from hr_console.services.seed import load_seed
from hr_console.services.store import EntityStore, RecordT

logger = logging.getLogger(__name__)

_ID_KEYS = ("id", "Id")


class RecordNotFoundError(Exception):
    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.record_id = record_id


class CrudService(Generic[RecordT]):
    record_type: type[RecordT]
    entity_name = "Record"
    seed_file = ""

    def __init__(self, latency: LatencyStrategy | None = None) -> None:
        self.store: EntityStore[RecordT] = EntityStore(self.entity_name)
        self.latency: LatencyStrategy = latency or NoDelay()
        self.seed_records: list[RecordT] = []
        self.initialized = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        self.latency = self._latency_from_settings(settings)
        self.seed(load_seed(settings.SEED_DATA_DIR, self.seed_file, self.record_type))
        self.initialized = True
        logger.info("%s service initialized (records=%d)", self.entity_name, len(self.store))

    async def close(self) -> None:
        self.store.seed([])
        self.seed_records = []
        self.latency = NoDelay()
        self.initialized = False

    def _latency_from_settings(self, settings: Settings) -> LatencyStrategy:
        return latency_from_settings(settings)

    def seed(self, records: Iterable[RecordT | Mapping[str, Any]]) -> None:
        self.seed_records = [
            r if isinstance(r, self.record_type) else self.record_type.model_validate(r) for r in records
        ]
        self.store.seed(self.seed_records)

    def reset(self) -> None:
        self.store.seed(self.seed_records)

    def snapshot(self) -> list[RecordT]:
        """Current contents without simulated latency, for startup derivations."""
        return self.store.snapshot()

    async def list_all(self) -> list[RecordT]:
        await self.latency.wait(OP_LIST)
        return self.store.snapshot()

    async def get_by_id(self, record_id: int) -> RecordT | None:
        await self.latency.wait(OP_GET)
        return self.store.find(record_id)

    async def create(self, fields: Mapping[str, Any]) -> RecordT:
        await self.latency.wait(OP_CREATE)

        data = self._prepare_create(self._normalize(fields))
        data["id"] = self.store.next_id()
        record = self.store.append(self.record_type.model_construct(**data))
        logger.info("Created %s id=%d", self.entity_name, record.id)
        return record

    async def update(self, record_id: int, changes: Mapping[str, Any]) -> RecordT:
        await self.latency.wait(OP_UPDATE)

        index = self.store.index_of(record_id)
        if index == -1:
            raise RecordNotFoundError(self.entity_name, record_id)

        data = self.store.at(index).model_dump(warnings=False)
        data.update(self._normalize(changes))
        data["id"] = record_id
        record = self.store.replace(index, self.record_type.model_construct(**data))
        logger.info("Updated %s id=%d fields=%s", self.entity_name, record_id, sorted(changes))
        return record

    async def delete(self, record_id: int) -> bool:
        await self.latency.wait(OP_DELETE)

        index = self.store.index_of(record_id)
        if index == -1:
            raise RecordNotFoundError(self.entity_name, record_id)

        self.store.remove(index)
        logger.info("Deleted %s id=%d", self.entity_name, record_id)
        return True

    def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    def _normalize(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        # Accept wire (camelCase) keys as well as field names; ids are never caller-supplied.
        # Values are stored as given, except dates, which are kept as ISO strings.
        by_alias = {info.alias: name for name, info in self.record_type.model_fields.items() if info.alias}
        return {
            by_alias.get(key, key): value.isoformat() if isinstance(value, date) else value
            for key, value in fields.items()
            if key not in _ID_KEYS
        }
