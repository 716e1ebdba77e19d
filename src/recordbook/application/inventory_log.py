"""Application service: the inventory log.

Records live in memory and are written to / read from a JSON snapshot.
Loading replaces the in-memory collection wholesale; a failed load leaves
it untouched.
"""

from __future__ import annotations

import logging

from recordbook.domain.exceptions import DomainException
from recordbook.domain.model.inventory_record import InventoryRecord
from recordbook.domain.repository.repository import Repository
from recordbook.domain.result import Result
from recordbook.domain.repository.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class InventoryLogHandler:

    def __init__(
        self,
        repo: Repository[InventoryRecord],
        snapshot: SnapshotStore[InventoryRecord],
    ) -> None:
        self._repo = repo
        self._snapshot = snapshot

    def add(self, record: InventoryRecord) -> None:
        self._repo.add(record)

    def seed(self, records: list[InventoryRecord]) -> None:
        for record in records:
            self._repo.add(record)
        logger.info("Seeded %d inventory records", len(records))

    def list_all(self) -> list[InventoryRecord]:
        return self._repo.list_all()

    def save(self) -> Result[int]:
        try:
            count = self._snapshot.save(self._repo.list_all())
        except DomainException as exc:
            logger.warning("Save failed: %s", exc)
            return Result.from_exception(exc)
        return Result.success(count, "Data saved successfully!")

    def load(self) -> Result[int]:
        if not self._snapshot.exists():
            self._repo.replace_all([])
            return Result.success(0, "No file found. Starting with empty log.")
        try:
            records = self._snapshot.load()
        except DomainException as exc:
            logger.warning("Load failed: %s", exc)
            return Result.from_exception(exc)
        self._repo.replace_all(records)
        return Result.success(len(records), "Data loaded successfully!")
