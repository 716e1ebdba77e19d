"""JSON-file snapshots of a whole collection.

A snapshot is a JSON array holding every entity.  Saving rewrites the
file atomically (temp file in the same directory, then rename); loading
returns the full list, or an empty list when the file does not exist.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, TypeVar

from recordbook.domain.exceptions import PersistenceError
from recordbook.domain.model.inventory_record import InventoryRecord
from recordbook.domain.repository.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonSnapshotStore(SnapshotStore[T]):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    def exists(self) -> bool:
        return self._file_path.exists()

    def save(self, entities: Iterable[T]) -> int:
        """Write every entity to the snapshot file; returns the count."""
        records = [self._to_raw(entity) for entity in entities]
        self._persist_raw(records)
        logger.info("Saved %d records to %s", len(records), self._file_path)
        return len(records)

    def load(self) -> list[T]:
        if not self._file_path.exists():
            logger.info("No snapshot at %s", self._file_path)
            return []
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("snapshot root is not a JSON array")
            entities = [self._to_domain(item) for item in raw]
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except (ValueError, KeyError, TypeError) as exc:
            raise PersistenceError(
                f"{self._file_path} is not a valid snapshot ({exc})"
            ) from exc
        logger.info("Loaded %d records from %s", len(entities), self._file_path)
        return entities

    # --- Serialization --------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _to_raw(entity: T) -> dict: ...

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T: ...

    # --- File helpers ---------------------------------------------------------

    def _persist_raw(self, records: list[dict]) -> None:
        directory = self._file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._file_path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(json.dumps(records, indent=2) + "\n")
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc


class JsonInventorySnapshot(JsonSnapshotStore[InventoryRecord]):

    @staticmethod
    def _to_raw(entity: InventoryRecord) -> dict:
        return {
            "id": entity.id,
            "name": entity.name,
            "quantity": entity.quantity,
            "date_added": entity.date_added.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryRecord:
        return InventoryRecord(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            date_added=datetime.fromisoformat(raw["date_added"]),
        )
