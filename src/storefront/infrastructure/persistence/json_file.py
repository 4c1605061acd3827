"""Shared file handling for the JSON-backed repositories.

Each repository owns one file holding a JSON array of records.  Writes
go to a temporary sibling first and are then renamed over the target,
so readers never see a half-written file.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from storefront.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        logger.debug("Reading %s", self._file_path)
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            raise StorageError(f"Could not read {self._file_path.name}") from exc
        if not isinstance(raw, list):
            logger.error("%s does not hold a JSON array", self._file_path)
            raise StorageError(f"Corrupt storage file {self._file_path.name}")
        return raw

    def persist(self, records: list[dict]) -> None:
        logger.debug("Writing %d records to %s", len(records), self._file_path)
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise StorageError(f"Could not write {self._file_path.name}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            logger.error("Could not create %s: %s", self._file_path, exc)
            raise StorageError(f"Could not create {self._file_path}") from exc
