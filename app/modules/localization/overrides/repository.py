"""Override persistence.

The repository protocol supports several backends. The in-memory
implementation is used by tests and single-instance deployments, the DynamoDB
implementation shares overrides across instances.
"""

import threading
from typing import Dict, List, Optional, Protocol

from infrastructure.logging import get_module_logger
from modules.localization.overrides.models import OverrideRecord, override_id_for

logger = get_module_logger()


class OverrideRepository(Protocol):
    """Storage interface for override records.

    Keys and languages passed in are already normalized. Implementations
    keep at most one record per (key, language).

    Methods:
        list_all: Return every override record
        get: Return the record for a key and language
        upsert: Create or replace the record for the record's key and language
        delete: Remove the record for a key and language
        delete_by_id: Remove a record by id
        delete_all: Remove every record
    """

    def list_all(self) -> List[OverrideRecord]:
        """Return every override record."""
        ...

    def get(self, key: str, language: str) -> Optional[OverrideRecord]:
        """Return the record for ``key`` and ``language``, or None."""
        ...

    def upsert(self, record: OverrideRecord) -> OverrideRecord:
        """Create or replace the record for the record's key and language.

        Returns:
            The stored record.
        """
        ...

    def delete(self, key: str, language: str) -> bool:
        """Remove the record for ``key`` and ``language``.

        Returns:
            True if a record was removed.
        """
        ...

    def delete_by_id(self, override_id: str) -> bool:
        """Remove a record by id. Returns True if a record was removed."""
        ...

    def delete_all(self) -> int:
        """Remove every record and return how many were removed."""
        ...


class InMemoryOverrideRepository:
    """Thread-safe in-memory override repository."""

    def __init__(self) -> None:
        self._records: Dict[str, OverrideRecord] = {}
        self._lock = threading.Lock()

    def list_all(self) -> List[OverrideRecord]:
        with self._lock:
            return list(self._records.values())

    def get(self, key: str, language: str) -> Optional[OverrideRecord]:
        with self._lock:
            return self._records.get(override_id_for(key, language))

    def upsert(self, record: OverrideRecord) -> OverrideRecord:
        with self._lock:
            self._records[record.id] = record
        logger.debug("override_upserted", key=record.key, language=record.language)
        return record

    def delete(self, key: str, language: str) -> bool:
        return self.delete_by_id(override_id_for(key, language))

    def delete_by_id(self, override_id: str) -> bool:
        with self._lock:
            return self._records.pop(override_id, None) is not None

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._records)
            self._records.clear()
        return count
