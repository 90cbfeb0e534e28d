# backend/history/storage.py

"""Persistence for summary history records."""

import json
import threading
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional

import config
from exceptions import ConfigurationError
from logger import logger
from models import HistoryRecord

RECORD_TYPE = "summary_history"


class HistoryStore(ABC):
    """User-scoped store of HistoryRecords. Records are never updated in place."""

    @abstractmethod
    def add(self, record: HistoryRecord) -> None:
        ...

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[HistoryRecord]:
        """Records owned by ``user_id``, newest first."""

    @abstractmethod
    def get(self, record_id: str, user_id: str) -> Optional[HistoryRecord]:
        """The record, or None when it does not exist or belongs to someone else."""

    @abstractmethod
    def delete(self, record_id: str, user_id: str) -> bool:
        """Remove one record. False when there was nothing of this user's to delete."""


class InMemoryHistoryStore(HistoryStore):
    """Process-local store for tests and keyless local development."""

    def __init__(self):
        self._records: Dict[str, HistoryRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: HistoryRecord) -> None:
        with self._lock:
            self._records[record.id] = record

    def list_for_user(self, user_id: str) -> List[HistoryRecord]:
        with self._lock:
            records = [r for r in self._records.values() if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def get(self, record_id: str, user_id: str) -> Optional[HistoryRecord]:
        with self._lock:
            record = self._records.get(record_id)
        if record is None or record.user_id != user_id:
            return None
        return record

    def delete(self, record_id: str, user_id: str) -> bool:
        with self._lock:
            record = self._records.get(record_id)
            if record is None or record.user_id != user_id:
                return False
            del self._records[record_id]
            return True


def _field(obj: Any, name: str, default: Any = None) -> Any:
    # Handle both dict and object-style responses (SDK compatibility)
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


class PineconeHistoryStore(HistoryStore):
    """
    Stores each record as a metadata-only vector.

    The vector values are a fixed placeholder; lookups go through the
    ``type``/``userId`` metadata filter or by id. The full record lives in
    ``record_json``.
    """

    def __init__(self, index: Any, namespace: str, dimension: int, query_limit: int = 1000):
        self.index = index
        self.namespace = namespace
        self.query_limit = query_limit
        # Cosine indexes reject all-zero vectors
        self._placeholder = [1.0] + [0.0] * (dimension - 1)

    def add(self, record: HistoryRecord) -> None:
        self.index.upsert(
            vectors=[{
                "id": record.id,
                "values": self._placeholder,
                "metadata": {
                    "type": RECORD_TYPE,
                    "userId": record.user_id,
                    "createdAt": record.created_at.timestamp(),
                    "record_json": record.model_dump_json(by_alias=True),
                },
            }],
            namespace=self.namespace,
        )
        logger.info(f"Stored history record {record.id} for user {record.user_id}")

    def _record_from_metadata(self, metadata: Dict[str, Any]) -> Optional[HistoryRecord]:
        if not metadata or "record_json" not in metadata:
            return None
        return HistoryRecord.model_validate(json.loads(metadata["record_json"]))

    def list_for_user(self, user_id: str) -> List[HistoryRecord]:
        response = self.index.query(
            vector=self._placeholder,
            top_k=self.query_limit,
            include_metadata=True,
            namespace=self.namespace,
            filter={"type": RECORD_TYPE, "userId": user_id},
        )

        matches = _field(response, "matches", []) or []
        if len(matches) >= self.query_limit:
            logger.warning(
                f"History query for user {user_id} hit the {self.query_limit}-record limit; "
                "older records are not listed or counted (raise HISTORY_QUERY_LIMIT)"
            )

        records = []
        for match in matches:
            record = self._record_from_metadata(_field(match, "metadata", {}) or {})
            if record is not None and record.user_id == user_id:
                records.append(record)

        records.sort(key=lambda r: r.created_at, reverse=True)
        logger.info(f"Found {len(records)} history records for user {user_id}")
        return records

    def get(self, record_id: str, user_id: str) -> Optional[HistoryRecord]:
        response = self.index.fetch(ids=[record_id], namespace=self.namespace)
        vectors = _field(response, "vectors", {}) or {}
        if record_id not in vectors:
            return None

        record = self._record_from_metadata(_field(vectors[record_id], "metadata", {}) or {})
        if record is None or record.user_id != user_id:
            return None
        return record

    def delete(self, record_id: str, user_id: str) -> bool:
        if self.get(record_id, user_id) is None:
            return False
        self.index.delete(ids=[record_id], namespace=self.namespace)
        logger.info(f"Deleted history record {record_id} for user {user_id}")
        return True


@lru_cache(maxsize=1)
def get_history_store() -> HistoryStore:
    """
    The configured store.

    Raises:
        ConfigurationError: Pinecone selected but no API key configured
    """
    if config.HISTORY_BACKEND == "memory":
        logger.warning("Using in-memory history store; records are lost on restart")
        return InMemoryHistoryStore()

    if config.HISTORY_BACKEND != "pinecone":
        raise ConfigurationError(f"Unknown history backend '{config.HISTORY_BACKEND}'")

    from pinecone_client import get_index

    return PineconeHistoryStore(
        index=get_index(),
        namespace=config.PINECONE_NAMESPACE,
        dimension=config.HISTORY_VECTOR_DIMENSION,
        query_limit=config.HISTORY_QUERY_LIMIT,
    )
