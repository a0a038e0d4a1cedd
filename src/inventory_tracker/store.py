"""Record store: an ordered list of records persisted under one storage key.

The whole list is re-serialized on every mutation. Two writers sharing a
key (e.g. two browser sessions on the same backend) do not merge; the last
save wins.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


class DeserializationError(ValueError):
    """Persisted text could not be turned back into a record list."""


def new_id() -> str:
    return uuid.uuid4().hex


def decode_records(text: str, record_type: Type[R]) -> Tuple[List[R], List[Any]]:
    """Parse a JSON list of record objects.

    Returns the decoded records and the raw entries that could not be turned
    into records (non-objects, or fields that cannot be coerced). Raises
    ``DeserializationError`` when the text is not JSON or not a list.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise DeserializationError(f"expected a list, got {type(data).__name__}")
    out: List[R] = []
    bad: List[Any] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning("Keeping entry %d undecoded: expected an object, got %s", i, type(entry).__name__)
            bad.append(entry)
            continue
        try:
            out.append(record_type.from_dict(entry))
        except (TypeError, ValueError) as e:
            logger.warning("Keeping entry %d undecoded: %s", i, e)
            bad.append(entry)
    return out, bad


def encode_records(records: List[Any], extra: Optional[List[Any]] = None) -> str:
    """Serialize records, followed by any raw entries carried through as-is."""
    return json.dumps([r.to_dict() for r in records] + list(extra or []), ensure_ascii=False)


@dataclass(frozen=True)
class DeleteRequest:
    """A pending deletion the UI has to confirm before it happens."""

    record_id: Any
    label: str
    prompt: str


class RecordStore(Generic[R]):
    """Insertion-ordered records bound to one key of a storage backend."""

    def __init__(self, storage, key: str, record_type: Type[R],
                 id_factory: Callable[[], Any] = new_id, noun: str = "item"):
        self.storage = storage
        self.key = key
        self.record_type = record_type
        self.id_factory = id_factory
        self.noun = noun
        self._records: List[R] = self.load()

    # ---------- persistence ----------

    def load(self) -> List[R]:
        """Read the slot; absent or corrupt text yields an empty list.

        Entries that do not decode are held in ``undecodable`` and written back
        unchanged after the records on every save, so they are never lost.
        """
        self.undecodable: List[Any] = []
        text = self.storage.get(self.key)
        if text is None or not text.strip():
            return []
        try:
            records, self.undecodable = decode_records(text, self.record_type)
        except DeserializationError as e:
            logger.warning("Discarding corrupt data under key %r: %s", self.key, e)
            return []
        if self.undecodable:
            logger.warning("Carrying %d undecodable entries under key %r", len(self.undecodable), self.key)
        return records

    def save(self, records: Optional[List[R]] = None):
        if records is not None:
            self._records = list(records)
        self.storage.set(self.key, encode_records(self._records, self.undecodable))
        logger.debug("Saved %d records under key %r", len(self._records), self.key)

    def reload(self):
        self._records = self.load()

    # ---------- access ----------

    @property
    def records(self) -> List[R]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(list(self._records))

    def get(self, record_id: Any) -> Optional[R]:
        for r in self._records:
            if r.id == record_id:
                return r
        return None

    # ---------- mutation ----------

    def upsert(self, record: R, editing_id: Any = None) -> R:
        """Replace the record with ``editing_id``, or append with a new id.

        The replaced record keeps its identity whatever id ``record`` carries.
        Raises ``KeyError`` if ``editing_id`` names no stored record.
        """
        if editing_id is not None:
            for i, existing in enumerate(self._records):
                if existing.id == editing_id:
                    stored = replace(record, id=existing.id)
                    self._records[i] = stored
                    self.save()
                    logger.debug("Updated %s %r", self.noun, editing_id)
                    return stored
            raise KeyError(editing_id)

        taken = {r.id for r in self._records}
        taken.update(e["id"] for e in self.undecodable if isinstance(e, dict) and isinstance(e.get("id"), (str, int)))
        rid = self.id_factory()
        while rid in taken:
            rid = self.id_factory()
        stored = replace(record, id=rid)
        self._records.append(stored)
        self.save()
        logger.debug("Added %s %r", self.noun, rid)
        return stored

    def remove(self, record_id: Any) -> bool:
        """Delete the record with ``record_id``; unknown ids are a no-op."""
        kept = [r for r in self._records if r.id != record_id]
        if len(kept) == len(self._records):
            return False
        self._records = kept
        self.save()
        logger.debug("Removed %s %r", self.noun, record_id)
        return True

    # ---------- confirmed deletion ----------

    def request_delete(self, record_id: Any) -> Optional[DeleteRequest]:
        """Build the confirmation for deleting ``record_id``, if it exists."""
        record = self.get(record_id)
        if record is None:
            return None
        label = str(getattr(record, record.label_field, "") or record_id)
        return DeleteRequest(
            record_id=record_id,
            label=label,
            prompt=f"Are you sure you want to delete this {self.noun}?",
        )

    def confirm_delete(self, request: DeleteRequest) -> bool:
        return self.remove(request.record_id)
