"""
Generic in-memory record store.

A process-local substitute for a real data store, used by the in-memory adapters.
Records are kept in a list in insertion order; every lookup is a linear scan.

Decision: No indexing. The store backs example and test wiring with a handful of
records, so O(n) scans keep the behavior obvious (first match in insertion order
always wins, duplicates included).
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Criteria = Mapping[str, Any] | Callable[[Any], bool]

_MISSING = object()


class RecordNotFoundError(Exception):
    """Raised by update/delete when no record carries the given identifier."""

    def __init__(self, record_id: Any):
        self.record_id = record_id
        super().__init__(f"Record with id '{record_id}' not found")


class InMemoryDatabase(Generic[T]):
    """
    Ordered, type-parameterized collection of records.

    Records can be plain objects (matched with attribute access) or mappings
    (matched with key access). The store does not enforce unique identifiers:
    create() appends unconditionally and id-based operations target the
    earliest-inserted match.

    Not safe for concurrent mutation.
    """

    def __init__(self, id_field: str = "id"):
        """
        Initialize an empty store.

        Args:
            id_field: Name of the identifying attribute used by id-based operations
        """
        self.id_field = id_field
        self._store: list[T] = []

    @staticmethod
    def _field(record: Any, name: str) -> Any:
        if isinstance(record, Mapping):
            return record.get(name, _MISSING)
        return getattr(record, name, _MISSING)

    def _matches(self, record: T, criteria: Criteria) -> bool:
        if callable(criteria):
            return bool(criteria(record))
        for key, value in criteria.items():
            field_value = self._field(record, key)
            # A record lacking a listed field never matches
            if field_value is _MISSING or field_value != value:
                return False
        return True

    def _index_of(self, record_id: Any) -> int:
        for index, record in enumerate(self._store):
            if self._field(record, self.id_field) == record_id:
                return index
        return -1

    def find(self, criteria: Criteria) -> T | None:
        """
        Find the first record matching every field/value pair in criteria.

        Args:
            criteria: Mapping of field name to expected value, or a predicate callable

        Returns:
            The first matching record in store order, None if nothing matches
        """
        for record in self._store:
            if self._matches(record, criteria):
                return record
        return None

    def find_by_id(self, record_id: Any) -> T | None:
        """
        Find the first record whose identifier equals record_id.

        Args:
            record_id: Identifier to look up

        Returns:
            The earliest-inserted matching record, None if absent
        """
        return self.find({self.id_field: record_id})

    def filter(self, criteria: Criteria | None = None) -> list[T]:
        """
        Return every record matching criteria, in store order.

        Args:
            criteria: Mapping or predicate; omitted or empty returns all records

        Returns:
            A new list (mutating it does not affect the store)
        """
        if not criteria:
            return list(self._store)
        return [record for record in self._store if self._matches(record, criteria)]

    def create(self, record: T) -> None:
        """Append a record to the end of the store."""
        self._store.append(record)
        logger.debug(f"Created record with id: {self._field(record, self.id_field)!r}")

    def update(self, record_id: Any, record: T) -> T:
        """
        Replace the first record whose identifier equals record_id.

        The replacement keeps the original position. Its own identifier is not
        checked against record_id.

        Args:
            record_id: Identifier of the record to replace
            record: The replacement record

        Returns:
            The replacement record

        Raises:
            RecordNotFoundError: If no record has this identifier
        """
        index = self._index_of(record_id)
        if index == -1:
            raise RecordNotFoundError(record_id)

        self._store[index] = record
        logger.debug(f"Updated record with id: {record_id!r}")
        return record

    def delete(self, record_id: Any) -> None:
        """
        Remove the first record whose identifier equals record_id.

        Args:
            record_id: Identifier of the record to remove

        Raises:
            RecordNotFoundError: If no record has this identifier
        """
        index = self._index_of(record_id)
        if index == -1:
            raise RecordNotFoundError(record_id)

        del self._store[index]
        logger.debug(f"Deleted record with id: {record_id!r}")

    def clear(self) -> None:
        """Remove every record."""
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
