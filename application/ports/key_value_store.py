"""
Key-Value Store Interface (Port).

All records of this service live in a single key-value table hosted by the
backend-as-a-service. Keys are namespaced strings (``workout_session:...``,
``workout_history:{userId}:...``); values are JSON-compatible dicts.
"""
from typing import Any, List, Optional, Protocol, Tuple


class KeyValueStore(Protocol):
    """
    Abstract interface for the JSON key-value store.

    Implementations raise ``application.exceptions.StorageError`` when the
    underlying store fails. Writes are last-write-wins; there is no
    compare-and-set.
    """

    def get(self, key: str) -> Optional[Any]:
        """
        Get the value stored under ``key``.

        Returns:
            The stored value, or None if the key does not exist
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite the value stored under ``key``."""
        ...

    def delete(self, key: str) -> None:
        """Delete ``key``; deleting a missing key is not an error."""
        ...

    def get_by_prefix(self, prefix: str) -> List[Any]:
        """
        Get all values whose key starts with ``prefix``.

        Returns:
            List of stored values (order unspecified)
        """
        ...

    def get_items_by_prefix(self, prefix: str) -> List[Tuple[str, Any]]:
        """
        Get all (key, value) pairs whose key starts with ``prefix``.

        Used where the key itself carries identity (e.g. legacy sessions
        stored without a sessionId field).
        """
        ...
