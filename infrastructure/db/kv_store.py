"""
Supabase Key-Value Store Implementation.

This module implements the KeyValueStore protocol on top of a Supabase
(PostgREST) table with two columns:

    key   TEXT PRIMARY KEY
    value JSONB

Every failure of the underlying client is logged and re-raised as
StorageError so the API layer can answer with a generic 500.
"""
import logging
from typing import Any, List, Optional, Tuple

from supabase import Client

from application.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "kv_store"


class SupabaseKeyValueStore:
    """
    Supabase implementation of KeyValueStore.

    Writes use upsert, so concurrent writers to the same key resolve as
    last-write-wins.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table: Name of the key-value table
        """
        self._client = client
        self._table = table

    def get(self, key: str) -> Optional[Any]:
        try:
            result = self._client.table(self._table) \
                .select("value") \
                .eq("key", key) \
                .limit(1) \
                .execute()
        except Exception as e:
            logger.error(f"KV get failed for {key}: {e}")
            raise StorageError(f"Failed to read {key}") from e

        rows = result.data or []
        return rows[0].get("value") if rows else None

    def set(self, key: str, value: Any) -> None:
        try:
            self._client.table(self._table) \
                .upsert({"key": key, "value": value}) \
                .execute()
        except Exception as e:
            logger.error(f"KV set failed for {key}: {e}")
            raise StorageError(f"Failed to write {key}") from e

    def delete(self, key: str) -> None:
        try:
            self._client.table(self._table) \
                .delete() \
                .eq("key", key) \
                .execute()
        except Exception as e:
            logger.error(f"KV delete failed for {key}: {e}")
            raise StorageError(f"Failed to delete {key}") from e

    def get_by_prefix(self, prefix: str) -> List[Any]:
        return [value for _, value in self.get_items_by_prefix(prefix)]

    def get_items_by_prefix(self, prefix: str) -> List[Tuple[str, Any]]:
        try:
            result = self._client.table(self._table) \
                .select("key, value") \
                .like("key", f"{prefix}%") \
                .execute()
        except Exception as e:
            logger.error(f"KV prefix scan failed for {prefix}: {e}")
            raise StorageError(f"Failed to read {prefix}*") from e

        # LIKE treats "_" as a wildcard; keep exact prefix matches only
        return [
            (str(row.get("key")), row.get("value"))
            for row in result.data or []
            if str(row.get("key", "")).startswith(prefix)
        ]
