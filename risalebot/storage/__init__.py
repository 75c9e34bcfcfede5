"""Read-only storage access for the Sözler corpus."""

from risalebot.storage.json_store import JsonStore, StorageError

__all__ = ["JsonStore", "StorageError"]
