"""Durable key-value storage for the visitor's language choice.

Mirrors the browser's local storage contract: string keys and values,
and a dedicated error when the backend cannot be used at all.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class StorageUnavailableError(Exception):
    """Raised when the storage backend cannot be read or written."""


class PreferenceStorage(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value or None.

        Raises:
            StorageUnavailableError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value.

        Raises:
            StorageUnavailableError: If the backend cannot be written.
        """
        pass


class MemoryStorage(PreferenceStorage):
    """Process-local storage, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
