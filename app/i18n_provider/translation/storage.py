"""Storage capability for persisting the selected language.

Backends map to the two browser storage flavours: LOCAL survives restarts
(a small JSON file on disk), SESSION lives for the process only.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Awaitable, Dict, Optional, Union

from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.exceptions import StorageError
from i18n_provider.translation.models import StorageType

logger = get_module_logger()


class LanguageStorage(ABC):
    """Abstract key-value store for the selected language.

    `get` may raise StorageError when the backend cannot be read; callers
    substitute their default language. `set` reports failure by returning
    False and may return an awaitable on asynchronous hosts.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read a stored value.

        Args:
            key: Storage key.

        Returns:
            Stored value, or None if absent.

        Raises:
            StorageError: If the backend cannot be read.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> Union[bool, Awaitable[bool]]:
        """Store a value.

        Args:
            key: Storage key.
            value: Value to store.

        Returns:
            True on success, False on failure (or an awaitable of either).
        """
        pass


class NullLanguageStorage(LanguageStorage):
    """Storage for hosts without persistence: nothing is ever stored."""

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> bool:
        return False


class InMemoryLanguageStorage(LanguageStorage):
    """Process-lifetime storage, the SESSION flavour."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True

    def clear(self) -> None:
        """Remove all stored values (for testing)."""
        self._data.clear()


class FileLanguageStorage(LanguageStorage):
    """Storage backed by a JSON document on disk, the LOCAL flavour.

    Attributes:
        path: File holding a flat {key: value} JSON object.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold an object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> bool:
        try:
            data = self._read()
        except StorageError as e:
            logger.warning("storage_reset", path=str(self.path), error=str(e))
            data = {}
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(
                "storage_write_failed", path=str(self.path), key=key, error=str(e)
            )
            return False
        return True


def create_storage(
    storage_type: StorageType,
    path: Optional[Union[str, Path]] = None,
) -> LanguageStorage:
    """Select the storage backend for a storage type.

    Args:
        storage_type: LOCAL or SESSION.
        path: File backing LOCAL storage. Without it LOCAL storage is
            unavailable and a NullLanguageStorage is returned.

    Returns:
        LanguageStorage implementation.
    """
    if storage_type is StorageType.SESSION:
        return InMemoryLanguageStorage()
    if path is None:
        logger.warning("local_storage_unavailable", reason="no storage path")
        return NullLanguageStorage()
    return FileLanguageStorage(path)
