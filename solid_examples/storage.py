"""
Key/value storage backends.

Every backend here satisfies the ``Storage`` protocol by signature. Only
``MemoryStorage`` and ``FileStorage`` also honour its contract;
``RedisStorage`` and ``NaiveFileStorage`` are the counter-examples used to
show substitution failures that the type checker cannot catch.
"""

import logging
from contextlib import suppress
from pathlib import Path
from typing import Dict, Optional

from .utils.constants import DEFAULT_STORAGE_PATH, FORBIDDEN_KEY_PARTS, MAX_STORAGE_KEY_LENGTH


class MemoryStorage:
    """Dictionary-backed storage."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None


class RedisClientError(Exception):
    """Raised by the stub Redis client."""


class RedisClient:
    """Stub client whose reads always fail."""

    def get(self, key: str) -> str:
        raise RedisClientError(f"GET {key}: connection refused")

    def set(self, key: str, value: str) -> None:
        logging.debug("Stub Redis SET %s", key)

    def delete(self, key: str) -> None:
        logging.debug("Stub Redis DEL %s", key)


class RedisStorage:
    """
    Redis-backed storage that maps every client error to "not found".

    ``get`` never returns what ``set`` stored, and ``delete`` reports
    success for keys that never existed.
    """

    def __init__(self, client: Optional[RedisClient] = None) -> None:
        self.client = client or RedisClient()

    def get(self, key: str) -> Optional[str]:
        try:
            return self.client.get(key)
        except RedisClientError as e:
            logging.debug("Redis get failed, reporting a miss: %s", e)
            return None

    def set(self, key: str, value: str) -> None:
        self.client.set(key, value)

    def delete(self, key: str) -> bool:
        self.client.delete(key)
        return True


class NaiveFileStorage:
    """
    File-per-key storage that trusts its keys and hides I/O errors.

    A key such as ``../secret`` escapes the base directory, and a failed
    write is indistinguishable from a successful one.
    """

    def __init__(self, base_path: str = DEFAULT_STORAGE_PATH) -> None:
        self.base_path = base_path

    def _path(self, key: str) -> Path:
        return Path(f"{self.base_path}/{key}")

    def get(self, key: str) -> Optional[str]:
        try:
            return self._path(key).read_text(encoding="utf-8")
        except OSError:
            return None

    def set(self, key: str, value: str) -> None:
        with suppress(OSError):
            self._path(key).write_text(value, encoding="utf-8")

    def delete(self, key: str) -> bool:
        try:
            self._path(key).unlink()
        except OSError:
            return False
        return True


class FileStorage:
    """
    File-per-key storage that keeps the ``Storage`` contract.

    Keys that could leave the base directory are rejected the same way a
    missing key is reported, and I/O failures are logged instead of
    silently dropped.
    """

    def __init__(self, base_path: str = DEFAULT_STORAGE_PATH) -> None:
        self.base_path = Path(base_path)

    @staticmethod
    def validate_key(key: str) -> bool:
        """
        Check that a key maps to a single file inside the base directory.

        The length limit counts UTF-8 bytes.

        Examples:
            >>> FileStorage.validate_key("key")
            True
            >>> FileStorage.validate_key("../etc/passwd")
            False
        """
        return bool(key) and len(key.encode("utf-8")) <= MAX_STORAGE_KEY_LENGTH and not any(
            part in key for part in FORBIDDEN_KEY_PARTS
        )

    def key_to_path(self, key: str) -> Path:
        return self.base_path / key

    def get(self, key: str) -> Optional[str]:
        if not self.validate_key(key):
            return None
        try:
            return self.key_to_path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logging.warning("FileStorage get failed: %s", e)
            return None

    def set(self, key: str, value: str) -> None:
        if not self.validate_key(key):
            logging.warning("FileStorage rejected key %r", key)
            return
        try:
            self.key_to_path(key).write_text(value, encoding="utf-8")
        except OSError as e:
            logging.error("FileStorage set failed: %s", e)

    def delete(self, key: str) -> bool:
        if not self.validate_key(key):
            return False
        try:
            self.key_to_path(key).unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logging.error("FileStorage delete failed: %s", e)
            return False
        return True


__all__ = [
    "MemoryStorage",
    "RedisClientError",
    "RedisClient",
    "RedisStorage",
    "NaiveFileStorage",
    "FileStorage",
]
