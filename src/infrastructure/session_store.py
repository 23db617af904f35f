"""Key-value persistence of session state."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from loguru import logger

from domain.exceptions import OpenJudgeError

SESSION_KEY = "openjudge.session"
COOKIE_JAR_KEY = "openjudge.cookieJar"
CREDENTIALS_KEY = "openjudge.credentials"

PERSISTED_KEYS = (SESSION_KEY, COOKIE_JAR_KEY, CREDENTIALS_KEY)


class SessionStoreError(OpenJudgeError):
    """Persisted state could not be read or written."""

    pass


class SessionStore(Protocol):
    """Protocol for the key-value store holding session state."""

    async def get(self, key: str) -> Any | None:
        """Return the stored value or None."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store a JSON-serialisable value."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        ...


class MemorySessionStore:
    """Store kept in process memory."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(initial or {})

    async def get(self, key: str) -> Any | None:
        return self.data.get(key)

    async def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileSessionStore:
    """Store backed by a single JSON file, rewritten atomically on every change."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            self._data = {}
            return self._data

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable state file {self.path}: {e}")
            data = {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring state file {self.path}: expected an object, got {type(data).__name__}")
            data = {}

        self._data = data
        return self._data

    def _flush(self) -> None:
        data = self._load()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".state-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            raise SessionStoreError(f"Failed to write state file {self.path}: {e}") from e

    async def get(self, key: str) -> Any | None:
        return self._load().get(key)

    async def set(self, key: str, value: Any) -> None:
        self._load()[key] = value
        self._flush()

    async def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._flush()
