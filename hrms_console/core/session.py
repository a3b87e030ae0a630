"""
Explicit session object holding the bearer token.

The HTTP client reads the token from here on every call; nothing else
in the console keeps durable state.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class SessionStore:
    """Interface: ``get`` / ``set`` / ``clear`` of the auth token."""

    def get(self) -> str | None:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileSessionStore(SessionStore):
    """Persist the token as a single key in a small JSON file."""

    def __init__(self, path: str | os.PathLike[str], key: str = "authToken") -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable token store %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> str | None:
        token = self._read().get(self.key)
        return token if isinstance(token, str) and token else None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({self.key: token}), encoding="utf-8")

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass


def build_session_store(path: str | None, key: str = "authToken") -> SessionStore:
    if path:
        return FileSessionStore(path, key=key)
    return MemorySessionStore()
