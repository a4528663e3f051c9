"""Key-value persistence standing in for device storage.

Values live in a single JSON document. Every change is written to the
primary file and to a ``.bak`` twin before the call returns, so a crash
right after a mutation cannot lose it. Loading prefers the primary file and
falls back to the twin when the primary is missing or unreadable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from backend import DEFAULT_STORE_PATH

_MISSING = object()


class KeyValueStore:
    """Simple get/set/delete store keyed by string names."""

    def __init__(self, path: Path = DEFAULT_STORE_PATH) -> None:
        self.path = Path(path)
        self.backup_path = self.path.with_name(self.path.name + ".bak")
        self._data: dict[str, Any] = self._read()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        for path in (self.path, self.backup_path):
            if not path.exists():
                continue
            try:
                text = path.read_text(encoding="utf-8").strip()
                if not text:
                    continue
                data = json.loads(text)
            except (OSError, ValueError):
                logging.exception("Unreadable store file %s", path)
                continue
            if isinstance(data, dict):
                return data
            logging.warning("Ignoring store file %s: not a JSON object", path)
        return {}

    def reload(self) -> None:
        """Discard the in-memory copy and read the files again."""
        self._data = self._read()

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def contains(self, key: str) -> bool:
        return key in self._data

    __contains__ = contains

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and persist immediately.

        If the write fails the previous value is restored before the error
        propagates.
        """
        previous = self._data.get(key, _MISSING)
        self._data[key] = value
        try:
            self.save()
        except OSError:
            self._restore(key, previous)
            raise

    def delete(self, key: str) -> None:
        """Remove ``key`` if present and persist immediately."""
        if key not in self._data:
            return
        previous = self._data.pop(key)
        try:
            self.save()
        except OSError:
            self._restore(key, previous)
            raise

    def _restore(self, key: str, previous: Any) -> None:
        if previous is _MISSING:
            self._data.pop(key, None)
        else:
            self._data[key] = previous

    def save(self) -> None:
        """Write the document to both files.

        ``OSError`` propagates so callers never report an unsaved change as
        done.
        """
        payload = json.dumps(self._data, indent=2, sort_keys=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")
        self.backup_path.write_text(payload, encoding="utf-8")
