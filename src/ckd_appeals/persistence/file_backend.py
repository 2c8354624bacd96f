"""Persistence backend storing one JSON document per key under a base directory."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class FilePersistenceBackend:
    """Stores data as JSON files in a local directory.

    Keys map to relative paths: ``tasks/7`` is stored at
    ``<base>/tasks/7.json``.
    """

    def __init__(self, base_path: Path) -> None:
        self._base = base_path
        self._base.mkdir(parents=True, exist_ok=True)

    def _key_path(self, key: str) -> Path:
        parts = [p for p in key.replace("\\", "/").split("/") if p]
        if not parts or any(p in (".", "..") for p in parts):
            raise ValueError(f"Invalid persistence key: {key!r}")
        path = self._base.joinpath(*parts)
        if path.suffix != ".json":
            path = path.with_name(path.name + ".json")
        return path

    def save(self, key: str, data: str) -> None:
        path = self._key_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8")
        log.debug("Saved %s to %s", key, path)

    def load(self, key: str) -> str:
        path = self._key_path(key)
        if not path.is_file():
            raise KeyError(f"Not found: {key} (path: {path})")
        return path.read_text(encoding="utf-8")

    def exists(self, key: str) -> bool:
        return self._key_path(key).is_file()

    def delete(self, key: str) -> None:
        path = self._key_path(key)
        if path.is_file():
            path.unlink()

    def list_keys(self, prefix: str = "") -> list[str]:
        keys = []
        for path in self._base.rglob("*.json"):
            key = path.relative_to(self._base).with_suffix("").as_posix()
            if key.startswith(prefix):
                keys.append(key)
        return sorted(keys)
