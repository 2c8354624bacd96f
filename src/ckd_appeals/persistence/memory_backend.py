"""Dict-backed persistence backend for tests and ephemeral deployments."""

from __future__ import annotations

import logging

log = logging.getLogger(__name__)


class MemoryPersistenceBackend:
    """Keeps documents in a dict for the life of the process.

    Selected with ``CKD_PERSISTENCE_BACKEND=memory``; everything is lost on
    restart.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._documents: dict[str, str] = dict(initial or {})

    def __len__(self) -> int:
        return len(self._documents)

    def save(self, key: str, data: str) -> None:
        self._documents[key] = data
        log.debug("Stored %s (%d chars) in memory", key, len(data))

    def load(self, key: str) -> str:
        try:
            return self._documents[key]
        except KeyError:
            raise KeyError(f"Not found in memory store: {key}") from None

    def exists(self, key: str) -> bool:
        return key in self._documents

    def delete(self, key: str) -> None:
        self._documents.pop(key, None)

    def list_keys(self, prefix: str = "") -> list[str]:
        return sorted(key for key in self._documents if key.startswith(prefix))
