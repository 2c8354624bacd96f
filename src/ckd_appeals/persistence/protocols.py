"""Contract shared by the task persistence backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPersistenceBackend(Protocol):
    """String documents addressed by slash-separated keys such as ``tasks/7``."""

    def save(self, key: str, data: str) -> None:
        """Create or overwrite the document at ``key``."""
        ...

    def load(self, key: str) -> str:
        """Return the document at ``key``. Raises KeyError if absent."""
        ...

    def exists(self, key: str) -> bool: ...

    def delete(self, key: str) -> None:
        """Remove the document at ``key``; absent keys are ignored."""
        ...

    def list_keys(self, prefix: str = "") -> list[str]:
        """Sorted keys starting with ``prefix``."""
        ...
