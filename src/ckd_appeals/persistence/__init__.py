"""Pluggable persistence backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ckd_appeals.persistence.file_backend import FilePersistenceBackend
from ckd_appeals.persistence.memory_backend import MemoryPersistenceBackend
from ckd_appeals.persistence.protocols import IPersistenceBackend

if TYPE_CHECKING:
    from ckd_appeals.core.config import PersistenceConfig

__all__ = [
    "IPersistenceBackend",
    "FilePersistenceBackend",
    "MemoryPersistenceBackend",
    "create_persistence_backend",
]


def create_persistence_backend(config: PersistenceConfig) -> IPersistenceBackend:
    """Create the backend selected by ``CKD_PERSISTENCE_BACKEND``."""
    if config.backend == "memory":
        return MemoryPersistenceBackend()
    return FilePersistenceBackend(base_path=config.store_path)
