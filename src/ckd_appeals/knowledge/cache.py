"""Time-to-live cache over a knowledge-base provider."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from ckd_appeals.exceptions import KnowledgeBaseError
from ckd_appeals.knowledge.models import KnowledgeBase
from ckd_appeals.knowledge.provider import IKnowledgeBaseProvider

log = logging.getLogger(__name__)


class KnowledgeBaseCache:
    """Memoizes the provider's snapshot and reloads it once ``ttl_seconds`` have elapsed.

    Staleness is only checked on read; nothing runs in the background.
    Snapshots are replaced wholesale, so readers racing a reload see either
    the old or the new table and no lock is taken.

    Args:
        provider: Source of fresh snapshots.
        ttl_seconds: Reload window.
        clock: Monotonic seconds source, injectable for tests.
    """

    def __init__(
        self,
        provider: IKnowledgeBaseProvider,
        *,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._provider = provider
        self._ttl = ttl_seconds
        self._clock = clock
        self._snapshot: KnowledgeBase | None = None
        self._loaded_at: float | None = None
        self._last_loaded_at: datetime | None = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def is_fresh(self) -> bool:
        """True when a snapshot is cached and still inside the TTL window."""
        if self._snapshot is None or self._loaded_at is None:
            return False
        return (self._clock() - self._loaded_at) < self._ttl

    @property
    def is_loaded(self) -> bool:
        return self._snapshot is not None

    @property
    def last_loaded_at(self) -> datetime | None:
        """Wall-clock time of the last successful load."""
        return self._last_loaded_at

    def get(self) -> KnowledgeBase:
        """Return the cached snapshot, reloading first if it is missing or stale."""
        if self.is_fresh:
            return self._snapshot  # type: ignore[return-value]
        return self.force_reload()

    def force_reload(self) -> KnowledgeBase:
        """Load a new snapshot regardless of the TTL.

        On provider failure the previous snapshot (or an empty one) is
        returned and the cache stays stale, so the next read retries.
        """
        started = self._clock()
        try:
            snapshot = self._provider.load()
        except KnowledgeBaseError as exc:
            log.error("Knowledge base load failed: %s", exc)
            return self._snapshot if self._snapshot is not None else KnowledgeBase()

        now = self._clock()
        self._snapshot = snapshot
        self._loaded_at = now
        self._last_loaded_at = datetime.now(timezone.utc)
        log.info(
            "Knowledge base loaded in %.1fms (%d abbreviations, %d complications)",
            (now - started) * 1000,
            len(snapshot.abbreviations),
            len(snapshot.complications),
        )
        return snapshot

    def status(self) -> dict[str, object]:
        """Cache state for health and knowledge-base endpoints."""
        return {
            "loaded": self.is_loaded,
            "cache_valid": self.is_fresh,
            "ttl_seconds": self._ttl,
            "last_load_time": self._last_loaded_at.isoformat() if self._last_loaded_at else None,
        }
