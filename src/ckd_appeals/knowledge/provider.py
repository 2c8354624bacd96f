"""Knowledge-base providers: the loading contract and the JSON-file implementation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from ckd_appeals.exceptions import KnowledgeBaseError
from ckd_appeals.knowledge.models import KnowledgeBase

log = logging.getLogger(__name__)


@runtime_checkable
class IKnowledgeBaseProvider(Protocol):
    """Protocol for knowledge-base sources."""

    def load(self) -> KnowledgeBase:
        """Load a fresh snapshot. Raises KnowledgeBaseError on failure."""
        ...


class FileKnowledgeBaseProvider:
    """Reads the knowledge base from a JSON file on the local filesystem."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> KnowledgeBase:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise KnowledgeBaseError(f"Cannot read knowledge base {self._path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise KnowledgeBaseError(f"Invalid JSON in knowledge base {self._path}: {exc}") from exc

        if not isinstance(raw, dict):
            raise KnowledgeBaseError(f"Expected a JSON object in {self._path}")
        return KnowledgeBase.from_dict(raw)
