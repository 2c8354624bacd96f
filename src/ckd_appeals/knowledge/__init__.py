"""Knowledge base: snapshot model, providers and the TTL cache."""

from __future__ import annotations

from ckd_appeals.knowledge.cache import KnowledgeBaseCache
from ckd_appeals.knowledge.models import KnowledgeBase
from ckd_appeals.knowledge.provider import FileKnowledgeBaseProvider, IKnowledgeBaseProvider

__all__ = [
    "FileKnowledgeBaseProvider",
    "IKnowledgeBaseProvider",
    "KnowledgeBase",
    "KnowledgeBaseCache",
]
