"""Exception hierarchy for ckd-appeals."""

from __future__ import annotations


class AppealsError(Exception):
    """Base exception for all ckd-appeals errors."""


class DocumentError(AppealsError):
    """Raised when an uploaded document is missing, unsupported, or has no text."""


class KnowledgeBaseError(AppealsError):
    """Raised when the knowledge-base file cannot be read or decoded."""


class DecisionModelError(AppealsError):
    """Raised when the external decision model cannot produce a usable decision."""


class ModelCallError(DecisionModelError):
    """Network, auth, provider or quota failure while calling the model."""


class DecisionParseError(DecisionModelError):
    """Model reply could not be parsed into a decision payload."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class TaskValidationError(AppealsError):
    """Raised when a task create/update carries invalid field values."""
