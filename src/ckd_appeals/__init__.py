"""ckd-appeals: clinical extraction and tri-state appeal decisions for CKD claims.

Library API::

    from ckd_appeals import (
        AppSettings,
        KnowledgeBaseCache, FileKnowledgeBaseProvider,
        expand_terms, extract_clinical_data,
        DecisionEngine, LiteLLMDecisionModel,
        ClinicalData, Decision, Outcome,
    )
"""

from __future__ import annotations

from ckd_appeals.core.config import AppSettings
from ckd_appeals.decision import DecisionEngine
from ckd_appeals.exceptions import (
    AppealsError,
    DecisionModelError,
    DecisionParseError,
    DocumentError,
    KnowledgeBaseError,
    ModelCallError,
    TaskValidationError,
)
from ckd_appeals.extraction import expand_terms, extract_clinical_data
from ckd_appeals.inference import LiteLLMDecisionModel
from ckd_appeals.knowledge import FileKnowledgeBaseProvider, KnowledgeBase, KnowledgeBaseCache
from ckd_appeals.models import (
    BloodPressure,
    ClinicalData,
    Complication,
    Decision,
    DecisionSource,
    ExpansionResult,
    Outcome,
    TermExpansion,
)

__all__ = [
    "AppSettings",
    "AppealsError",
    "BloodPressure",
    "ClinicalData",
    "Complication",
    "Decision",
    "DecisionEngine",
    "DecisionModelError",
    "DecisionParseError",
    "DecisionSource",
    "DocumentError",
    "ExpansionResult",
    "FileKnowledgeBaseProvider",
    "KnowledgeBase",
    "KnowledgeBaseCache",
    "KnowledgeBaseError",
    "LiteLLMDecisionModel",
    "ModelCallError",
    "Outcome",
    "TaskValidationError",
    "TermExpansion",
    "expand_terms",
    "extract_clinical_data",
]
