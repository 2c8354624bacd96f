"""Shared fixtures for ckd-appeals tests."""

from __future__ import annotations

import pytest

from ckd_appeals.core.config import (
    DEFAULT_KNOWLEDGE_BASE_PATH,
    AppSettings,
    AuthConfig,
    LLMConfig,
    PersistenceConfig,
)
from ckd_appeals.knowledge import FileKnowledgeBaseProvider, KnowledgeBase

SAMPLE_RECORD = """NEPHROLOGY PROGRESS NOTE
Patient: Jane Roe  DOB: 03/02/1958
Assessment: CKD Stage 5 with DM and HTN
Labs:
  GFR: 12 mL/min/1.73m²
  Creatinine: 4.2 mg/dL
  BUN: 45 mg/dL
  Proteinuria: 4.1 g/day
Vitals: BP 145/95 mmHg
Complications: Anemia, fluid overload
Plan: Evaluate for hemodialysis access; continue ESA therapy.
"""


@pytest.fixture
def sample_text() -> str:
    """Nephrology note with every extractable field present."""
    return SAMPLE_RECORD


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    """The packaged knowledge base."""
    return FileKnowledgeBaseProvider(DEFAULT_KNOWLEDGE_BASE_PATH).load()


@pytest.fixture
def small_knowledge_base() -> KnowledgeBase:
    """Hand-built knowledge base with a few entries per table."""
    return KnowledgeBase(
        abbreviations={
            "CKD": "Chronic Kidney Disease",
            "GFR": "Glomerular Filtration Rate",
            "DM": "Diabetes Mellitus",
            "HTN": "Hypertension",
        },
        complications={
            "anemia": {"description": "Low red blood cell count", "severity": "moderate"},
            "fluid overload": {"description": "Excess fluid volume", "severity": "severe"},
        },
    )


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    """Rules-only settings with in-memory task storage and auth off."""
    settings = AppSettings()
    settings.llm = LLMConfig(enabled=False)
    settings.persistence = PersistenceConfig(backend="memory", store_path=tmp_path)
    settings.auth = AuthConfig(enabled=False)
    return settings
