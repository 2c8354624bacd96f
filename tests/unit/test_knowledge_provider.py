"""Tests for the file knowledge-base provider and snapshot model."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ckd_appeals.exceptions import KnowledgeBaseError
from ckd_appeals.knowledge import FileKnowledgeBaseProvider, KnowledgeBase
from ckd_appeals.knowledge.provider import IKnowledgeBaseProvider
from tests.fakes.fake_kb_provider import FakeKnowledgeBaseProvider


class TestProtocolCompliance:
    def test_file_provider_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(FileKnowledgeBaseProvider(tmp_path / "kb.json"), IKnowledgeBaseProvider)

    def test_fake_provider_satisfies_protocol(self) -> None:
        assert isinstance(FakeKnowledgeBaseProvider(), IKnowledgeBaseProvider)


class TestFileProvider:
    def test_loads_layout(self, tmp_path: Path) -> None:
        path = tmp_path / "kb.json"
        path.write_text(
            json.dumps(
                {
                    "ckd_terminology": {
                        "abbreviations": {"CKD": "Chronic Kidney Disease"},
                        "complications": {"anemia": {"description": "Low hemoglobin"}},
                        "stages": {"stage_5": {"gfr_range": "<15"}},
                    },
                    "clinical_guidelines": {"monitoring_frequency": {"stage_5": "monthly"}},
                    "appeal_criteria": {"approval_indicators": ["GFR < 15"]},
                }
            ),
            encoding="utf-8",
        )

        kb = FileKnowledgeBaseProvider(path).load()

        assert kb.abbreviations == {"CKD": "Chronic Kidney Disease"}
        assert kb.complication_descriptions() == {"anemia": "Low hemoglobin"}
        assert kb.summary()["appeal_criteria"]["approval_indicators"] == 1
        assert kb.summary()["guidelines"]["treatment_targets"] == 0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(KnowledgeBaseError, match="Cannot read"):
            FileKnowledgeBaseProvider(tmp_path / "nope.json").load()

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "kb.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(KnowledgeBaseError, match="Invalid JSON"):
            FileKnowledgeBaseProvider(path).load()

    def test_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "kb.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(KnowledgeBaseError, match="Expected a JSON object"):
            FileKnowledgeBaseProvider(path).load()


class TestPackagedKnowledgeBase:
    def test_tables_present(self, knowledge_base: KnowledgeBase) -> None:
        assert knowledge_base.abbreviations["CKD"] == "Chronic Kidney Disease"
        assert "anemia" in knowledge_base.complications
        summary = knowledge_base.summary()
        assert summary["terminology"]["stage_count"] == 6
        assert summary["appeal_criteria"]["review_required"] > 0

    def test_empty_snapshot(self) -> None:
        kb = KnowledgeBase()
        assert kb.is_empty
        assert kb.complication_descriptions() == {}

    def test_tables_are_read_only(self, knowledge_base: KnowledgeBase) -> None:
        with pytest.raises(TypeError):
            knowledge_base.abbreviations["CKD"] = "changed"  # type: ignore[index]
        with pytest.raises(TypeError):
            knowledge_base.complications["anemia"]["description"] = "changed"  # type: ignore[index]
        assert knowledge_base.abbreviations["CKD"] == "Chronic Kidney Disease"

    def test_snapshot_detached_from_source_dict(self) -> None:
        abbreviations = {"CKD": "Chronic Kidney Disease"}
        kb = KnowledgeBase(abbreviations=abbreviations)
        abbreviations["CKD"] = "changed"
        assert kb.abbreviations["CKD"] == "Chronic Kidney Disease"
