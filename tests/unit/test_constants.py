"""
Tests for resume_ats.utils.constants and resume_ats.utils.config.
"""

import pytest
from pydantic import ValidationError

from resume_ats.utils.config import AppSettings, ExtractionSettings, get_settings
from resume_ats.utils.constants import (
    ACTION_VERBS,
    ADVANCED_SCORE_WEIGHTS,
    ALL_ATS_KEYWORDS,
    ATS_KEYWORDS,
    CONFIDENCE_PER_ITEM,
    CONFIDENCE_WEIGHTS,
    QUANTIFIABLE_INDICATORS,
    SUPPORTED_RESUME_FORMATS,
    TECHNICAL_SKILLS,
    US_STATE_CODES,
    SkillCategory,
)


class TestVocabularies:
    def test_ats_keywords_flattened_with_repeats(self):
        assert len(ALL_ATS_KEYWORDS) == sum(len(v) for v in ATS_KEYWORDS.values()) == 84
        assert ALL_ATS_KEYWORDS.count("crm") == 2

    def test_industries(self):
        assert list(ATS_KEYWORDS) == ["technical", "marketing", "sales", "finance", "healthcare"]

    def test_vocabularies_are_lowercase(self):
        for vocabulary in (TECHNICAL_SKILLS, ALL_ATS_KEYWORDS, ACTION_VERBS, QUANTIFIABLE_INDICATORS):
            assert all(term == term.lower() for term in vocabulary)

    def test_sizes(self):
        assert len(TECHNICAL_SKILLS) == 53
        assert len(ACTION_VERBS) == 28
        assert len(QUANTIFIABLE_INDICATORS) == 23
        assert len(US_STATE_CODES) == 50

    def test_skill_category_values(self):
        assert [c.value for c in SkillCategory] == ["General", "Technical"]

    def test_supported_formats(self):
        assert SUPPORTED_RESUME_FORMATS == (".pdf", ".docx", ".txt")


class TestWeights:
    def test_confidence_weights_sum_to_100(self):
        assert sum(CONFIDENCE_WEIGHTS.values()) == 100

    def test_per_item_points_only_for_collections(self):
        assert set(CONFIDENCE_PER_ITEM) == {"skills", "work_experience", "education"}

    def test_advanced_weights_sum_to_one(self):
        assert sum(ADVANCED_SCORE_WEIGHTS.values()) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "table", [ATS_KEYWORDS, CONFIDENCE_WEIGHTS, CONFIDENCE_PER_ITEM, ADVANCED_SCORE_WEIGHTS]
    )
    def test_tables_are_read_only(self, table):
        with pytest.raises(TypeError):
            table["extra"] = 1


class TestSettings:
    def test_testing_environment(self):
        settings = get_settings()
        assert isinstance(settings, AppSettings)
        assert settings.environment == "testing"

    def test_defaults(self):
        settings = AppSettings()
        assert settings.extraction.max_file_size_bytes == 50 * 1024 * 1024
        assert settings.export.xml_escape_values is False
        assert settings.export.json_indent == 2

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("EXPORT_XML_ESCAPE_VALUES", "true")
        assert AppSettings().export.xml_escape_values is True

    def test_invalid_file_size(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(max_file_size_bytes=0)
