"""Tests for the research quality gate."""

import pytest

from whoisrunning.application.services.quality_gate import QualityGate
from whoisrunning.domain.dtos.research_dto import Citation


CITATIONS = (Citation(url="https://example.com/a", title="example.com"),)


class TestQualityGate:
    def test_below_threshold_substitutes_fallback(self) -> None:
        result = QualityGate(2).apply(["parsed"], ["fb1", "fb2", "fb3"], "trending", CITATIONS)

        assert result.records == ("fb1", "fb2", "fb3")
        assert result.is_fallback is True
        assert result.citations == ()

    def test_at_threshold_keeps_parsed_records(self) -> None:
        result = QualityGate(2).apply(["a", "b"], ["fb"], "trending", CITATIONS)

        assert result.records == ("a", "b")
        assert result.is_fallback is False
        assert result.citations == CITATIONS

    def test_zero_threshold_accepts_empty(self) -> None:
        result = QualityGate(0).apply([], ["fb"], "winner")
        assert result.records == ()
        assert not result.is_fallback

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValueError):
            QualityGate(-1)
