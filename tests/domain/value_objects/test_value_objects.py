"""Tests for record value objects."""

import pytest

from whoisrunning.domain.value_objects.analytics import ElectedOfficial
from whoisrunning.domain.value_objects.candidate import Candidate, SocialLinks
from whoisrunning.domain.value_objects.demographic_profile import IncomeRange, Location
from whoisrunning.domain.value_objects.metric_value import MetricValue, Provenance
from whoisrunning.domain.value_objects.party import Party


class TestParty:
    def test_display_uses_value_for_known_parties(self) -> None:
        assert Party.REPUBLICAN.display("Other") == "Republican"

    def test_display_substitutes_unclassified_label(self) -> None:
        assert Party.UNCLASSIFIED.display("Other") == "Other"

    def test_record_specific_labels(self) -> None:
        candidate = Candidate(
            id="jane-doe", name="Jane Doe", party=Party.UNCLASSIFIED, office="Mayor", state="Ohio"
        )
        official = ElectedOfficial(
            id="jane-doe", name="Jane Doe", office="Mayor", party=Party.UNCLASSIFIED
        )

        assert candidate.party_label == "Other"
        assert official.party_label == "Unknown"


class TestMetricValue:
    def test_constructors_tag_provenance(self) -> None:
        assert MetricValue.extracted(1.0).provenance is Provenance.EXTRACTED
        assert MetricValue.estimated(1.0).provenance is Provenance.ESTIMATED
        assert MetricValue.placeholder(1.0).provenance is Provenance.PLACEHOLDER

    def test_is_extracted(self) -> None:
        assert MetricValue.extracted(3.5).is_extracted
        assert not MetricValue.estimated(3.5).is_extracted


class TestLocation:
    def test_display_omits_missing_parts(self) -> None:
        assert Location(state="Texas").display() == "Texas"
        assert Location(state="Texas", county="Travis").display() == "Travis, Texas"
        assert (
            Location(state="Texas", county="Travis", city="Austin").display()
            == "Austin, Travis, Texas"
        )

    @pytest.mark.parametrize("state", ["", "   "])
    def test_state_required(self, state: str) -> None:
        with pytest.raises(ValueError, match="at least a state"):
            Location(state=state)


def test_income_labels() -> None:
    assert IncomeRange.UNDER_25K.label == "Less than $25,000"
    assert IncomeRange.OVER_150K.label == "$150,000 or more"


def test_social_links_is_empty() -> None:
    assert SocialLinks().is_empty()
    assert not SocialLinks(instagram="https://instagram.com/jd").is_empty()
