"""Tests for Contribution entity."""

from tests.fixtures.contribution_factories import make_contribution

from whoisrunning.domain.entities.contribution import Contribution


class TestContribution:
    """Test cases for Contribution entity."""

    def test_initialization_with_required_fields(self) -> None:
        """Test entity initialization with required fields only."""
        contribution = Contribution(amount_cents=1000, is_recurring=False)

        assert contribution.amount_cents == 1000
        assert contribution.is_recurring is False
        assert contribution.status == Contribution.STATUS_ACTIVE
        assert contribution.checkout_session_id is None
        assert contribution.subscription_id is None
        assert contribution.id is None

    def test_amount_in_dollars(self) -> None:
        assert make_contribution(amount_cents=2550).amount == 25.5

    def test_contributor_type(self) -> None:
        assert make_contribution(is_recurring=True).contributor_type == "monthly"
        assert make_contribution(is_recurring=False).contributor_type == "one-time"

    def test_status_transitions(self) -> None:
        contribution = make_contribution()
        assert contribution.is_active

        contribution.cancel()
        assert contribution.status == Contribution.STATUS_CANCELLED
        assert not contribution.is_active

        contribution.mark_failed()
        assert contribution.status == Contribution.STATUS_FAILED

    def test_str_representation(self) -> None:
        """Test string representation."""
        contribution = make_contribution(amount_cents=1000, is_recurring=True)
        assert str(contribution) == "$10.00 (monthly, active)"

    def test_equality_by_id(self) -> None:
        assert make_contribution(id=5) == make_contribution(id=5, amount_cents=1)
        assert make_contribution(id=5) != make_contribution(id=6)

        unsaved = make_contribution(id=None)
        assert unsaved == unsaved
        assert unsaved != make_contribution(id=None)
