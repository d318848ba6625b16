"""Tests for ContributionRepositoryImpl."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures.contribution_factories import make_contribution

from whoisrunning.domain.entities.contribution import Contribution
from whoisrunning.infrastructure.exceptions import DatabaseError
from whoisrunning.infrastructure.persistence.contribution_repository_impl import (
    ContributionRepositoryImpl,
)


def _row(**overrides: object) -> MagicMock:
    values = {
        "id": 1,
        "amount_cents": 2500,
        "is_recurring": True,
        "checkout_session_id": "cs_1",
        "invoice_id": None,
        "subscription_id": "sub_1",
        "customer_id": "cus_1",
        "customer_email": "donor@example.com",
        "status": "active",
        "created_at": datetime(2024, 5, 1, tzinfo=UTC),
        "updated_at": None,
    }
    values.update(overrides)
    row = MagicMock()
    row._asdict = MagicMock(return_value=values)
    return row


class TestContributionRepositoryImpl:
    """Test cases for ContributionRepositoryImpl."""

    @pytest.fixture
    def mock_session(self) -> MagicMock:
        """Create mock async session."""
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        session.commit = AsyncMock()
        session.rollback = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session: MagicMock) -> ContributionRepositoryImpl:
        return ContributionRepositoryImpl(mock_session)

    @pytest.mark.asyncio
    async def test_get_by_checkout_session_id(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first = MagicMock(return_value=_row())
        mock_session.execute.return_value = mock_result

        contribution = await repository.get_by_checkout_session_id("cs_1")

        assert contribution is not None
        assert contribution.id == 1
        assert contribution.amount_cents == 2500
        assert contribution.subscription_id == "sub_1"
        assert mock_session.execute.call_args.args[1] == {"session_id": "cs_1"}

    @pytest.mark.asyncio
    async def test_get_by_invoice_id_not_found(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first = MagicMock(return_value=None)
        mock_session.execute.return_value = mock_result

        assert await repository.get_by_invoice_id("in_missing") is None

    @pytest.mark.asyncio
    async def test_get_active(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.fetchall = MagicMock(return_value=[_row(id=1), _row(id=2)])
        mock_session.execute.return_value = mock_result

        contributions = await repository.get_active()

        assert [c.id for c in contributions] == [1, 2]
        assert mock_session.execute.call_args.args[1] == {"status": "active"}

    @pytest.mark.asyncio
    async def test_get_all_with_limit(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.fetchall = MagicMock(return_value=[])
        mock_session.execute.return_value = mock_result

        assert await repository.get_all(limit=10) == []
        assert mock_session.execute.call_args.args[1] == {"limit": 10, "offset": 0}

    @pytest.mark.asyncio
    async def test_create(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first = MagicMock(return_value=_row(id=9))
        mock_session.execute.return_value = mock_result

        created = await repository.create(make_contribution(id=None))

        assert created.id == 9
        params = mock_session.execute.call_args.args[1]
        assert params["checkout_session_id"] == "cs_test_1"
        assert params["status"] == "active"
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_database_error(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("connection lost")

        with pytest.raises(DatabaseError) as exc_info:
            await repository.create(make_contribution(id=None))

        assert "Failed to create contribution" in str(exc_info.value)
        mock_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first = MagicMock(return_value=_row(status="cancelled"))
        mock_session.execute.return_value = mock_result
        contribution = make_contribution(id=1)
        contribution.cancel()

        updated = await repository.update(contribution)

        assert updated.status == Contribution.STATUS_CANCELLED
        assert mock_session.execute.call_args.args[1]["id"] == 1

    @pytest.mark.asyncio
    async def test_update_without_id(self, repository: ContributionRepositoryImpl) -> None:
        with pytest.raises(ValueError, match="must have an ID"):
            await repository.update(make_contribution(id=None))

    @pytest.mark.asyncio
    async def test_update_not_found(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.first = MagicMock(return_value=None)
        mock_session.execute.return_value = mock_result

        with pytest.raises(ValueError, match="not found"):
            await repository.update(make_contribution(id=99))

    @pytest.mark.asyncio
    async def test_fetch_error_wrapped(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError) as exc_info:
            await repository.get_by_subscription_id("sub_1")

        assert exc_info.value.details["subscription_id"] == "sub_1"

    @pytest.mark.asyncio
    async def test_delete(
        self, repository: ContributionRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_result = MagicMock()
        mock_result.rowcount = 1
        mock_session.execute.return_value = mock_result

        assert await repository.delete(1) is True
