"""Tests for the location commands."""

from unittest.mock import AsyncMock, MagicMock, patch

from click.testing import CliRunner

from whoisrunning.application.usecases.lookup_location_usecase import (
    LookupLocationUseCase,
)
from whoisrunning.domain.services.interfaces.location_data_service import CityPopulation
from whoisrunning.infrastructure.external.census.client import (
    CensusApiError,
    InvalidStateCodeError,
)
from whoisrunning.interfaces.cli.commands.location import location


_DI_PATH = "whoisrunning.infrastructure.di.container"


def _setup_usecase_mock(mock_get_container: MagicMock) -> AsyncMock:
    mock_container = MagicMock()
    mock_get_container.return_value = mock_container
    mock_usecase = AsyncMock(spec=LookupLocationUseCase)
    mock_container.lookup_location_usecase.return_value = mock_usecase
    return mock_usecase


class TestLocationCommands:
    @patch(f"{_DI_PATH}.get_container")
    def test_counties(self, mock_get_container: MagicMock) -> None:
        mock_usecase = _setup_usecase_mock(mock_get_container)
        mock_usecase.list_counties.return_value = ["Bexar", "Travis"]

        result = CliRunner().invoke(location, ["counties", "tx"])

        assert result.exit_code == 0
        assert "=== TX counties (2) ===" in result.output
        assert "  Travis" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_cities(self, mock_get_container: MagicMock) -> None:
        mock_usecase = _setup_usecase_mock(mock_get_container)
        mock_usecase.list_cities.return_value = [
            CityPopulation(name="Houston", population=2304580)
        ]

        result = CliRunner().invoke(location, ["cities", "TX"])

        assert result.exit_code == 0
        assert "Houston" in result.output
        assert "2,304,580" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_invalid_state_code(self, mock_get_container: MagicMock) -> None:
        mock_usecase = _setup_usecase_mock(mock_get_container)
        mock_usecase.list_counties.side_effect = InvalidStateCodeError(
            "Invalid state code: 'ZZ'"
        )

        result = CliRunner().invoke(location, ["counties", "ZZ"])

        assert result.exit_code == 1
        assert "Error: Invalid state code: 'ZZ'" in result.output

    @patch(f"{_DI_PATH}.get_container")
    def test_api_error(self, mock_get_container: MagicMock) -> None:
        mock_usecase = _setup_usecase_mock(mock_get_container)
        mock_usecase.list_cities.side_effect = CensusApiError("API request failed: 503", 503)

        result = CliRunner().invoke(location, ["cities", "CA"])

        assert result.exit_code == 1
        assert "Error: census: API request failed: 503" in result.output
