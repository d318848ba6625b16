"""Tests for LookupLocationUseCase."""

from unittest.mock import AsyncMock

import pytest

from whoisrunning.application.usecases.lookup_location_usecase import (
    LookupLocationUseCase,
)
from whoisrunning.domain.services.interfaces.location_data_service import (
    CityPopulation,
    ILocationDataService,
)


@pytest.fixture()
def mock_location_service() -> AsyncMock:
    return AsyncMock(spec=ILocationDataService)


class TestLookupLocationUseCase:
    @pytest.mark.asyncio
    async def test_list_counties(self, mock_location_service: AsyncMock) -> None:
        mock_location_service.get_counties.return_value = ["Bexar", "Travis"]

        counties = await LookupLocationUseCase(mock_location_service).list_counties("tx")

        assert counties == ["Bexar", "Travis"]
        mock_location_service.get_counties.assert_awaited_once_with("tx")

    @pytest.mark.asyncio
    async def test_list_cities(self, mock_location_service: AsyncMock) -> None:
        cities = [CityPopulation(name="Houston", population=2300000)]
        mock_location_service.get_cities.return_value = cities

        assert await LookupLocationUseCase(mock_location_service).list_cities("TX") == cities
