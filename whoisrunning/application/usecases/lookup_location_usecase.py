"""County and city lookup use case."""

import logging

from whoisrunning.domain.services.interfaces.location_data_service import (
    CityPopulation,
    ILocationDataService,
)


logger = logging.getLogger(__name__)


class LookupLocationUseCase:
    """Counties and major cities of a state, for location filters."""

    def __init__(self, location_service: ILocationDataService) -> None:
        self._locations = location_service

    async def list_counties(self, state_code: str) -> list[str]:
        counties = await self._locations.get_counties(state_code)
        logger.info("Found %d counties for %s", len(counties), state_code.upper())
        return counties

    async def list_cities(self, state_code: str) -> list[CityPopulation]:
        cities = await self._locations.get_cities(state_code)
        logger.info("Found %d cities for %s", len(cities), state_code.upper())
        return cities
