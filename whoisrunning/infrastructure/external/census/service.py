"""ILocationDataService implementation backed by the Census API."""

from __future__ import annotations

from whoisrunning.domain.services.interfaces.location_data_service import CityPopulation
from whoisrunning.infrastructure.external.census.client import CensusApiClient


MIN_CITY_POPULATION = 5000
MAX_CITIES = 100


class CensusLocationDataService:
    """ILocationDataService implementation."""

    def __init__(self, client: CensusApiClient | None = None) -> None:
        self._client = client or CensusApiClient()

    async def get_counties(self, state_code: str) -> list[str]:
        """County names sorted alphabetically."""
        counties = await self._client.get_counties(state_code)
        return sorted((c.name for c in counties), key=str.casefold)

    async def get_cities(self, state_code: str) -> list[CityPopulation]:
        """Places over 5,000 residents, largest first, at most 100."""
        places = await self._client.get_places(state_code)
        cities = [
            CityPopulation(name=p.name, population=p.population)
            for p in places
            if p.population > MIN_CITY_POPULATION
        ]
        cities.sort(key=lambda c: c.population, reverse=True)
        return cities[:MAX_CITIES]
