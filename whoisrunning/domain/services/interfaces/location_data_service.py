"""Location data port."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CityPopulation:
    name: str
    population: int


class ILocationDataService(Protocol):
    """Lists counties and cities of a US state from government open data."""

    async def get_counties(self, state_code: str) -> list[str]:
        """County names of a state, sorted by name.

        Args:
            state_code: Two-letter postal code (e.g. "CA")
        """
        ...

    async def get_cities(self, state_code: str) -> list[CityPopulation]:
        """Populated places of a state, largest first."""
        ...
