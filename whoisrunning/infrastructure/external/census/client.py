"""Census Bureau population estimates API client.

The API answers with a JSON table: a header row followed by data rows, e.g.
[["NAME", "POP", "state", "place"], ["Fresno city, California", "542107", "06", "27000"]].
"""

from __future__ import annotations

import logging

from typing import Any

import httpx

from whoisrunning.infrastructure.exceptions import ExternalServiceError

from ._fips import state_fips
from .types import CountyRecord, PlaceRecord


logger = logging.getLogger(__name__)

# Place type suffixes removed from city names
_PLACE_SUFFIXES = (" city", " town", " village", " CDP")
_COUNTY_SUFFIX = " County"


class CensusApiError(ExternalServiceError):
    """Census API client error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("census", message, status_code)


class InvalidStateCodeError(ValueError):
    """The postal code does not name a US state or DC."""


class CensusApiClient:
    """Census population estimates API client (httpx async)."""

    BASE_URL = "https://api.census.gov/data/2021/pep/population"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url or self.BASE_URL
        self._api_key = api_key
        self._external_client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=30.0)

    async def get_counties(self, state_code: str) -> list[CountyRecord]:
        """Counties of a state in API order."""
        fips = self._require_fips(state_code)
        rows = await self._request(
            {"get": "NAME", "for": "county:*", "in": f"state:{fips}"}
        )
        return [
            CountyRecord(
                name=_strip_suffix(_short_name(row[0]), (_COUNTY_SUFFIX,)),
                full_name=row[0],
                fips=row[2] if len(row) > 2 else "",
            )
            for row in rows
            if row
        ]

    async def get_places(self, state_code: str) -> list[PlaceRecord]:
        """Places (cities, towns, CDPs) of a state with population, in API order.

        Rows whose population is missing or not a number are skipped.
        """
        fips = self._require_fips(state_code)
        rows = await self._request(
            {"get": "NAME,POP", "for": "place:*", "in": f"state:{fips}"}
        )
        places: list[PlaceRecord] = []
        for row in rows:
            population = _parse_optional_int(row[1] if len(row) > 1 else None)
            if population is None:
                continue
            places.append(
                PlaceRecord(
                    name=_strip_suffix(_short_name(row[0]), _PLACE_SUFFIXES),
                    full_name=row[0],
                    population=population,
                    fips=row[3] if len(row) > 3 else "",
                )
            )
        return places

    @staticmethod
    def _require_fips(state_code: str) -> str:
        fips = state_fips(state_code)
        if fips is None:
            raise InvalidStateCodeError(f"Invalid state code: {state_code!r}")
        return fips

    async def _request(self, params: dict[str, Any]) -> list[list[str]]:
        """Execute the API request and return the data rows (header dropped)."""
        if self._api_key:
            params = {**params, "key": self._api_key}
        client = await self._get_client()

        try:
            response = await client.get(self._base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Census API error: %d", e.response.status_code)
            raise CensusApiError(
                f"API request failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise CensusApiError("API request timed out") from e
        except httpx.HTTPError as e:
            raise CensusApiError(f"HTTP error: {e}") from e
        except ValueError as e:
            raise CensusApiError("API returned a non-JSON body") from e
        finally:
            if self._owns_client:
                await client.aclose()

        if not isinstance(data, list) or not data:
            raise CensusApiError("Unexpected API response shape")
        return [row for row in data[1:] if isinstance(row, list)]


def _short_name(full_name: str) -> str:
    """Drop the state part: "Fresno city, California" → "Fresno city"."""
    return full_name.split(", ", 1)[0]


def _strip_suffix(name: str, suffixes: tuple[str, ...]) -> str:
    for suffix in suffixes:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def _parse_optional_int(value: Any) -> int | None:
    """Convert a value to int | None."""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None
