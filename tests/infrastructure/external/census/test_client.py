"""Tests for CensusApiClient."""

import httpx
import pytest

from whoisrunning.infrastructure.external.census._fips import state_fips
from whoisrunning.infrastructure.external.census.client import (
    CensusApiClient,
    CensusApiError,
    InvalidStateCodeError,
)


PLACES = [
    ["NAME", "POP", "state", "place"],
    ["Fresno city, California", "542107", "06", "27000"],
    ["Paradise town, California", "", "06", "55520"],
    ["Alamo CDP, California", "15314", "06", "00884"],
]
COUNTIES = [
    ["NAME", "state", "county"],
    ["Fresno County, California", "06", "019"],
    ["Alpine County, California", "06", "003"],
]


class TestGetPlaces:
    """Tests for get_places."""

    @pytest.mark.asyncio
    async def test_params_and_rows(self) -> None:
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured.update(dict(request.url.params))
            return httpx.Response(200, json=PLACES)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            api = CensusApiClient(api_key="census-key", client=client)
            places = await api.get_places("ca")

        assert captured == {
            "get": "NAME,POP",
            "for": "place:*",
            "in": "state:06",
            "key": "census-key",
        }
        assert [(p.name, p.population, p.fips) for p in places] == [
            ("Fresno", 542107, "27000"),
            ("Alamo", 15314, "00884"),
        ]

    @pytest.mark.asyncio
    async def test_invalid_state_code(self) -> None:
        api = CensusApiClient()

        with pytest.raises(InvalidStateCodeError, match="ZZ"):
            await api.get_places("ZZ")

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(CensusApiError) as exc_info:
                await CensusApiClient(client=client).get_places("CA")

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_unexpected_shape(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(CensusApiError, match="shape"):
                await CensusApiClient(client=client).get_places("CA")


class TestGetCounties:
    @pytest.mark.asyncio
    async def test_county_suffix_removed(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=COUNTIES))
        async with httpx.AsyncClient(transport=transport) as client:
            counties = await CensusApiClient(client=client).get_counties("CA")

        assert [(c.name, c.full_name, c.fips) for c in counties] == [
            ("Fresno", "Fresno County, California", "019"),
            ("Alpine", "Alpine County, California", "003"),
        ]


def test_state_fips() -> None:
    assert state_fips(" tx ") == "48"
    assert state_fips("DC") == "11"
    assert state_fips("XX") is None
