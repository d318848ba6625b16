"""Census population estimates API row types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountyRecord:
    name: str
    full_name: str
    fips: str


@dataclass(frozen=True)
class PlaceRecord:
    name: str
    full_name: str
    population: int
    fips: str
