"""Census population estimates API package."""

from .client import CensusApiClient, CensusApiError, InvalidStateCodeError
from .service import CensusLocationDataService


__all__ = [
    "CensusApiClient",
    "CensusApiError",
    "CensusLocationDataService",
    "InvalidStateCodeError",
]
