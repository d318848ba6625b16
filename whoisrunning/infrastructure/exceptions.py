"""Infrastructure layer exceptions."""

from typing import Any


class InfrastructureError(Exception):
    """Base class for infrastructure failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(InfrastructureError):
    """A required setting is missing or invalid."""


class ExternalServiceError(InfrastructureError):
    """A call to an external HTTP API failed."""

    def __init__(
        self,
        service_name: str,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{service_name}: {message}", details)
        self.service_name = service_name
        self.status_code = status_code


class DatabaseError(InfrastructureError):
    """A database operation failed."""
