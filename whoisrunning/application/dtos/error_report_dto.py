"""Community error report DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorReportDTO:
    """A visitor's report that a candidate profile is wrong."""

    candidate_id: str
    candidate_name: str
    error_type: str
    description: str
    email: str | None = None
    source: str | None = None
    timestamp: str | None = None


@dataclass(frozen=True)
class ErrorReportResult:
    success: bool
    message: str
    notified: bool = False
