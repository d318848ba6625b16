"""Community error report use case."""

import logging

from whoisrunning.application.dtos.error_report_dto import (
    ErrorReportDTO,
    ErrorReportResult,
)
from whoisrunning.domain.services.interfaces.community_notifier import (
    ICommunityNotifier,
)


logger = logging.getLogger(__name__)


def format_report_message(report: ErrorReportDTO) -> str:
    return (
        "📝 New Error Report\n"
        f"**Candidate:** {report.candidate_name}\n"
        f"**Type:** {report.error_type}\n"
        f"**Details:** {report.description}\n"
        f"**Source:** {report.source or 'Not provided'}\n"
        f"**Email:** {report.email or 'Anonymous'}"
    )


class SubmitErrorReportUseCase:
    """Log a visitor's correction and forward it to the community channel.

    The channel is optional; without a notifier the report is only logged.
    """

    def __init__(self, notifier: ICommunityNotifier | None = None) -> None:
        self._notifier = notifier

    async def execute(self, report: ErrorReportDTO) -> ErrorReportResult:
        """Submit a report.

        Raises:
            ValueError: candidate id, candidate name, error type or
                description is empty
        """
        missing = [
            field_name
            for field_name in ("candidate_id", "candidate_name", "error_type", "description")
            if not getattr(report, field_name).strip()
        ]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(missing)}")

        logger.info(
            "Community error report: candidate=%s (%s) type=%s email=%s source=%s",
            report.candidate_name,
            report.candidate_id,
            report.error_type,
            report.email or "anonymous",
            report.source or "none provided",
        )

        if self._notifier is None:
            return ErrorReportResult(
                success=True, message="Error report submitted successfully"
            )

        await self._notifier.notify(format_report_message(report))
        return ErrorReportResult(
            success=True, message="Error report submitted successfully", notified=True
        )
