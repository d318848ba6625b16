"""Community commands."""

import asyncio

from datetime import UTC, datetime

import click

from whoisrunning.application.dtos.error_report_dto import ErrorReportDTO
from whoisrunning.interfaces.cli.base import get_or_init_container, with_error_handling


@click.group()
def community():
    """Community corrections."""
    pass


@community.command("report-error")
@click.option("--candidate-id", required=True, help="Candidate id")
@click.option("--candidate-name", required=True, help="Candidate name")
@click.option("--error-type", required=True, help="Kind of error (party, office, quote, ...)")
@click.option("--description", required=True, help="What is wrong")
@click.option("--email", default=None, help="Reporter email")
@click.option("--source", default=None, help="Source backing the correction")
@with_error_handling
def report_error(
    candidate_id: str,
    candidate_name: str,
    error_type: str,
    description: str,
    email: str | None,
    source: str | None,
):
    """Report an error in a candidate profile."""
    report = ErrorReportDTO(
        candidate_id=candidate_id,
        candidate_name=candidate_name,
        error_type=error_type,
        description=description,
        email=email,
        source=source,
        timestamp=datetime.now(UTC).isoformat(),
    )
    asyncio.run(_run_report(report))


async def _run_report(report: ErrorReportDTO) -> None:
    usecase = get_or_init_container().submit_error_report_usecase()
    result = await usecase.execute(report)
    click.echo(result.message)
    if not result.notified:
        click.echo("(no community channel configured; report logged only)")
