"""Candidate research commands."""

import asyncio

import click

from whoisrunning.domain.dtos.research_dto import CandidateSearchFilters, Citation
from whoisrunning.domain.value_objects.demographic_profile import Location
from whoisrunning.domain.value_objects.metric_value import MetricValue, Provenance
from whoisrunning.interfaces.cli.base import get_or_init_container, with_error_handling


def format_metric(metric: MetricValue | None, suffix: str = "") -> str:
    """Render a metric, marking synthetic values ("~" estimated, "*" placeholder)."""
    if metric is None:
        return "-"
    value = f"{metric.value:,.1f}".removesuffix(".0") + suffix
    if metric.provenance is Provenance.ESTIMATED:
        return f"~{value}"
    if metric.provenance is Provenance.PLACEHOLDER:
        return f"{value}*"
    return value


def _echo_fallback_notice(is_fallback: bool) -> None:
    if is_fallback:
        click.echo("(research unavailable, showing sample data)")


def _echo_citations(citations: tuple[Citation, ...]) -> None:
    if not citations:
        return
    click.echo("\nSources:")
    for i, citation in enumerate(citations, 1):
        click.echo(f"  [{i}] {citation.url}")


@click.group()
def research():
    """Candidate and official research."""
    pass


@research.command()
@click.option("--name", default=None, help="Candidate name")
@click.option("--state", default=None, help="State")
@click.option("--county", default=None, help="County")
@click.option("--city", default=None, help="City")
@click.option("--office", default=None, help="Office sought")
@with_error_handling
def search(
    name: str | None,
    state: str | None,
    county: str | None,
    city: str | None,
    office: str | None,
):
    """Search candidates by name and location."""
    filters = CandidateSearchFilters(
        name=name, state=state, county=county, city=city, office=office
    )
    asyncio.run(_run_search(filters))


async def _run_search(filters: CandidateSearchFilters) -> None:
    usecase = get_or_init_container().research_candidates_usecase()
    result = await usecase.search_candidates(filters)

    if not result.records:
        click.echo("No candidates found.")
        return
    click.echo(f"=== Candidates ({len(result.records)}) ===")
    for i, candidate in enumerate(result.records, 1):
        location = ", ".join(p for p in (candidate.city, candidate.county, candidate.state) if p)
        click.echo(f"{i:>3}. {candidate.name} [{candidate.party_label}]")
        click.echo(f"     {candidate.office} - {location}")
        if candidate.ideology:
            click.echo(f"     Focus: {', '.join(candidate.ideology)}")
    _echo_citations(result.citations)


@research.command()
@click.argument("name")
@with_error_handling
def detail(name: str):
    """Show a candidate profile."""
    asyncio.run(_run_detail(name))


async def _run_detail(name: str) -> None:
    usecase = get_or_init_container().research_candidates_usecase()
    result = await usecase.get_candidate_details(name)
    candidate = result.candidate

    _echo_fallback_notice(result.is_fallback)
    click.echo(f"=== {candidate.name} ===")
    click.echo(f"  Party:    {candidate.party_label}")
    click.echo(f"  Office:   {candidate.office}")
    click.echo(f"  State:    {candidate.state}")
    if candidate.website:
        click.echo(f"  Website:  {candidate.website}")
    if candidate.ideology:
        click.echo(f"  Focus:    {', '.join(candidate.ideology)}")
    if candidate.bio:
        click.echo(f"\n{candidate.bio}")
    if candidate.key_positions:
        click.echo("\nKey positions:")
        for position in candidate.key_positions:
            click.echo(f"  - {position}")
    if candidate.quotes:
        click.echo("\nQuotes:")
        for quote in candidate.quotes:
            click.echo(f'  "{quote.text}" ({quote.date})')
    if candidate.resources:
        click.echo("\nResources:")
        for resource in candidate.resources:
            click.echo(f"  [{resource.type.value}] {resource.title} - {resource.url}")
    _echo_citations(result.citations)


@research.command()
@with_error_handling
def trending():
    """Show candidates currently in the news."""
    asyncio.run(_run_trending())


async def _run_trending() -> None:
    usecase = get_or_init_container().research_candidates_usecase()
    result = await usecase.get_trending_candidates()

    _echo_fallback_notice(result.is_fallback)
    click.echo("=== Trending candidates ===")
    for i, entry in enumerate(result.records, 1):
        click.echo(
            f"{i:>3}. {entry.name} [{entry.party_label}] {entry.office}, {entry.state}"
            f"  searches {format_metric(entry.search_count)}"
            f"  {entry.trend_direction.value} {format_metric(entry.percentage_change, '%')}"
        )
    _echo_citations(result.citations)


@research.command()
@with_error_handling
def winners():
    """Show recent election winners."""
    asyncio.run(_run_winners())


async def _run_winners() -> None:
    usecase = get_or_init_container().research_candidates_usecase()
    result = await usecase.get_recent_winners()

    _echo_fallback_notice(result.is_fallback)
    click.echo("=== Recent winners ===")
    for i, entry in enumerate(result.records, 1):
        election_date = f"~{entry.election_date}" if entry.election_date_estimated else entry.election_date
        click.echo(
            f"{i:>3}. {entry.name} [{entry.party_label}] {entry.office}, {entry.state}"
            f"  {election_date}  {format_metric(entry.vote_percentage, '%')}"
        )
    _echo_citations(result.citations)


@research.command()
@click.option("--state", required=True, help="State")
@click.option("--county", default=None, help="County")
@click.option("--city", default=None, help="City")
@with_error_handling
def politicians(state: str, county: str | None, city: str | None):
    """List officials currently serving a location."""
    asyncio.run(_run_politicians(Location(state=state, county=county, city=city)))


async def _run_politicians(location: Location) -> None:
    usecase = get_or_init_container().research_candidates_usecase()
    result = await usecase.list_politicians(location)

    if not result.records:
        click.echo(f"No officials found for {location.display()}.")
        return
    click.echo(f"=== Officials serving {location.display()} ===")
    for official in result.records:
        click.echo(f"  {official.name} [{official.party_label}] - {official.office}")
