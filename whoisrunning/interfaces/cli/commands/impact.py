"""Policy impact commands."""

import asyncio

import click

from whoisrunning.domain.value_objects.demographic_profile import (
    AgeRange,
    DemographicProfile,
    EducationLevel,
    IncomeRange,
    Location,
    RaceEthnicity,
)
from whoisrunning.interfaces.cli.base import get_or_init_container, with_error_handling


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls])


@click.group()
def impact():
    """Policy impact analysis."""
    pass


@impact.command()
@click.option("--age", required=True, type=_choices(AgeRange), help="Age range")
@click.option("--income", required=True, type=_choices(IncomeRange), help="Household income")
@click.option("--race", required=True, type=_choices(RaceEthnicity), help="Race/ethnicity")
@click.option(
    "--education", required=True, type=_choices(EducationLevel), help="Education level"
)
@click.option("--state", required=True, help="State")
@click.option("--county", default=None, help="County")
@click.option("--city", default=None, help="City")
@with_error_handling
def analyze(
    age: str,
    income: str,
    race: str,
    education: str,
    state: str,
    county: str | None,
    city: str | None,
):
    """Explain how current policies affect a demographic profile."""
    profile = DemographicProfile(
        age_range=AgeRange(age),
        income_range=IncomeRange(income),
        race_ethnicity=RaceEthnicity(race),
        education_level=EducationLevel(education),
        location=Location(state=state, county=county, city=city),
    )
    asyncio.run(_run_analyze(profile))


async def _run_analyze(profile: DemographicProfile) -> None:
    usecase = get_or_init_container().analyze_policy_impact_usecase()
    result = await usecase.execute(profile)

    click.echo(result.summary)
    for category, impacts in result.grouped.items():
        click.echo(f"\n=== {category.value} ===")
        for item in impacts:
            click.echo(f"  - {item.title}")
            click.echo(f"    {item.description}")
            if item.source:
                click.echo(f"    Source: {item.source}")
    if not result.impacts:
        click.echo("\nNo policy impacts could be extracted.")
