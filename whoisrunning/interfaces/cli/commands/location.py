"""Location lookup commands."""

import asyncio

import click

from whoisrunning.interfaces.cli.base import get_or_init_container, with_error_handling


@click.group()
def location():
    """Counties and cities by state."""
    pass


@location.command()
@click.argument("state_code")
@with_error_handling
def counties(state_code: str):
    """List counties of a state (two-letter code)."""
    asyncio.run(_run_counties(state_code))


async def _run_counties(state_code: str) -> None:
    usecase = get_or_init_container().lookup_location_usecase()
    names = await usecase.list_counties(state_code)
    click.echo(f"=== {state_code.upper()} counties ({len(names)}) ===")
    for name in names:
        click.echo(f"  {name}")


@location.command()
@click.argument("state_code")
@with_error_handling
def cities(state_code: str):
    """List the largest cities of a state (two-letter code)."""
    asyncio.run(_run_cities(state_code))


async def _run_cities(state_code: str) -> None:
    usecase = get_or_init_container().lookup_location_usecase()
    places = await usecase.list_cities(state_code)
    click.echo(f"=== {state_code.upper()} cities ({len(places)}) ===")
    for place in places:
        click.echo(f"  {place.name:<40} {place.population:>12,}")
