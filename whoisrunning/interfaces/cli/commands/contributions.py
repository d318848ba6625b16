"""Contribution commands."""

import asyncio

from pathlib import Path

import click

from whoisrunning.interfaces.cli.base import get_or_init_container, with_error_handling


@click.group()
def contributions():
    """Supporter contributions."""
    pass


@contributions.command("init-db")
@with_error_handling
def init_db():
    """Create the contributions table if it does not exist."""
    asyncio.run(_run_init_db())


async def _run_init_db() -> None:
    database = get_or_init_container().database()
    try:
        await database.create_schema()
    finally:
        await database.dispose()
    click.echo("Database schema is up to date.")


@contributions.command()
@with_error_handling
def stats():
    """Show contributor count, total raised and average contribution."""
    asyncio.run(_run_stats())


async def _run_stats() -> None:
    container = get_or_init_container()
    database = container.database()
    try:
        async with database.get_session() as session:
            result = await container.get_contribution_stats_usecase(session).execute()
    finally:
        await database.dispose()

    click.echo("=== Contributions ===")
    click.echo(f"  Contributors:  {result.contributor_count:,}")
    click.echo(f"  Total raised:  ${result.total_raised:,.2f}")
    click.echo(f"  Average:       ${result.average_contribution:,.2f}")


@contributions.command()
@click.option("--amount", required=True, type=float, help="Amount in dollars")
@click.option("--monthly", is_flag=True, help="Monthly subscription")
@with_error_handling
def checkout(amount: float, monthly: bool):
    """Create a hosted checkout session and print its URL."""
    asyncio.run(_run_checkout(amount, monthly))


async def _run_checkout(amount: float, monthly: bool) -> None:
    usecase = get_or_init_container().create_checkout_session_usecase()
    session = await usecase.execute(amount, is_recurring=monthly)
    click.echo(f"Session: {session.session_id}")
    if session.url:
        click.echo(f"URL:     {session.url}")


@contributions.command()
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--signature", default=None, help="Signature header sent with the payload")
@with_error_handling
def webhook(payload_file: Path, signature: str | None):
    """Process a saved payment webhook payload."""
    asyncio.run(_run_webhook(payload_file.read_text(encoding="utf-8"), signature))


async def _run_webhook(payload: str, signature: str | None) -> None:
    from whoisrunning.infrastructure.external.stripe.webhook import construct_event

    container = get_or_init_container()
    payment = container.settings.payment
    event = construct_event(
        payload,
        signature,
        payment.webhook_secret,
        tolerance_seconds=payment.signature_tolerance_seconds,
    )

    database = container.database()
    try:
        async with database.get_session() as session:
            result = await container.handle_payment_webhook_usecase(session).execute(event)
    finally:
        await database.dispose()

    if not result.handled:
        click.echo(f"Ignored event type: {result.event_type}")
        return
    ids = ", ".join(str(i) for i in result.contribution_ids) or "none"
    click.echo(f"Handled {result.event_type} (contributions: {ids})")
