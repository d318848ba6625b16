"""Shared helpers for CLI commands."""

import functools
import logging

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import click
import structlog

from whoisrunning.domain.services.interfaces.research_service import (
    ResearchServiceError,
)
from whoisrunning.infrastructure.exceptions import InfrastructureError
from whoisrunning.infrastructure.external.stripe.webhook import WebhookSignatureError


P = ParamSpec("P")
R = TypeVar("R")

# Errors reported as a one-line message with exit status 1
HANDLED_ERRORS: tuple[type[Exception], ...] = (
    ResearchServiceError,
    InfrastructureError,
    WebhookSignatureError,
    ValueError,
)


def with_error_handling(func: Callable[P, R]) -> Callable[P, R]:
    """Report application errors as `Error: ...` and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except HANDLED_ERRORS as e:
            logging.getLogger(func.__module__).debug("Command failed", exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise click.exceptions.Exit(1) from e

    return wrapper


def setup_logging(level: str) -> None:
    """Configure stdlib logging and route structlog through it."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_or_init_container() -> Any:
    from whoisrunning.infrastructure.di.container import get_container, init_container

    try:
        return get_container()
    except RuntimeError:
        return init_container()
