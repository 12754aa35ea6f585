"""
Application entry point: wires settings, policy and runner, then checks one person.

Composition root: loads ClubSettings, builds the DoorPolicy and the CheckRunner,
and hands the person to the pipeline.

Responsibilities:
  1. Configure structlog for structured logging
  2. Load and validate configuration from environment
  3. Build the door policy and the check runner from settings
  4. Evaluate the person with the configured (or requested) strategy
  5. Map the verdict to a process exit code

The verdict itself is reported through the pipeline's log events.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
import typer
from pydantic import ValidationError
from verdict import CheckRunner, LoggingRunner, SequentialRunner, ThreadPoolRunner

from bouncer import __version__
from bouncer.config import ClubSettings
from bouncer.domain.checks import DoorPolicy
from bouncer.domain.models import Gender, Person, Sobriety
from bouncer.pipeline import Strategy, evaluate

ADMITTED_EXIT_CODE = 0
CONFIGURATION_ERROR_EXIT_CODE = 1
REFUSED_EXIT_CODE = 2


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for structured logging.

    Colored, human-readable console output with ISO timestamps; events below
    log_level are dropped. An unknown level falls back to INFO.

    The verdict library logs through stdlib logging, so its "verdict" logger
    gets a stdout handler at the same level, rendered by the same console
    renderer.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(),
            ],
        )
    )
    library_logger = logging.getLogger("verdict")
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(level)


def create_runner(settings: ClubSettings) -> CheckRunner:
    """
    Build the runner for the accumulating strategies.

    Threaded when parallel_checks is set, sequential otherwise; always wrapped
    in a LoggingRunner so check timings show up at DEBUG.
    """
    inner: CheckRunner
    if settings.parallel_checks:
        inner = ThreadPoolRunner(max_workers=settings.max_workers)
    else:
        inner = SequentialRunner()
    return LoggingRunner(inner, operation="door", log_level=logging.DEBUG)


app = typer.Typer(add_completion=False, help="Check one person against the club's door policy")


@app.command()
def main(
    gender: Gender = typer.Option(..., case_sensitive=False, help="Gender of the person"),
    age: int = typer.Option(..., min=0, help="Age in years"),
    clothes: Optional[list[str]] = typer.Option(
        None, "--wearing", "-w", help="An item of clothing (repeatable)"
    ),
    sobriety: Sobriety = typer.Option(
        Sobriety.SOBER, case_sensitive=False, help="How much they have had to drink"
    ),
    strategy: Optional[Strategy] = typer.Option(
        None, case_sensitive=False, help="Override the configured door strategy"
    ),
) -> None:
    """Evaluate the person and exit 0 when admitted, 2 when refused."""
    try:
        settings = ClubSettings()
    except ValidationError as e:
        typer.echo(f"FATAL: Configuration error: {e}", err=True)
        raise typer.Exit(code=CONFIGURATION_ERROR_EXIT_CODE) from e

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    chosen = strategy or settings.strategy
    log.info(
        "app.starting",
        version=__version__,
        strategy=chosen.value,
        parallel_checks=settings.parallel_checks,
        log_level=settings.log_level,
    )

    person = Person(
        gender=gender,
        age=age,
        clothes=tuple(clothes or ()),
        sobriety=sobriety,
    )
    result = evaluate(
        person,
        DoorPolicy.from_settings(settings),
        chosen,
        create_runner(settings),
    )
    raise typer.Exit(
        code=result.match(lambda _: ADMITTED_EXIT_CODE, lambda _: REFUSED_EXIT_CODE)
    )


if __name__ == "__main__":
    app()
