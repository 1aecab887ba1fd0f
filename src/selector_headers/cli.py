"""CLI entry point for selector-headers."""

from __future__ import annotations

import json

import click

from .core.config import load_settings
from .core.enums import EventType
from .core.errors import SelectorHeaderError
from .core.naming import DEFAULT_RULES, UNICODE_RULES, transform as transform_name


@click.group()
def main() -> None:
    """Selector-safe message header names."""


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--unicode", "unicode_letters", is_flag=True, help="Accept non-ASCII letters")
def transform(names: tuple[str, ...], unicode_letters: bool) -> None:
    """Print the selector-safe form of each NAME."""
    rules = UNICODE_RULES if unicode_letters else DEFAULT_RULES
    for name in names:
        click.echo(f"{name}\t{transform_name(name, rules)}")


@main.command()
@click.option("--path", required=True, help="Resource path, e.g. /rest/a/b")
@click.option("--event-type", "event_types", multiple=True, default=["ResourceCreation"],
              help="Event type name or URI (repeatable)")
@click.option("--resource-type", "resource_types", multiple=True, help="Resource type URI (repeatable)")
@click.option("--user", default="", help="User ID")
@click.option("--user-agent", default="", help="User agent")
@click.option("--config", default=None, help="Config file path")
def preview(
    path: str,
    event_types: tuple[str, ...],
    resource_types: tuple[str, ...],
    user: str,
    user_agent: str,
    config: str | None,
) -> None:
    """Build the decorated message for an event and print its properties."""
    from .core.events import RepositoryEvent
    from .messaging.publisher import build_publisher
    from .messaging.session import InMemorySession
    from .observability.logger import setup_logging

    try:
        settings = load_settings(config_path=config)
        types = [EventType.parse(t) for t in event_types]
    except (SelectorHeaderError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )

    event = RepositoryEvent(
        path=path,
        event_types=types,
        resource_types=list(resource_types),
        user_id=user,
        user_agent=user_agent,
    )
    session = InMemorySession()
    message = build_publisher(settings, session).publish(event)
    click.echo(json.dumps(message.properties(), indent=2))


if __name__ == "__main__":
    main()
