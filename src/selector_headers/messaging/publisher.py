"""Publishes repository events as decorated messages."""

from __future__ import annotations

import logging
from typing import Any

from selector_headers.core.config import Settings
from selector_headers.core.interfaces import IMessage, MessageBuilder

from .decorator import HeaderTransformingMessageFactory
from .factory import DefaultMessageFactory

logger = logging.getLogger(__name__)


class EventPublisher:
    """Builds a message per event and sends it to one destination.

    ``session`` must provide ``create_text_message`` for the builder and
    ``send(destination, message)``.
    """

    def __init__(self, builder: MessageBuilder, session: Any, destination: str) -> None:
        self._builder = builder
        self._session = session
        self._destination = destination

    @property
    def destination(self) -> str:
        return self._destination

    def publish(self, event: Any) -> IMessage:
        message = self._builder(event, self._session)
        self._session.send(self._destination, message)
        logger.info(
            "Published event for %s as message %s to %s",
            getattr(event, "path", None),
            getattr(message, "message_id", None),
            self._destination,
        )
        return message


def build_message_factory(settings: Settings) -> HeaderTransformingMessageFactory:
    """The default factory wrapped in the selector-header decorator."""
    return HeaderTransformingMessageFactory(
        DefaultMessageFactory(base_url=settings.messaging.base_url),
        rules=settings.identifiers.rules(),
        marker=settings.identifiers.eligibility_marker,
        max_failures=settings.observability.max_recorded_failures,
    )


def build_publisher(settings: Settings, session: Any) -> EventPublisher:
    """Wire an ``EventPublisher`` from settings."""
    return EventPublisher(
        build_message_factory(settings),
        session,
        settings.messaging.destination,
    )
