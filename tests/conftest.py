"""Shared fixtures for the selector-headers test suite."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest
import structlog

from selector_headers.core.enums import EventType
from selector_headers.core.events import RepositoryEvent
from selector_headers.messaging.decorator import HeaderTransformingMessageFactory
from selector_headers.messaging.factory import DefaultMessageFactory
from selector_headers.messaging.message import TextMessage
from selector_headers.messaging.session import InMemorySession


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_event() -> RepositoryEvent:
    """A resource creation event with two resource types."""
    return RepositoryEvent(
        event_id="6e2bdb6e-3c2c-4a5b-9f5e-2f1d0c6b1a11",
        timestamp=datetime(2018, 3, 1, 12, 0, 0, tzinfo=timezone.utc),
        path="/rest/submissions/abc",
        event_types=[EventType.RESOURCE_CREATION],
        resource_types=[
            "http://fedora.info/definitions/v4/repository#Resource",
            "http://www.w3.org/ns/ldp#Container",
        ],
        user_id="bypassAdmin",
        user_agent="curl/7.58",
        base_url="http://localhost:8080/fcrepo",
    )


# ---------------------------------------------------------------------------
# Messaging
# ---------------------------------------------------------------------------

@pytest.fixture
def session() -> InMemorySession:
    return InMemorySession()


@pytest.fixture
def message() -> TextMessage:
    """Message with one dotted and one plain string property."""
    msg = TextMessage(body="{}", message_id="ID:test-1")
    msg.set_string_property("org.fcrepo.jms.eventType", "ResourceCreation")
    msg.set_string_property("JMSCorrelationID", "cor-1")
    return msg


@pytest.fixture
def base_factory() -> DefaultMessageFactory:
    return DefaultMessageFactory()


@pytest.fixture
def decorating_factory(base_factory) -> HeaderTransformingMessageFactory:
    return HeaderTransformingMessageFactory(base_factory)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop the structlog handler installed by setup_logging()."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
