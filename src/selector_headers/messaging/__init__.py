"""Message construction, decoration and delivery.

Public API
----------
::

    from selector_headers.messaging import (
        DefaultMessageFactory,
        HeaderTransformingMessageFactory,
        InMemorySession,
        TextMessage,
        EventPublisher,
    )
"""

from __future__ import annotations

from selector_headers.messaging.decorator import (
    DecorationReport,
    HeaderTransformingMessageFactory,
    PropertyFailure,
    PropertyOutcome,
)
from selector_headers.messaging.factory import DefaultMessageFactory
from selector_headers.messaging.message import TextMessage
from selector_headers.messaging.publisher import (
    EventPublisher,
    build_message_factory,
    build_publisher,
)
from selector_headers.messaging.session import InMemorySession

__all__ = [
    "DecorationReport",
    "DefaultMessageFactory",
    "EventPublisher",
    "HeaderTransformingMessageFactory",
    "InMemorySession",
    "PropertyFailure",
    "PropertyOutcome",
    "TextMessage",
    "build_message_factory",
    "build_publisher",
]
