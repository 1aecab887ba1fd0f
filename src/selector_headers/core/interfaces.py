"""Protocol interfaces for selector header decoration.

The decorator only depends on these seams.  Implementations (the in-memory
message and session here, or adapters around a real broker client) can be
swapped without changing callers.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

@runtime_checkable
class IEvent(Protocol):
    """An event to be announced.  Only ``path`` is used for diagnostics."""

    @property
    def path(self) -> str: ...


# ---------------------------------------------------------------------------
# Message
# ---------------------------------------------------------------------------

@runtime_checkable
class IMessage(Protocol):
    """Outgoing message with named properties.

    Implementations may also expose a ``message_id`` attribute; it is only
    used to label log entries and failure records.
    """

    def property_names(self) -> list[Any]: ...

    def get_string_property(self, name: str) -> str: ...

    def set_string_property(self, name: str, value: str) -> None: ...


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@runtime_checkable
class ISession(Protocol):
    """Creates messages for a connection to a broker."""

    def create_text_message(self, body: str = "") -> IMessage: ...


# Builds the message for an event within a session.
MessageBuilder = Callable[[Any, Any], IMessage]
