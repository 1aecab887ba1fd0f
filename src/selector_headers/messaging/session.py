"""In-memory messaging session for tests, previews and local wiring.

Creates ``TextMessage`` instances and records sent messages per destination
instead of handing them to a broker.
"""

from __future__ import annotations

import logging

from selector_headers.core.errors import SessionClosedError

from .message import TextMessage

logger = logging.getLogger(__name__)


class InMemorySession:
    """Session that keeps every sent message in a history list."""

    def __init__(self) -> None:
        self._history: list[tuple[str, TextMessage]] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Session is closed")

    def create_text_message(self, body: str = "") -> TextMessage:
        self._check_open()
        return TextMessage(body=body)

    def send(self, destination: str, message: TextMessage) -> None:
        """Send ``message`` to ``destination``.  Its properties become read-only."""
        self._check_open()
        message.destination = destination
        message.make_read_only()
        self._history.append((destination, message))
        logger.debug(
            "Sent message %s to %s with %d properties",
            message.message_id,
            destination,
            len(message.property_names()),
        )

    # ------------------------------------------------------------------
    # Testing helpers
    # ------------------------------------------------------------------

    def get_history(self, destination: str | None = None) -> list[tuple[str, TextMessage]]:
        """Get sent messages, optionally filtered by destination."""
        if destination is None:
            return list(self._history)
        return [(d, m) for d, m in self._history if d == destination]

    def clear_history(self) -> None:
        self._history.clear()
