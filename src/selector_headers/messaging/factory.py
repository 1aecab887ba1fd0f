"""Default message factory for repository events.

Builds a text message whose body is a JSON activity document describing the
event, and sets the standard ``org.fcrepo.jms.*`` header properties that
consumers route on.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from selector_headers.core.errors import MessageBuildError, MessagingError
from selector_headers.core.events import RepositoryEvent
from selector_headers.core.ids import epoch_millis
from selector_headers.core.interfaces import IMessage, ISession

logger = logging.getLogger(__name__)

JMS_NAMESPACE = "org.fcrepo.jms."

TIMESTAMP_HEADER_NAME = JMS_NAMESPACE + "timestamp"
IDENTIFIER_HEADER_NAME = JMS_NAMESPACE + "identifier"
EVENT_TYPE_HEADER_NAME = JMS_NAMESPACE + "eventType"
BASE_URL_HEADER_NAME = JMS_NAMESPACE + "baseURL"
RESOURCE_TYPE_HEADER_NAME = JMS_NAMESPACE + "resourceType"
USER_HEADER_NAME = JMS_NAMESPACE + "user"
USER_AGENT_HEADER_NAME = JMS_NAMESPACE + "userAgent"
EVENT_ID_HEADER_NAME = JMS_NAMESPACE + "eventID"

_ACTIVITY_CONTEXT = "https://www.w3.org/ns/activitystreams"


def event_body(event: RepositoryEvent) -> str:
    """Serialize ``event`` as a JSON activity document."""
    doc: dict[str, Any] = {
        "@context": _ACTIVITY_CONTEXT,
        "id": f"urn:uuid:{event.event_id}",
        "type": [t.short_name for t in event.event_types],
        "published": event.timestamp.isoformat(),
        "object": {
            "id": event.resource_url,
            "type": list(event.resource_types),
        },
    }
    if event.user_id or event.user_agent:
        doc["actor"] = [
            {"type": "Person", "id": event.user_id},
            {"type": "Application", "name": event.user_agent},
        ]
    return json.dumps(doc)


class DefaultMessageFactory:
    """Builds the base message for a ``RepositoryEvent``.

    Args:
        base_url: Repository base URL.  Used for the ``baseURL`` header and
            resource URLs in the body when the event does not carry one.
    """

    def __init__(self, base_url: str = "") -> None:
        self._base_url = base_url

    def __call__(self, event: RepositoryEvent, session: ISession) -> IMessage:
        return self.get_message(event, session)

    def get_message(self, event: RepositoryEvent, session: ISession) -> IMessage:
        """Create and populate a message for ``event``.

        Raises:
            MessageBuildError: The session or message rejected an operation.
        """
        if self._base_url and not event.base_url:
            event = event.model_copy(update={"base_url": self._base_url})

        try:
            message = session.create_text_message(event_body(event))
            message.set_long_property(TIMESTAMP_HEADER_NAME, epoch_millis(event.timestamp))
            if event.base_url:
                message.set_string_property(BASE_URL_HEADER_NAME, event.base_url)
            message.set_string_property(IDENTIFIER_HEADER_NAME, event.path)
            message.set_string_property(
                EVENT_TYPE_HEADER_NAME, ",".join(event.event_type_uris())
            )
            message.set_string_property(USER_HEADER_NAME, event.user_id)
            message.set_string_property(USER_AGENT_HEADER_NAME, event.user_agent)
            message.set_string_property(
                RESOURCE_TYPE_HEADER_NAME, ",".join(event.resource_types)
            )
            message.set_string_property(EVENT_ID_HEADER_NAME, event.event_id)
        except MessagingError as exc:
            raise MessageBuildError(
                f"Cannot build message for {event.path}: {exc}"
            ) from exc

        logger.debug(
            "Built message %s for %s", getattr(message, "message_id", None), event.path
        )
        return message
