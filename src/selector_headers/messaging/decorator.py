"""Adds selector-friendly copies of message properties.

Property names that contain a period (``org.fcrepo.jms.eventType``) cannot be
used in a message selector.  ``HeaderTransformingMessageFactory`` wraps a base
message factory and, for every such string property on the message it builds,
adds a copy under the transformed name (``orgFcrepoJmsEventType``) with the
same value.  Receivers aware of the naming rule can then select on the copy.

Limitations:
- Only names containing the eligibility marker (default ``.``) are considered.
- Values are read through the string accessor; properties that cannot be read
  as strings are reported as failures and skipped.
- Collisions between a transformed name and an existing property are not
  detected; the later write wins.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict, deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from selector_headers.core.enums import OutcomeStatus
from selector_headers.core.interfaces import IEvent, IMessage, ISession, MessageBuilder
from selector_headers.core.naming import DEFAULT_RULES, IdentifierRules, transform

logger = logging.getLogger(__name__)

PropertyErrorCallback = Callable[[str, str | None, Exception], None]


@dataclass(frozen=True)
class PropertyOutcome:
    """What happened to one property during a decoration pass."""

    name: Any
    status: OutcomeStatus
    transformed_name: str | None = None
    error: str | None = None


@dataclass
class DecorationReport:
    """Per-property outcomes of one pass, in enumeration order."""

    message_id: str | None
    outcomes: list[PropertyOutcome] = field(default_factory=list)

    def _with_status(self, status: OutcomeStatus) -> list[PropertyOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def transformed(self) -> list[PropertyOutcome]:
        return self._with_status(OutcomeStatus.TRANSFORMED)

    @property
    def ineligible(self) -> list[PropertyOutcome]:
        return self._with_status(OutcomeStatus.INELIGIBLE)

    @property
    def failed(self) -> list[PropertyOutcome]:
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed


@dataclass
class PropertyFailure:
    """Record of a property whose selector copy could not be added."""

    name: str
    message_id: str | None
    error_type: str
    error: str
    timestamp: float = field(default_factory=time.monotonic)


class HeaderTransformingMessageFactory:
    """Message factory that decorates the output of a base factory.

    Args:
        base_factory: Builds the initial message, ``(event, session) -> message``.
            Its exceptions propagate unchanged.
        rules: Identifier character classes used by ``transform``.
        marker: Only property names containing this substring are transformed.
        on_property_error: Optional callback ``(property_name, message_id, exc)``
            invoked when a property fails.  Useful for external metrics.
            ``message_id`` is ``None`` for messages that do not expose one.
        max_failures: Number of most recent ``PropertyFailure`` records kept.

    An instance is not thread-safe: decoration mutates the message and the
    failure records and counters without locking.  Share one instance across
    threads only if callers serialize access.
    """

    def __init__(
        self,
        base_factory: MessageBuilder,
        rules: IdentifierRules = DEFAULT_RULES,
        marker: str = ".",
        on_property_error: PropertyErrorCallback | None = None,
        max_failures: int = 1000,
    ) -> None:
        self._base_factory = base_factory
        self._rules = rules
        self._marker = marker
        self._on_property_error = on_property_error

        # Observability
        self._error_counts: dict[str, int] = defaultdict(int)
        self._failures: deque[PropertyFailure] = deque(maxlen=max_failures)
        self._messages_decorated: int = 0
        self._properties_added: int = 0

    def __call__(self, event: IEvent, session: ISession) -> IMessage:
        return self.get_message(event, session)

    def get_message(self, event: IEvent, session: ISession) -> IMessage:
        """Build the base message for ``event`` and add selector copies.

        Returns the message produced by the base factory, mutated in place.
        """
        logger.debug("Generating message for resource %s", getattr(event, "path", None))
        message = self._base_factory(event, session)
        self.decorate_message(message)
        return message

    def is_eligible(self, name: Any) -> bool:
        return isinstance(name, str) and self._marker in name

    def decorate_message(self, message: IMessage) -> DecorationReport:
        """Add a transformed-name copy of every eligible property.

        Only the properties present when the pass starts are visited.  A
        failure on one property is recorded and never stops the others.
        """
        message_id = getattr(message, "message_id", None)
        report = DecorationReport(message_id=message_id)

        for name in list(message.property_names()):
            if not self.is_eligible(name):
                report.outcomes.append(PropertyOutcome(name, OutcomeStatus.INELIGIBLE))
                continue
            report.outcomes.append(self._copy_property(message, message_id, name))

        self._messages_decorated += 1
        return report

    def _copy_property(
        self, message: IMessage, message_id: str | None, name: str
    ) -> PropertyOutcome:
        try:
            transformed = transform(name, self._rules)
            value = message.get_string_property(name)
            logger.debug(
                "Adding header '%s', with value '%s' to message %s",
                transformed,
                value,
                message_id,
            )
            message.set_string_property(transformed, value)
        except Exception as exc:
            self._record_failure(message_id, name, exc)
            return PropertyOutcome(name, OutcomeStatus.FAILED, error=str(exc))

        self._properties_added += 1
        return PropertyOutcome(name, OutcomeStatus.TRANSFORMED, transformed_name=transformed)

    def _record_failure(self, message_id: str | None, name: str, exc: Exception) -> None:
        self._error_counts[name] += 1
        self._failures.append(
            PropertyFailure(
                name=name,
                message_id=message_id,
                error_type=type(exc).__name__,
                error=str(exc),
            )
        )
        logger.error(
            "Error transforming property name %s to a String value: %s",
            name,
            exc,
            exc_info=exc,
        )

        if self._on_property_error is not None:
            try:
                self._on_property_error(name, message_id, exc)
            except Exception:
                logger.warning("on_property_error callback failed", exc_info=True)

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    def get_error_counts(self) -> dict[str, int]:
        """Return per-property-name failure counts."""
        return dict(self._error_counts)

    @property
    def failures(self) -> list[PropertyFailure]:
        """Snapshot of the most recent property failures, oldest first."""
        return list(self._failures)

    def clear_failures(self) -> list[PropertyFailure]:
        """Drain the failure list and return all entries."""
        drained = list(self._failures)
        self._failures.clear()
        return drained

    @property
    def messages_decorated(self) -> int:
        return self._messages_decorated

    @property
    def properties_added(self) -> int:
        return self._properties_added
