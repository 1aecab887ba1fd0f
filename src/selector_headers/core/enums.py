"""Enumerations used across selector-headers."""

from enum import Enum


class EventType(str, Enum):
    """Repository event types, valued by their vocabulary URI."""

    RESOURCE_CREATION = "http://fedora.info/definitions/v4/event#ResourceCreation"
    RESOURCE_MODIFICATION = "http://fedora.info/definitions/v4/event#ResourceModification"
    RESOURCE_DELETION = "http://fedora.info/definitions/v4/event#ResourceDeletion"
    RESOURCE_RELOCATION = "http://fedora.info/definitions/v4/event#ResourceRelocation"
    INBOUND_REFERENCE = "http://fedora.info/definitions/v4/event#InboundReference"

    @property
    def short_name(self) -> str:
        """Fragment of the type URI, e.g. ``ResourceCreation``."""
        return self.value.rsplit("#", 1)[-1]

    @classmethod
    def parse(cls, value: str) -> "EventType":
        """Look up a type by member name, short name or full URI."""
        for member in cls:
            if value in (member.name, member.value, member.short_name):
                return member
            if value.lower() == member.short_name.lower():
                return member
        raise ValueError(f"Unknown event type: {value!r}")


class OutcomeStatus(str, Enum):
    """Result of considering one property during a decoration pass."""

    TRANSFORMED = "transformed"
    INELIGIBLE = "ineligible"
    FAILED = "failed"
