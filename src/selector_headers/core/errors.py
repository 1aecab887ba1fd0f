"""Custom exception hierarchy for selector header decoration."""


class SelectorHeaderError(Exception):
    """Base exception for all selector-headers errors."""


# --- Configuration ---
class ConfigError(SelectorHeaderError):
    """Invalid or missing configuration."""


# --- Messaging ---
class MessagingError(SelectorHeaderError):
    """Message construction or delivery error."""


class MessageBuildError(MessagingError):
    """The base message could not be built from an event."""


class SessionClosedError(MessagingError):
    """Operation attempted on a closed session."""


class MessageNotWriteableError(MessagingError):
    """Message properties are read-only (the message was already sent)."""


# --- Properties ---
class PropertyError(SelectorHeaderError):
    """A single message property could not be read or written."""

    def __init__(self, name: object, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Property {name!r}: {reason}")


class PropertyNotFoundError(PropertyError):
    """No property with the requested name exists on the message."""

    def __init__(self, name: object):
        super().__init__(name, "not set on message")


class PropertyTypeError(PropertyError):
    """The property value cannot be read as the requested type."""

    def __init__(self, name: object, value_type: type):
        self.value_type = value_type
        super().__init__(
            name, f"{value_type.__name__} value cannot be read as a string"
        )


class InvalidPropertyNameError(PropertyError):
    """Property names must be non-empty strings."""

    def __init__(self, name: object):
        super().__init__(name, "property name must be a non-empty string")
