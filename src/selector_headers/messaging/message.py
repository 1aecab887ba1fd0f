"""In-memory text message with typed properties.

Properties follow broker messaging conventions: names are non-empty strings,
values are ``str``, ``int``, ``float`` or ``bool``, and primitive values can be
read back through the string accessor.  Once a message is sent its properties
become read-only.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from selector_headers.core.errors import (
    InvalidPropertyNameError,
    MessageNotWriteableError,
    PropertyNotFoundError,
    PropertyTypeError,
)
from selector_headers.core.ids import new_message_id, utc_now

PropertyValue = str | int | float | bool

_STRING_CONVERTIBLE = (str, int, float, bool)


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TextMessage:
    """Message carrying a text body and insertion-ordered properties."""

    def __init__(
        self,
        body: str = "",
        message_id: str | None = None,
        timestamp: datetime | None = None,
    ) -> None:
        self.body = body
        self._message_id = message_id or new_message_id()
        self.timestamp = timestamp or utc_now()
        self.destination: str | None = None
        self._properties: dict[str, Any] = {}
        self._read_only = False

    @property
    def message_id(self) -> str:
        return self._message_id

    @property
    def read_only(self) -> bool:
        return self._read_only

    def make_read_only(self) -> None:
        self._read_only = True

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def property_names(self) -> list[str]:
        """Snapshot of the property names, in insertion order."""
        return list(self._properties)

    def property_exists(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str) -> Any:
        try:
            return self._properties[name]
        except KeyError:
            raise PropertyNotFoundError(name) from None

    def get_string_property(self, name: str) -> str:
        value = self.get_property(name)
        if not isinstance(value, _STRING_CONVERTIBLE):
            raise PropertyTypeError(name, type(value))
        return _to_string(value)

    def properties(self) -> dict[str, Any]:
        return dict(self._properties)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def set_property(self, name: str, value: PropertyValue) -> None:
        """Set a typed property, replacing any existing value."""
        self.set_object_property(name, value)

    def set_object_property(self, name: str, value: Any) -> None:
        """Set a property of any type.  Only primitives read back as strings."""
        if self._read_only:
            raise MessageNotWriteableError(
                f"Message {self._message_id} properties are read-only"
            )
        if not isinstance(name, str) or not name:
            raise InvalidPropertyNameError(name)
        self._properties[name] = value

    def set_string_property(self, name: str, value: str) -> None:
        self.set_property(name, value)

    def set_long_property(self, name: str, value: int) -> None:
        self.set_property(name, int(value))

    def clear_properties(self) -> None:
        """Remove all properties and make them writeable again."""
        self._properties.clear()
        self._read_only = False

    def __repr__(self) -> str:
        return (
            f"TextMessage(message_id={self._message_id!r}, "
            f"properties={len(self._properties)})"
        )
