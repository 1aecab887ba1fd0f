"""Unit tests for the in-memory TextMessage property model."""

from __future__ import annotations

import pytest

from selector_headers.core.errors import (
    InvalidPropertyNameError,
    MessageNotWriteableError,
    PropertyNotFoundError,
    PropertyTypeError,
)
from selector_headers.core.interfaces import IMessage
from selector_headers.messaging.message import TextMessage


class TestProperties:
    def test_satisfies_message_protocol(self):
        assert isinstance(TextMessage(), IMessage)

    def test_names_in_insertion_order(self):
        msg = TextMessage()
        msg.set_string_property("b", "1")
        msg.set_string_property("a", "2")
        msg.set_long_property("c", 3)
        assert msg.property_names() == ["b", "a", "c"]

    def test_names_are_a_snapshot(self):
        msg = TextMessage()
        msg.set_string_property("a", "1")
        names = msg.property_names()
        msg.set_string_property("b", "2")
        assert names == ["a"]

    def test_overwrite_keeps_position(self):
        msg = TextMessage()
        msg.set_string_property("a", "1")
        msg.set_string_property("b", "2")
        msg.set_string_property("a", "3")
        assert msg.property_names() == ["a", "b"]
        assert msg.get_string_property("a") == "3"

    def test_missing_property_raises(self):
        with pytest.raises(PropertyNotFoundError) as exc_info:
            TextMessage().get_string_property("nope")
        assert exc_info.value.name == "nope"

    @pytest.mark.parametrize(
        "value, expected",
        [(1520000000000, "1520000000000"), (1.5, "1.5"), (True, "true"), (False, "false"), ("s", "s")],
    )
    def test_primitive_values_read_as_string(self, value, expected):
        msg = TextMessage()
        msg.set_property("p", value)
        assert msg.get_string_property("p") == expected

    @pytest.mark.parametrize("value", [b"raw", None, [1], {"a": 1}])
    def test_non_primitive_value_not_readable_as_string(self, value):
        msg = TextMessage()
        msg.set_object_property("p", value)
        with pytest.raises(PropertyTypeError):
            msg.get_string_property("p")

    @pytest.mark.parametrize("name", ["", 7, None])
    def test_invalid_names_rejected(self, name):
        with pytest.raises(InvalidPropertyNameError):
            TextMessage().set_string_property(name, "v")

    def test_long_property_coerced(self):
        msg = TextMessage()
        msg.set_long_property("t", 12.0)
        assert msg.get_property("t") == 12
        assert isinstance(msg.get_property("t"), int)


class TestReadOnly:
    def test_writes_rejected_after_read_only(self):
        msg = TextMessage()
        msg.make_read_only()
        with pytest.raises(MessageNotWriteableError):
            msg.set_string_property("a", "1")

    def test_clear_properties_makes_writeable(self):
        msg = TextMessage()
        msg.set_string_property("a", "1")
        msg.make_read_only()
        msg.clear_properties()

        assert msg.property_names() == []
        msg.set_string_property("b", "2")
        assert msg.read_only is False


class TestIdentity:
    def test_generated_message_id(self):
        assert TextMessage().message_id.startswith("ID:")

    def test_distinct_ids(self):
        assert TextMessage().message_id != TextMessage().message_id

    def test_explicit_id(self):
        assert TextMessage(message_id="ID:x").message_id == "ID:x"

    def test_timestamp_is_utc(self):
        assert TextMessage().timestamp.tzinfo is not None
