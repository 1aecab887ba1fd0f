"""Selector-safe property names.

Message selectors can only reference properties whose names are valid
identifiers.  ``transform`` maps an arbitrary property name (typically a
dotted, namespaced header such as ``org.fcrepo.jms.eventType``) to an
identifier by scanning it once, left to right:

1. Characters before the first valid identifier-start character are dropped.
2. After the start, identifier-part characters are kept.  Any other character
   is dropped and the next kept character is upper-cased.

So ``org.fcrepo.jms.eventType`` becomes ``orgFcrepoJmsEventType``.  Receivers
that know the rule can select on the transformed name.
"""

from __future__ import annotations

import string
from collections.abc import Callable
from dataclasses import dataclass

CharPredicate = Callable[[str], bool]

_ASCII_START = frozenset(string.ascii_letters + "_$")
_ASCII_PART = _ASCII_START | frozenset(string.digits)


def is_ascii_identifier_start(ch: str) -> bool:
    return ch in _ASCII_START


def is_ascii_identifier_part(ch: str) -> bool:
    return ch in _ASCII_PART


@dataclass(frozen=True)
class IdentifierRules:
    """Character classes that make up a valid identifier.

    ``is_valid_start`` decides which characters may begin an identifier,
    ``is_valid_part`` which may follow it.
    """

    is_valid_start: CharPredicate = is_ascii_identifier_start
    is_valid_part: CharPredicate = is_ascii_identifier_part

    @classmethod
    def from_characters(
        cls,
        extra_start_chars: str = "_$",
        unicode_letters: bool = False,
    ) -> IdentifierRules:
        """Build rules from letters/digits plus a set of extra start symbols.

        Args:
            extra_start_chars: Non-alphanumeric characters accepted both as
                the first character and within the name.
            unicode_letters: Accept any Unicode letter (and digit, after the
                start) instead of ASCII only.
        """
        extra = frozenset(extra_start_chars)

        if unicode_letters:
            def start(ch: str) -> bool:
                return ch.isalpha() or ch in extra

            def part(ch: str) -> bool:
                return ch.isalnum() or ch in extra

            return cls(start, part)

        start_set = frozenset(string.ascii_letters) | extra
        part_set = start_set | frozenset(string.digits)
        return cls(start_set.__contains__, part_set.__contains__)


DEFAULT_RULES = IdentifierRules()
UNICODE_RULES = IdentifierRules.from_characters(unicode_letters=True)


@dataclass
class _ScanState:
    seen_valid_start: bool = False
    pending_capitalize: bool = False


def _step(state: _ScanState, ch: str, rules: IdentifierRules) -> str:
    """Advance the scan by one character, returning what to emit."""
    if not state.seen_valid_start:
        if rules.is_valid_start(ch):
            state.seen_valid_start = True
            return ch
        return ""

    if not rules.is_valid_part(ch):
        state.pending_capitalize = True
        return ""

    if state.pending_capitalize:
        state.pending_capitalize = False
        upper = ch.upper()
        # Single-character case mapping only ("ß" stays "ß").
        return upper if len(upper) == 1 else ch
    return ch


def transform(name: str, rules: IdentifierRules = DEFAULT_RULES) -> str:
    """Transform ``name`` into an identifier usable as a selector.

    Never raises; returns ``""`` when no valid start character exists.
    Names that are already valid identifiers are returned unchanged.

    >>> transform("org.fcrepo.jms.eventType")
    'orgFcrepoJmsEventType'
    >>> transform(".$12$34")
    '$12$34'
    """
    state = _ScanState()
    return "".join(_step(state, ch, rules) for ch in name)


def is_identifier(name: str, rules: IdentifierRules = DEFAULT_RULES) -> bool:
    """True if ``name`` can be used in a selector as-is."""
    if not name or not rules.is_valid_start(name[0]):
        return False
    return all(rules.is_valid_part(ch) for ch in name[1:])
