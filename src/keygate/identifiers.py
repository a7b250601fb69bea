"""Identifier validation and storage-key encoding.

External callers address objects with either a canonical UUID string
(36 characters, 8-4-4-4-12 hex groups) or a Keystone-style identifier of
at most 32 characters. The key-value store only accepts keys shorter than
32 characters, so identifiers are re-encoded on the way in:

- 36-character UUIDs lose their hyphens and the version nibble (31 chars).
- 32-character Keystone ids are re-hyphenated, checked as UUIDs, then
  encoded the same way.
- Anything shorter already fits and passes through untouched.

The encoding is one-way. There is no decode path.
"""

from __future__ import annotations

import logging
from enum import Enum
from uuid import UUID

UUID_LEN = 36
KEYSTONE_ID_LEN = 32

# Offset of the version nibble once the hyphens are gone.
UUID_VERSION_POS = 12

UUID_TIME_LOW = 8
UUID_TIME_MID = 4
UUID_TIME_HIGH_VERSION = 4
UUID_CLOCK_SEQ = 4
UUID_NODE = 12

_GROUPS = (UUID_TIME_LOW, UUID_TIME_MID, UUID_TIME_HIGH_VERSION, UUID_CLOCK_SEQ, UUID_NODE)

logger = logging.getLogger("keygate.identifiers")


class IdentifierShape(Enum):
    """How an identifier is turned into a storage key."""

    UUID = "uuid"
    KEYSTONE = "keystone"
    SHORT = "short"


def _round_trips(candidate: str) -> bool:
    """True if ``candidate`` parses as a UUID and re-serializes to itself."""
    return str(UUID(candidate)).lower() == candidate.lower()


class KeyEncoder:
    """Validates identifiers and converts them to storage keys.

    Stateless apart from the logger it reports to, so one instance can be
    shared across requests.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def is_valid(self, identifier: str | None) -> bool:
        if identifier is None:
            return False
        self.log.debug("id - %s, length - %d", identifier, len(identifier))

        if len(identifier) == UUID_LEN:
            try:
                return _round_trips(identifier)
            except ValueError:
                self.log.error("Invalid UUID for id - %s", identifier)
                return False
        return 0 < len(identifier) <= KEYSTONE_ID_LEN

    def shape_of(self, identifier: str) -> IdentifierShape:
        """Shape of an already validated identifier."""
        if len(identifier) == UUID_LEN:
            return IdentifierShape.UUID
        if len(identifier) == KEYSTONE_ID_LEN:
            return IdentifierShape.KEYSTONE
        return IdentifierShape.SHORT

    def encode_from_uuid(self, identifier: str | None) -> str | None:
        """Strip hyphens and the version nibble from a canonical UUID."""
        if identifier is None:
            return None
        self.log.debug("id - %s, length - %d", identifier, len(identifier))

        condensed = "".join(identifier.split("-"))
        if len(condensed) <= UUID_VERSION_POS:
            self.log.error("Invalid UUID - %s", identifier)
            return None
        return condensed[:UUID_VERSION_POS] + condensed[UUID_VERSION_POS + 1 :]

    def encode_from_keystone_id(self, identifier: str | None) -> str | None:
        """Encode a 32-character Keystone id that is really a condensed UUID.

        Keystone tenant ids drop the hyphens, so they are put back at the
        canonical group boundaries and the result must be a genuine UUID
        before it is encoded.
        """
        if identifier is None:
            return None
        self.log.debug("id - %s, length - %d", identifier, len(identifier))

        if len(identifier) < KEYSTONE_ID_LEN:
            self.log.error("Invalid UUID - %s", identifier)
            return None

        parts = []
        start = 0
        for width in _GROUPS:
            parts.append(identifier[start : start + width])
            start += width
        candidate = "-".join(parts)

        try:
            if not _round_trips(candidate):
                return None
        except ValueError:
            self.log.error("Invalid object ID - %s", identifier)
            return None
        return self.encode_from_uuid(candidate)

    def to_key(self, identifier: str | None) -> str | None:
        """Storage key for ``identifier``, or None if it has none."""
        if identifier is None:
            return None
        self.log.debug("identifier - %s, length - %d", identifier, len(identifier))
        if not self.is_valid(identifier):
            return None
        return self.encode_valid(identifier)

    def encode_valid(self, identifier: str) -> str | None:
        """Dispatch an already validated identifier to its encoder."""
        shape = self.shape_of(identifier)
        if shape is IdentifierShape.UUID:
            return self.encode_from_uuid(identifier)
        if shape is IdentifierShape.KEYSTONE:
            return self.encode_from_keystone_id(identifier)
        return identifier


_default = KeyEncoder()


def is_valid_identifier(identifier: str | None) -> bool:
    """True if ``identifier`` is a canonical UUID or 1 to 32 characters long."""
    return _default.is_valid(identifier)


def convert_identifier_to_key(identifier: str | None) -> str | None:
    """Storage key for ``identifier``, or None if it is invalid or unconvertible."""
    return _default.to_key(identifier)
