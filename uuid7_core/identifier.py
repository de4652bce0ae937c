"""
uuid7_core/identifier.py — Validated UUIDv7 value type and parsing helpers.

A UUID7 is a str that has passed the structural check below. The check is
purely syntactic: layout 8-4-4-4-12, version nibble 7, variant nibble in
{8, 9, a, b}. The embedded timestamp is never checked for plausibility.

Layout (RFC 9562 §5.7):
    48-bit unix_ts_ms | 4-bit version(7) | 12-bit rand_a
    | 2-bit variant(10) | 62-bit rand_b
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .errors import ValidationError


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

UUID7_LENGTH = 36

# Matched with fullmatch(), so a trailing newline is rejected.
UUID7_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Value type
# ---------------------------------------------------------------------------

class UUID7(str):
    """A UUIDv7 string that is known to be structurally valid.

    Instances can only be built through validation: the constructor raises
    ValidationError for anything that does not match UUID7_PATTERN. The text
    is kept exactly as given (no case folding), so a UUID7 compares, hashes
    and serializes like the original string.

    Also usable as a Pydantic field type:

        class Event(BaseModel):
            event_id: UUID7 = Field(default_factory=create)
    """

    __slots__ = ()

    def __new__(cls, value: Any) -> "UUID7":
        if not is_valid(value):
            raise ValidationError(f"Invalid UUIDv7 format: {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"UUID7({str.__repr__(self)})"

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds since the Unix epoch embedded in the first 48 bits."""
        return get_timestamp_ms(self)

    @property
    def timestamp(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return get_timestamp(self)

    def to_uuid(self) -> uuid.UUID:
        """Convert to a standard library uuid.UUID."""
        return uuid.UUID(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Validate as str first, then run it through the constructor.
        # ValidationError is a ValueError, so Pydantic reports it as a
        # regular field error.
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


# ---------------------------------------------------------------------------
# Validation and parsing
# ---------------------------------------------------------------------------

def is_valid(value: Any) -> bool:
    """Return True if value is a str matching the UUIDv7 pattern.

    Never raises; non-string input is simply not valid.
    """
    if not isinstance(value, str) or len(value) != UUID7_LENGTH:
        return False
    return UUID7_PATTERN.fullmatch(value) is not None


def from_string(value: str) -> UUID7:
    """Strictly convert text to a UUID7.

    Raises:
        ValidationError: If value is not a valid UUIDv7 string. The message
                         includes the offending value.
    """
    return UUID7(value)


def try_from_string(value: str) -> Optional[UUID7]:
    """Convert text to a UUID7, returning None instead of raising."""
    if not is_valid(value):
        return None
    return UUID7(value)


# ---------------------------------------------------------------------------
# Timestamp decoding
# ---------------------------------------------------------------------------

def get_timestamp_ms(identifier: str) -> int:
    """Return the 48-bit millisecond timestamp of a validated identifier.

    The input is trusted: groups 1 and 2 (characters [0, 8) and [9, 13))
    are concatenated and parsed as a big-endian hex integer.
    """
    return int(identifier[0:8] + identifier[9:13], 16)


def get_timestamp(identifier: str) -> datetime:
    """Return the creation time of a validated identifier as UTC datetime.

    Timestamps past 9999-12-31 cannot be represented by datetime and raise
    OverflowError; use get_timestamp_ms() for those.
    """
    return _EPOCH + timedelta(milliseconds=get_timestamp_ms(identifier))


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def compare(a: str, b: str) -> int:
    """Compare two identifiers character by character.

    The timestamp occupies the leading characters, so for identifiers in the
    same letter case this is chronological order. Identifiers sharing a
    millisecond are ordered by their random bits, not by creation order.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if the texts are identical.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
