"""
uuid7_core — Validated, time-ordered UUIDv7 identifiers.

Generation is delegated to the `uuid6` library; this package adds the
validated UUID7 type, strict and safe parsing, timestamp extraction and
chronological comparison.
"""

__version__ = "0.1.0"

from .errors import (
    UUID7Error,
    InvalidArgumentError,
    ValidationError,
    GenerationError,
)
from .identifier import (
    UUID7,
    UUID7_LENGTH,
    UUID7_PATTERN,
    is_valid,
    from_string,
    try_from_string,
    get_timestamp,
    get_timestamp_ms,
    compare,
)
from .generator import UUID7Generator, create, create_many
