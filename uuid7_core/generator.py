"""
uuid7_core/generator.py — UUIDv7 generation through an external source.

The random and clock work is delegated to the `uuid6` library (RFC 9562
UUIDv7 with a monotonic counter for same-millisecond calls). This module only
checks that what comes back is a well-formed UUIDv7 before handing it out.

The source is injectable so tests and callers with special needs can supply
their own zero-argument callable.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional

from uuid6 import uuid7 as _uuid6_uuid7

from .errors import GenerationError, InvalidArgumentError
from .identifier import UUID7, is_valid


# A zero-argument callable returning a uuid.UUID, a str, or anything whose
# str() is the canonical 36-character form. None means "could not generate".
Source = Callable[[], Any]


class UUID7Generator:
    """Produces validated UUID7 values from an external source.

    Holds no state of its own beyond the source. Thread-safety is whatever
    the source provides; no locking is done here.
    """

    def __init__(self, source: Optional[Source] = None):
        self.source: Source = source if source is not None else _uuid6_uuid7

    def create(self) -> UUID7:
        """Generate one UUIDv7.

        Raises:
            GenerationError: If the source returns None, empty text, or a
                             value that is not a valid UUIDv7.
        """
        raw = self.source()
        value = "" if raw is None else str(raw)

        if not value or not is_valid(value):
            raise GenerationError(
                f"Generator returned an invalid UUIDv7: {value!r}"
            )
        return UUID7(value)

    def create_many(self, count: int) -> list[UUID7]:
        """Generate `count` UUIDv7 values in order.

        Either every identifier is produced or the error propagates and
        nothing is returned.

        Raises:
            InvalidArgumentError: If count is not a non-negative integer.
            GenerationError: If any single generation fails.
        """
        n = _check_count(count)
        return [self.create() for _ in range(n)]


def _check_count(count: Any) -> int:
    # bool is an int subclass but never a meaningful count.
    if isinstance(count, bool):
        raise InvalidArgumentError(
            f"Count must be a non-negative integer: {count!r}"
        )
    try:
        n = operator.index(count)
    except TypeError:
        raise InvalidArgumentError(
            f"Count must be a non-negative integer: {count!r}"
        ) from None
    if n < 0:
        raise InvalidArgumentError(
            f"Count must be a non-negative integer: {count!r}"
        )
    return n


# ---------------------------------------------------------------------------
# Process-wide default
# ---------------------------------------------------------------------------

_default_generator = UUID7Generator()


def create() -> UUID7:
    """Generate one UUIDv7 with the default generator."""
    return _default_generator.create()


def create_many(count: int) -> list[UUID7]:
    """Generate `count` UUIDv7 values with the default generator."""
    return _default_generator.create_many(count)
