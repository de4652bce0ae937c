"""
uuid7_core/errors.py — Exception hierarchy for uuid7_core.

All errors derive from ValueError so they behave like the ValueErrors
raised by Pydantic validators when a UUID7 is used as a model field.
"""


class UUID7Error(ValueError):
    """Base exception for uuid7_core."""


class InvalidArgumentError(UUID7Error):
    """A caller-supplied argument violates a precondition."""


class ValidationError(UUID7Error):
    """Text does not match the UUIDv7 structural pattern."""


class GenerationError(UUID7Error):
    """The external generator returned no value or an invalid one."""
