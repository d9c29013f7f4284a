"""Manifest error kinds.

Every failure raised while decoding, validating or encoding a manifest derives
from `ManifestError` (a `ValueError`). Messages are deterministic and name the
offending field path so that tests can assert on them.
"""

from __future__ import annotations


class ManifestError(ValueError):
    """Base class for all manifest decode/validate/encode failures."""


def _at(path: str) -> str:
    return f" (at {path})" if path else ""


class UnknownFieldError(ManifestError):
    """An input key that is not declared for its containing element."""

    def __init__(self, field: str, container: str, *, path: str = "") -> None:
        self.field = field
        self.container = container
        self.path = path
        super().__init__(f"unknown field {field!r} in {container}{_at(path)}")


class MissingRequiredFieldError(ManifestError):
    """A required input key that is absent or null."""

    def __init__(self, field: str, container: str, *, path: str = "") -> None:
        self.field = field
        self.container = container
        self.path = path
        super().__init__(f"missing required field {field!r} in {container}{_at(path)}")


class FieldTypeError(ManifestError):
    """An input value whose shape does not match the declared field type."""

    def __init__(self, field: str, container: str, *, expected: str, actual: str, path: str = "") -> None:
        self.field = field
        self.container = container
        self.expected = expected
        self.actual = actual
        self.path = path
        super().__init__(f"{container}.{field}: expected {expected}, got {actual}{_at(path)}")


class UnrecognizedVariantError(ManifestError):
    """A capability discriminator outside the closed set of variants."""

    def __init__(self, discriminator: str, *, path: str = "") -> None:
        self.discriminator = discriminator
        self.path = path
        super().__init__(f"unrecognized capability variant {discriminator!r}{_at(path)}")


class CardinalityViolationError(ManifestError):
    """A repeated element occurring fewer/more times than the schema allows.

    `bound` is "min" or "max"; `limit` is the violated bound value.
    """

    def __init__(self, field: str, *, bound: str, limit: int, actual: int) -> None:
        self.field = field
        self.bound = bound
        self.limit = limit
        self.actual = actual
        relation = "at least" if bound == "min" else "at most"
        super().__init__(f"{field}: expected {relation} {limit} entries, got {actual}")


class ManifestEncodingError(ManifestError):
    """A model value that cannot be rendered to the output document."""

    def __init__(self, field: str, cause: str) -> None:
        self.field = field
        self.cause = cause
        super().__init__(f"cannot encode {field}: {cause}")


__all__ = [
    "ManifestError",
    "UnknownFieldError",
    "MissingRequiredFieldError",
    "FieldTypeError",
    "UnrecognizedVariantError",
    "CardinalityViolationError",
    "ManifestEncodingError",
]
