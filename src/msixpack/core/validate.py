"""Document-level validation for manifests.

Only the cardinality bounds of the repeated top-level elements are enforced
here; the installer re-validates the full schema on its own. Checks run in a
fixed order (applications, resources, dependencies) and the first violation is
raised so that error messages are deterministic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sized

from msixpack.core.defaults import APPLICATIONS_BOUNDS, RESOURCES_BOUNDS, TARGET_DEVICE_FAMILY_BOUNDS
from msixpack.core.errors import CardinalityViolationError

if TYPE_CHECKING:  # pragma: no cover
    from msixpack.core.model import AppxManifest


def check_cardinality(field: str, values: Sized, bounds: tuple[int, int]) -> None:
    """Raise `CardinalityViolationError` if `len(values)` is outside `bounds` (inclusive)."""
    lo, hi = bounds
    n = len(values)
    if n < lo:
        raise CardinalityViolationError(field, bound="min", limit=lo, actual=n)
    if n > hi:
        raise CardinalityViolationError(field, bound="max", limit=hi, actual=n)


def validate_manifest(manifest: "AppxManifest") -> "AppxManifest":
    """Validate document-level invariants and return the manifest unchanged."""
    check_cardinality("applications.application", manifest.applications.application, APPLICATIONS_BOUNDS)
    check_cardinality("resources.resource", manifest.resources.resource, RESOURCES_BOUNDS)
    check_cardinality(
        "dependencies.target_device_family",
        manifest.dependencies.target_device_family,
        TARGET_DEVICE_FAMILY_BOUNDS,
    )
    return manifest


__all__ = [
    "check_cardinality",
    "validate_manifest",
]
