"""Compatibility constants for APPX/MSIX manifests.

These values are consumed by the Windows installer and must be kept literal:
- the three namespace URIs declared on the `<Package>` root
- the default `TargetDeviceFamily`
- cardinality bounds taken from the foundation schema

The minimum OS version `10.0.16300.0` is deliberate: the installer rejects
`10.0.0.0` for manifests that declare a `<Resource>` element.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from msixpack.core.model import TargetDeviceFamily


FOUNDATION_NAMESPACE = "http://schemas.microsoft.com/appx/manifest/foundation/windows10"
UAP_NAMESPACE = "http://schemas.microsoft.com/appx/manifest/uap/windows10"
RESCAP_NAMESPACE = "http://schemas.microsoft.com/appx/manifest/foundation/windows10/restrictedcapabilities"

DEFAULT_DEVICE_FAMILY_NAME = "Windows.Desktop"
DEFAULT_MIN_VERSION = "10.0.16300.0"
DEFAULT_MAX_VERSION_TESTED = "10.0.20348.0"

# (min, max) occurrences of the repeated child element.
APPLICATIONS_BOUNDS = (1, 100)
RESOURCES_BOUNDS = (0, 200)
TARGET_DEVICE_FAMILY_BOUNDS = (1, 128)


def default_target_device_family() -> "TargetDeviceFamily":
    """Return the `Windows.Desktop` device family used when input omits one."""
    # local import: model imports this module for its own defaults
    from msixpack.core.model import TargetDeviceFamily

    return TargetDeviceFamily(
        name=DEFAULT_DEVICE_FAMILY_NAME,
        min_version=DEFAULT_MIN_VERSION,
        max_version_tested=DEFAULT_MAX_VERSION_TESTED,
    )


def default_device_families() -> "tuple[TargetDeviceFamily, ...]":
    """Default `Dependencies.target_device_family`: the single default family."""
    return (default_target_device_family(),)


__all__ = [
    "FOUNDATION_NAMESPACE",
    "UAP_NAMESPACE",
    "RESCAP_NAMESPACE",
    "DEFAULT_DEVICE_FAMILY_NAME",
    "DEFAULT_MIN_VERSION",
    "DEFAULT_MAX_VERSION_TESTED",
    "APPLICATIONS_BOUNDS",
    "RESOURCES_BOUNDS",
    "TARGET_DEVICE_FAMILY_BOUNDS",
    "default_device_families",
    "default_target_device_family",
]
