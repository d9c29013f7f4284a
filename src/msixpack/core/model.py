"""Core data model for APPX/MSIX package manifests.

Records mirror the modeled subset of the `AppxManifest.xml` schema:
- frozen dataclasses; repeated elements are tuples
- optional values are `None` (absent), never a filler default
- no parsing or rendering here; see `msixpack.io` and `msixpack.codecs`

Callers that need to edit a decoded manifest use `dataclasses.replace`.

This module must not import io/codecs/build/cli.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from msixpack.core.capability import AnyCapability
from msixpack.core.defaults import (
    FOUNDATION_NAMESPACE,
    RESCAP_NAMESPACE,
    UAP_NAMESPACE,
    default_device_families,
)


@dataclass(frozen=True)
class Identity:
    name: str
    version: str
    publisher: str
    processor_architecture: Optional[str] = None


@dataclass(frozen=True)
class Properties:
    """Store-facing package properties.

    Each field renders as a single child element (see `msixpack.core.wrapper`).
    Fields are typed optional so the absent state is representable; the decoder
    still requires the first three.
    """

    display_name: Optional[str] = None
    publisher_display_name: Optional[str] = None
    logo: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Resource:
    language: Optional[str] = None
    scale: Optional[int] = None
    dx_feature_level: Optional[str] = None


@dataclass(frozen=True)
class Resources:
    resource: tuple[Resource, ...] = ()


@dataclass(frozen=True)
class TargetDeviceFamily:
    name: str
    min_version: str
    max_version_tested: str


@dataclass(frozen=True)
class Dependencies:
    target_device_family: tuple[TargetDeviceFamily, ...] = field(default_factory=default_device_families)


@dataclass(frozen=True)
class ShowOn:
    tile: str


@dataclass(frozen=True)
class ShowNameOnTiles:
    show_on: tuple[ShowOn, ...] = ()


@dataclass(frozen=True)
class DefaultTile:
    short_name: Optional[str] = None
    logo_71x71: Optional[str] = None
    logo_310x310: Optional[str] = None
    logo_310x150: Optional[str] = None
    show_names_on_tiles: ShowNameOnTiles = field(default_factory=ShowNameOnTiles)


@dataclass(frozen=True)
class SplashScreen:
    image: str


@dataclass(frozen=True)
class LockScreen:
    badge_logo: str
    notification: str


@dataclass(frozen=True)
class VisualElements:
    display_name: str
    description: str
    background_color: str
    logo_150x150: str
    logo_44x44: str
    default_tile: Optional[DefaultTile] = None
    splash_screen: Optional[SplashScreen] = None
    lock_screen: Optional[LockScreen] = None


@dataclass(frozen=True)
class Application:
    id: str
    visual_elements: VisualElements
    executable: Optional[str] = None
    entry_point: Optional[str] = None


@dataclass(frozen=True)
class Applications:
    application: tuple[Application, ...] = ()


@dataclass(frozen=True)
class AppxManifest:
    """Root aggregate, rendered as `<Package>`.

    Namespace fields default to the compatibility constants of
    `msixpack.core.defaults`; cardinality is checked by
    `msixpack.core.validate.validate_manifest`, not at construction, so that
    manifests can be assembled incrementally.
    """

    identity: Identity
    properties: Properties
    applications: Applications
    resources: Resources = field(default_factory=Resources)
    dependencies: Dependencies = field(default_factory=Dependencies)
    capabilities: tuple[AnyCapability, ...] = ()
    ns: str = FOUNDATION_NAMESPACE
    ns_uap: str = UAP_NAMESPACE
    ns_rescap: str = RESCAP_NAMESPACE


__all__ = [
    "AppxManifest",
    "Application",
    "Applications",
    "DefaultTile",
    "Dependencies",
    "Identity",
    "LockScreen",
    "Properties",
    "Resource",
    "Resources",
    "ShowNameOnTiles",
    "ShowOn",
    "SplashScreen",
    "TargetDeviceFamily",
    "VisualElements",
]
