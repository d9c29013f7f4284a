"""msixpack core: manifest data model, schema tables and validation.

This package is intentionally standalone and must not import io/codecs/build/cli
to avoid circular dependencies.
"""

from __future__ import annotations

from .capability import AnyCapability, Capability, DeviceCapability, RestrictedCapability
from .defaults import (
    FOUNDATION_NAMESPACE,
    RESCAP_NAMESPACE,
    UAP_NAMESPACE,
    default_device_families,
    default_target_device_family,
)
from .errors import (
    CardinalityViolationError,
    FieldTypeError,
    ManifestEncodingError,
    ManifestError,
    MissingRequiredFieldError,
    UnknownFieldError,
    UnrecognizedVariantError,
)
from .model import (
    Application,
    Applications,
    AppxManifest,
    DefaultTile,
    Dependencies,
    Identity,
    LockScreen,
    Properties,
    Resource,
    Resources,
    ShowNameOnTiles,
    ShowOn,
    SplashScreen,
    TargetDeviceFamily,
    VisualElements,
)
from .validate import validate_manifest
from .wrapper import AbsentElementPolicy, SingletonElement

__all__ = [
    "AbsentElementPolicy",
    "AnyCapability",
    "Application",
    "Applications",
    "AppxManifest",
    "Capability",
    "CardinalityViolationError",
    "DefaultTile",
    "Dependencies",
    "DeviceCapability",
    "FOUNDATION_NAMESPACE",
    "FieldTypeError",
    "Identity",
    "LockScreen",
    "ManifestEncodingError",
    "ManifestError",
    "MissingRequiredFieldError",
    "Properties",
    "RESCAP_NAMESPACE",
    "Resource",
    "Resources",
    "RestrictedCapability",
    "ShowNameOnTiles",
    "ShowOn",
    "SingletonElement",
    "SplashScreen",
    "TargetDeviceFamily",
    "UAP_NAMESPACE",
    "UnknownFieldError",
    "UnrecognizedVariantError",
    "VisualElements",
    "default_device_families",
    "default_target_device_family",
    "validate_manifest",
]
